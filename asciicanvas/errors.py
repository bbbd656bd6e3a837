class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class InvalidDimensionError(ConfigurationError):
    pass


class LayoutOverflowError(DiagramError):
    pass


class OutOfBoundsError(LayoutOverflowError, IndexError):
    pass


class InvalidGlyphError(DiagramError, ValueError):
    pass


class ConnectorShapeError(DiagramError):
    pass
