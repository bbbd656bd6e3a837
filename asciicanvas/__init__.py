from .text_canvas import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "TextCanvas",
    "BoundsPolicy",
    "BoxStyle",
    "ConflictResolver",
    "ConnectorDescriptor",
    "ConnectorShape",
    "EndType",
    "Side",
    "TextAlignment",
    "select_connector_shape",
    "DiagramError",
    "ConfigurationError",
    "InvalidDimensionError",
    "LayoutOverflowError",
    "OutOfBoundsError",
    "InvalidGlyphError",
    "ConnectorShapeError",
]
