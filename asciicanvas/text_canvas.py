from .canvas_components import (
    BoundsPolicy,
    BoxStyle,
    ConflictResolver,
    ConnectorDescriptor,
    ConnectorShape,
    EndType,
    Side,
    TextAlignment,
    TextCanvas,
    select_connector_shape,
)

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
]
