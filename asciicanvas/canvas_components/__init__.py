from .core import BoundsPolicy, BoxStyle, EndType, Side
from .conflict import ConflictResolver
from .alignment import TextAlignment
from .connector import ConnectorDescriptor, ConnectorShape, select_connector_shape
from .renderer import ConnectorRenderer
from .canvas import TextCanvas

__all__ = [
    "BoundsPolicy",
    "BoxStyle",
    "EndType",
    "Side",
    "ConflictResolver",
    "TextAlignment",
    "ConnectorDescriptor",
    "ConnectorShape",
    "ConnectorRenderer",
    "select_connector_shape",
    "TextCanvas",
]
