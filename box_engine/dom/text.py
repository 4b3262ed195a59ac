"""
Text node implementation for the reference DOM.
"""

from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """A text node. Never generates a box of its own for the inspector."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.TEXT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value

    @data.setter
    def data(self, value: str) -> None:
        self.node_value = value or ""

    def __repr__(self) -> str:
        preview = self.node_value if len(self.node_value) <= 20 else self.node_value[:17] + "..."
        return f"<Text {preview!r}>"
