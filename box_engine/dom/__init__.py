"""
Reference DOM for the box inspector.
This package provides a small element tree that the DOM-backed providers
classify: elements, text, pseudo-elements and an html5lib-backed document.
"""

from .node import Node, NodeType
from .element import Element, PseudoElement
from .text import Text
from .document import Document


class Parser:
    """HTML Parser for creating DOM trees from HTML content."""

    def parse(self, html_content: str, base_url: str = None) -> Document:
        """
        Parse HTML content into a Document.

        Args:
            html_content: The HTML content to parse
            base_url: Optional URL the content was loaded from

        Returns:
            The parsed Document
        """
        document = Document()
        document.parse_html(html_content, base_url)
        return document


__all__ = [
    'Node', 'NodeType', 'Element', 'PseudoElement', 'Text', 'Document', 'Parser'
]
