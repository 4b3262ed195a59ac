"""
Document implementation for the reference DOM.
This module builds element trees from HTML with html5lib, keeping element
namespaces so that SVG and MathML content can be told apart from HTML.
"""

import logging
from typing import List, Optional

import html5lib

from .node import Node, NodeType
from .element import Element, PseudoElement
from .text import Text
from ..css.defaults import HTML_NAMESPACE

logger = logging.getLogger(__name__)

# Pseudo-elements generated before the originating element's content
LEADING_PSEUDO_ELEMENTS = {'before', 'marker'}


class Document(Node):
    """
    Document node for the reference DOM.

    The tree is owned by the document; nodes created through it carry it as
    their ``owner_document``.
    """

    def __init__(self):
        """Initialize an empty Document with an html/head/body skeleton."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"
        self.url: Optional[str] = None
        self._errors: List[str] = []
        self._create_base_structure()

    def _create_base_structure(self) -> None:
        """Create the basic html/head/body structure."""
        html = self.create_element("html")
        html.append_child(self.create_element("head"))
        html.append_child(self.create_element("body"))
        self.append_child(html)

    @property
    def document_element(self) -> Optional[Element]:
        children = self.children
        return children[0] if children else None

    @property
    def head(self) -> Optional[Element]:
        return self._root_child("head")

    @property
    def body(self) -> Optional[Element]:
        return self._root_child("body")

    def _root_child(self, name: str) -> Optional[Element]:
        root = self.document_element
        if root is None:
            return None
        for child in root.children:
            if child.local_name == name:
                return child
        return None

    def create_element(self, tag_name: str, namespace: Optional[str] = None) -> Element:
        """
        Create a new element with the specified tag name.

        Args:
            tag_name: The tag name of the element
            namespace: Optional namespace URI, HTML when omitted

        Returns:
            The new element
        """
        return Element(tag_name, namespace, self)

    def create_text_node(self, data: str) -> Text:
        return Text(data, self)

    def create_pseudo_element(self, element: Element, pseudo_type: str, css_rule=None) -> PseudoElement:
        """
        Create the box a style rule generates for a pseudo-element of ``element``.

        The box is listed in ``element.pseudo_elements`` and never among its
        children. ``::before`` and ``::marker`` boxes are listed first,
        every other pseudo-element last.

        Args:
            element: The originating element
            pseudo_type: Pseudo-element name, with or without the "::" prefix
            css_rule: The cssutils style rule that generated the box

        Returns:
            The new pseudo-element, already attached to ``element``
        """
        pseudo = PseudoElement(pseudo_type, css_rule, self)
        element.attach_pseudo_element(pseudo, leading=pseudo.pseudo_type in LEADING_PSEUDO_ELEMENTS)
        return pseudo

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        for element in self.get_elements_by_tag_name("*"):
            if element.id == element_id:
                return element
        return None

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        """Get all elements with the given tag name, in document order."""
        match_all = tag_name == "*"
        return [node for node in self.iter_descendants()
                if node.node_type == NodeType.ELEMENT_NODE
                and (match_all or node.local_name == tag_name)]

    def parse_html(self, html_content, base_url: Optional[str] = None) -> bool:
        """
        Parse HTML content and replace the contents of this document.

        Args:
            html_content: The HTML content to parse, str or bytes
            base_url: Optional URL the content was loaded from

        Returns:
            True if parsing was successful, False otherwise
        """
        if html_content is None:
            self.handle_error("Cannot parse None HTML content")
            return False

        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')

        for child in list(self.child_nodes):
            self.remove_child(child)

        if base_url:
            self.url = base_url

        logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}")

        try:
            parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder("dom"))
            parsed = parser.parse(html_content)
        except (ValueError, TypeError, AssertionError) as e:
            self.handle_error(f"Error in HTML parser: {e}")
            self._create_base_structure()
            return False

        root = parsed.documentElement
        if root is None:
            logger.warning("No document element found in parsed document, creating basic structure")
            self._create_base_structure()
            return True

        self.append_child(self._convert_element(root))
        logger.debug(f"Parsed document with {len(self.get_elements_by_tag_name('*'))} elements")
        return True

    def _convert_element(self, source) -> Element:
        """
        Convert an html5lib (minidom) element and its subtree.

        Args:
            source: The minidom element to convert

        Returns:
            The converted element
        """
        namespace = source.namespaceURI or HTML_NAMESPACE
        element = self.create_element(source.localName or source.tagName, namespace)

        for name, value in source.attributes.items():
            if name is not None and value is not None:
                element.set_attribute(name, value)

        for child in source.childNodes:
            if child.nodeType == child.ELEMENT_NODE:
                element.append_child(self._convert_element(child))
            elif child.nodeType == child.TEXT_NODE and child.nodeValue.strip():
                element.append_child(self.create_text_node(child.nodeValue))

        return element

    def handle_error(self, error_message: str) -> None:
        """
        Record an error that occurred during document processing.

        Args:
            error_message: The error message
        """
        logger.error(error_message)
        self._errors.append(error_message)

    def get_errors(self) -> List[str]:
        """Get the errors recorded while processing this document."""
        return list(self._errors)
