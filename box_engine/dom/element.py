"""
Element implementation for the reference DOM.
This module implements the parts of the DOM Element interface that the box
inspector reads: identity, attributes, inline style, load state and scroll
measurements.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Union

from .node import Node, NodeType
from ..css.defaults import HTML_NAMESPACE, INHERITED_PROPERTIES, INITIAL_VALUES, user_agent_style
from ..css.parser import CSSParser

logger = logging.getLogger(__name__)

ElementMatcher = Union[str, Callable[['Element'], bool]]

_css_parser = CSSParser()


class Element(Node):
    """
    Element node implementation for the reference DOM.

    HTML element names are lower-cased; names in foreign namespaces such as
    SVG keep their case (``clipPath``, ``linearGradient``).
    """

    def __init__(self,
                 tag_name: str,
                 namespace: Optional[str] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "clipPath")
            namespace: Namespace URI, HTML when omitted
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.namespace_uri = namespace or HTML_NAMESPACE
        if self.namespace_uri == HTML_NAMESPACE:
            tag_name = tag_name.lower()
        self.local_name = tag_name
        self.node_name = tag_name

        self.attributes: Dict[str, str] = {}
        self._style: Dict[str, str] = {}

        # Generated boxes (::before, ::after, ...), kept apart from child_nodes
        self.pseudo_elements: List['PseudoElement'] = []

        # Load state for images, set by whoever fetches the resource
        self.complete: bool = False

        # Layout measurements, reported by the layout that positioned the box
        self.scroll_width: float = 0
        self.scroll_height: float = 0
        self.client_width: float = 0
        self.client_height: float = 0

    @property
    def tag_name(self) -> str:
        return self.local_name

    @property
    def id(self) -> str:
        return self.get_attribute('id') or ""

    def __repr__(self) -> str:
        element_id = f" id={self.id!r}" if self.id else ""
        return f"<Element {self.local_name}{element_id}>"

    # Attributes

    def has_attribute(self, name: str) -> bool:
        """Check if the element has the specified attribute."""
        return name.lower() in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        """Get the value of an attribute, or None if it is absent."""
        return self.attributes.get(name.lower())

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value.

        Setting ``style`` replaces the inline declarations.
        """
        name = name.lower()
        self.attributes[name] = value
        if name == 'style':
            self._style = _css_parser.parse_inline_styles(value)

    def remove_attribute(self, name: str) -> None:
        name = name.lower()
        if name in self.attributes:
            del self.attributes[name]
            if name == 'style':
                self._style.clear()

    # Style

    @property
    def style(self) -> Dict[str, str]:
        """The inline style declarations of this element."""
        return self._style

    def set_style(self, property_name: str, value: str) -> None:
        """
        Set an inline style property.

        Args:
            property_name: CSS property name, kebab-case or camelCase
            value: CSS property value
        """
        kebab_property = re.sub(r'([a-z0-9])([A-Z])', r'\1-\2', property_name).lower()
        self._style[kebab_property] = value
        self._update_style_attribute()

    def remove_style(self, property_name: str) -> None:
        kebab_property = re.sub(r'([a-z0-9])([A-Z])', r'\1-\2', property_name).lower()
        self._style.pop(kebab_property, None)
        self._update_style_attribute()

    def _update_style_attribute(self) -> None:
        """Update the style attribute from the style dictionary."""
        if self._style:
            self.attributes['style'] = "; ".join(f"{prop}: {value}" for prop, value in self._style.items())
        else:
            self.attributes.pop('style', None)

    def get_computed_style(self, inherit_from_parent: bool = True) -> Dict[str, str]:
        """
        Get the resolved style for this element.

        Initial values come first, then values inherited from the parent,
        then the user agent declarations for this element kind, then the
        element's own declarations. A new dictionary is built on every call.

        Args:
            inherit_from_parent: Whether to inherit styles from parent

        Returns:
            Dictionary of resolved property values
        """
        computed_styles = dict(INITIAL_VALUES)

        parent = self.parent_element
        if inherit_from_parent and parent is not None:
            parent_styles = parent.get_computed_style()
            for prop in INHERITED_PROPERTIES:
                if prop in parent_styles:
                    computed_styles[prop] = parent_styles[prop]

        computed_styles.update(user_agent_style(self.local_name, self.namespace_uri))
        computed_styles.update(self._declared_style())
        return computed_styles

    def _declared_style(self) -> Dict[str, str]:
        return self._style

    # Layout state

    def set_scroll_metrics(self,
                           scroll_width: Optional[float] = None,
                           scroll_height: Optional[float] = None,
                           client_width: Optional[float] = None,
                           client_height: Optional[float] = None) -> None:
        """Record the scroll and client extents measured by layout."""
        if scroll_width is not None:
            self.scroll_width = scroll_width
        if scroll_height is not None:
            self.scroll_height = scroll_height
        if client_width is not None:
            self.client_width = client_width
        if client_height is not None:
            self.client_height = client_height

    # Generated boxes

    def attach_pseudo_element(self, pseudo: 'PseudoElement', leading: bool = False) -> 'PseudoElement':
        """
        Bind a generated box to this element.

        The box gets this element as its parent, so it inherits from it and
        ancestor searches start here, but it is not one of the children.

        Args:
            pseudo: The generated box
            leading: List it before the existing generated boxes

        Returns:
            The bound pseudo-element
        """
        if pseudo.parent_node is not None:
            raise ValueError(f"{pseudo!r} is already bound to {pseudo.parent_node!r}")
        pseudo.parent_node = self
        if leading:
            self.pseudo_elements.insert(0, pseudo)
        else:
            self.pseudo_elements.append(pseudo)
        return pseudo

    def get_pseudo_element(self, pseudo_type: str) -> Optional['PseudoElement']:
        """The generated box of the given type, with or without the "::" prefix."""
        pseudo_type = pseudo_type[2:] if pseudo_type.startswith("::") else pseudo_type
        for pseudo in self.pseudo_elements:
            if pseudo.pseudo_type == pseudo_type:
                return pseudo
        return None

    # Traversal

    def closest(self, matcher: ElementMatcher) -> Optional['Element']:
        """
        Find the closest element, starting with this one, that matches.

        Args:
            matcher: A tag name, or a callable taking an element

        Returns:
            The matching element or None if no match is found
        """
        if isinstance(matcher, str):
            name = matcher
            matcher = lambda element: element.local_name == name

        current: Optional[Element] = self
        while current is not None:
            if matcher(current):
                return current
            current = current.parent_element
        return None

    def get_elements_by_tag_name(self, tag_name: str) -> List['Element']:
        """
        Get all descendant elements with the given tag name.

        Args:
            tag_name: The tag name to match, or "*" for every element

        Returns:
            List of matching elements in document order
        """
        match_all = tag_name == "*"
        return [node for node in self.iter_descendants()
                if node.node_type == NodeType.ELEMENT_NODE
                and (match_all or node.local_name == tag_name)]


class PseudoElement(Element):
    """
    A box generated by a style rule for a pseudo-element such as ``::before``.

    The rule that produced the box is kept in ``css_rule`` so its selector
    text can be inspected.
    """

    def __init__(self, pseudo_type: str, css_rule=None,
                 owner_document: Optional['Document'] = None):
        """
        Args:
            pseudo_type: Pseudo-element name, with or without the "::" prefix
            css_rule: The cssutils style rule that generated this box
            owner_document: The document that owns this element
        """
        pseudo_type = pseudo_type[2:] if pseudo_type.startswith("::") else pseudo_type
        super().__init__(f"::{pseudo_type}", None, owner_document)
        self.pseudo_type = pseudo_type
        self.css_rule = css_rule

    @property
    def originating_element(self) -> Optional[Element]:
        return self.parent_element

    def _declared_style(self) -> Dict[str, str]:
        declared = {}
        if self.css_rule is not None:
            declared.update(_css_parser.declarations(self.css_rule))
        declared.update(self._style)
        return declared

    def __repr__(self) -> str:
        return f"<PseudoElement ::{self.pseudo_type}>"
