"""
Collaborator interfaces the classifier reads through, and their
implementations over the reference DOM.

Providers answer questions about nodes they did not create; the classifier
only ever holds a node for the duration of one call.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Union

from ..dom import NodeType

StyleValue = Union[str, int, float]


class StyleProvider(ABC):
    """Source of resolved (computed) style values."""

    @abstractmethod
    def get_computed_style(self, node: Any) -> Mapping[str, StyleValue]:
        """
        Get the resolved style of a node.

        Returns:
            Mapping from CSS property name (kebab-case) to resolved value.
            It must reflect the current state of the node.
        """


class NodeProvider(ABC):
    """Identity, state and tree navigation for nodes."""

    @abstractmethod
    def node_name(self, node: Any) -> str:
        """The node kind, already normalized for comparison."""

    @abstractmethod
    def namespace(self, node: Any) -> Optional[str]:
        """The namespace URI of the node."""

    @abstractmethod
    def has_attribute(self, node: Any, name: str) -> bool:
        """Whether the node carries the named attribute."""

    @abstractmethod
    def is_complete(self, node: Any) -> bool:
        """Whether the resource the node loads (an image) has finished loading."""

    @abstractmethod
    def scroll_width(self, node: Any) -> float:
        pass

    @abstractmethod
    def scroll_height(self, node: Any) -> float:
        pass

    @abstractmethod
    def client_width(self, node: Any) -> float:
        pass

    @abstractmethod
    def client_height(self, node: Any) -> float:
        pass

    @abstractmethod
    def children(self, node: Any) -> List[Any]:
        """Element children of the node, in document order."""

    @abstractmethod
    def parent(self, node: Any) -> Optional[Any]:
        """Parent element of the node, or None at the root."""

    def closest(self, node: Any, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """
        Find the nearest node, starting with ``node`` itself and walking up
        through its ancestors, for which ``predicate`` holds.
        """
        current = node
        while current is not None:
            if predicate(current):
                return current
            current = self.parent(current)
        return None


class RuleProvider(ABC):
    """Access to the style rule that generated a pseudo-element box."""

    @abstractmethod
    def selector_text(self, node: Any) -> Optional[str]:
        """Selector text of the originating rule, or None when there is none."""


class DOMStyleProvider(StyleProvider):
    """Resolved style from ``Element.get_computed_style``."""

    def get_computed_style(self, node: Any) -> Mapping[str, StyleValue]:
        if node.node_type != NodeType.ELEMENT_NODE:
            return {}
        return node.get_computed_style()


class DOMNodeProvider(NodeProvider):
    """Node identity and navigation over the reference DOM."""

    def node_name(self, node: Any) -> str:
        return node.node_name

    def namespace(self, node: Any) -> Optional[str]:
        return getattr(node, 'namespace_uri', None)

    def has_attribute(self, node: Any, name: str) -> bool:
        return node.node_type == NodeType.ELEMENT_NODE and node.has_attribute(name)

    def is_complete(self, node: Any) -> bool:
        return bool(getattr(node, 'complete', False))

    def scroll_width(self, node: Any) -> float:
        return getattr(node, 'scroll_width', 0)

    def scroll_height(self, node: Any) -> float:
        return getattr(node, 'scroll_height', 0)

    def client_width(self, node: Any) -> float:
        return getattr(node, 'client_width', 0)

    def client_height(self, node: Any) -> float:
        return getattr(node, 'client_height', 0)

    def children(self, node: Any) -> List[Any]:
        return node.children

    def parent(self, node: Any) -> Optional[Any]:
        return node.parent_element


class DOMRuleProvider(RuleProvider):
    """Selector text from the cssutils rule attached to a ``PseudoElement``."""

    def selector_text(self, node: Any) -> Optional[str]:
        rule = getattr(node, 'css_rule', None)
        if rule is None:
            return None
        return rule.selectorText
