"""
Read-only facade over the style, node and rule providers.

Every predicate reaches node state through a ``BoxAccessors``. Nothing is
cached: each call goes back to the providers, so a style or tree change
between two calls is always visible. A ``None`` node is rejected here, before
any provider sees it.
"""

from typing import Any, Callable, List, Mapping, Optional

from .errors import InvalidNodeError
from .providers import (
    DOMNodeProvider, DOMRuleProvider, DOMStyleProvider,
    NodeProvider, RuleProvider, StyleProvider, StyleValue,
)


def _require(node: Any, operation: str) -> None:
    if node is None:
        raise InvalidNodeError(operation)


class BoxAccessors:
    """Bundles the providers a classification call reads from."""

    def __init__(self,
                 style_provider: Optional[StyleProvider] = None,
                 node_provider: Optional[NodeProvider] = None,
                 rule_provider: Optional[RuleProvider] = None):
        """
        Args:
            style_provider: Resolved style source, the reference DOM when omitted
            node_provider: Identity and navigation, the reference DOM when omitted
            rule_provider: Pseudo-element rule source, the reference DOM when omitted
        """
        self.style_provider = style_provider or DOMStyleProvider()
        self.node_provider = node_provider or DOMNodeProvider()
        self.rule_provider = rule_provider or DOMRuleProvider()

    # Style

    def style(self, node: Any) -> Mapping[str, StyleValue]:
        _require(node, "style")
        return self.style_provider.get_computed_style(node)

    def style_value(self, node: Any, prop: str, default: Optional[StyleValue] = None) -> Optional[StyleValue]:
        """A single resolved property, or ``default`` when it is absent."""
        return self.style(node).get(prop, default)

    # Identity and state

    def node_name(self, node: Any) -> str:
        _require(node, "node_name")
        return self.node_provider.node_name(node)

    def namespace(self, node: Any) -> Optional[str]:
        _require(node, "namespace")
        return self.node_provider.namespace(node)

    def has_attribute(self, node: Any, name: str) -> bool:
        _require(node, "has_attribute")
        return self.node_provider.has_attribute(node, name)

    def is_complete(self, node: Any) -> bool:
        _require(node, "is_complete")
        return self.node_provider.is_complete(node)

    def scroll_width(self, node: Any) -> float:
        _require(node, "scroll_width")
        return self.node_provider.scroll_width(node)

    def scroll_height(self, node: Any) -> float:
        _require(node, "scroll_height")
        return self.node_provider.scroll_height(node)

    def client_width(self, node: Any) -> float:
        _require(node, "client_width")
        return self.node_provider.client_width(node)

    def client_height(self, node: Any) -> float:
        _require(node, "client_height")
        return self.node_provider.client_height(node)

    # Navigation

    def children(self, node: Any) -> List[Any]:
        _require(node, "children")
        return list(self.node_provider.children(node))

    def parent(self, node: Any) -> Optional[Any]:
        _require(node, "parent")
        return self.node_provider.parent(node)

    def closest(self, node: Any, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """Nearest of ``node`` and its ancestors satisfying ``predicate``."""
        _require(node, "closest")
        return self.node_provider.closest(node, predicate)

    def closest_of_kind(self, node: Any, *kinds: str) -> Optional[Any]:
        """Nearest of ``node`` and its ancestors whose kind is one of ``kinds``."""
        _require(node, "closest_of_kind")
        return self.node_provider.closest(
            node, lambda candidate: self.node_provider.node_name(candidate) in kinds)

    # Rules

    def selector_text(self, node: Any) -> Optional[str]:
        _require(node, "selector_text")
        return self.rule_provider.selector_text(node)
