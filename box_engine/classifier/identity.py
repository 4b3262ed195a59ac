"""
Element identity predicates: node kind and namespace membership.
"""

from typing import Any, Iterable

from .accessors import BoxAccessors
from .categories import SVG_NAMESPACE


def node_name(node: Any, access: BoxAccessors) -> str:
    """The node kind as reported by the node provider."""
    return access.node_name(node)


def node_name_one_of(node: Any, access: BoxAccessors, names: Iterable[str]) -> bool:
    """
    Check if the node's kind is one of ``names``.

    Names are compared exactly; the node provider is expected to normalize
    case. An empty ``names`` never matches.
    """
    return access.node_name(node) in names


def has_namespace(node: Any, access: BoxAccessors, uri: str) -> bool:
    return access.namespace(node) == uri


def has_svg_namespace(node: Any, access: BoxAccessors) -> bool:
    return has_namespace(node, access, SVG_NAMESPACE)
