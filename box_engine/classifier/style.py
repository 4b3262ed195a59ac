"""
Primitive style predicates.

Each predicate reads a single resolved property. Values are compared as
serialized by the style provider; a missing property never equals a
keyword.
"""

from typing import Any, Iterable

from .accessors import BoxAccessors


def style_equals(node: Any, access: BoxAccessors, prop: str, values: Iterable[Any]) -> bool:
    """
    Check if the node's resolved ``prop`` is one of ``values``.

    Args:
        node: The node to check
        access: Provider facade
        prop: CSS property name, e.g. "display"
        values: Candidate values

    Returns:
        True if the current value is among the candidates
    """
    value = access.style_value(node, prop)
    return value is not None and value in values


def style_differs(node: Any, access: BoxAccessors, prop: str, value: Any) -> bool:
    """Check if ``prop`` is set to anything other than ``value``. A missing property is not."""
    current = access.style_value(node, prop)
    return current is not None and current != value


def child_has_style_one_of(node: Any, access: BoxAccessors, prop: str, values: Iterable[Any]) -> bool:
    """Check if any element child of the node has ``prop`` set to one of ``values``."""
    values = tuple(values)
    return any(style_equals(child, access, prop, values) for child in access.children(node))


def display(node: Any, access: BoxAccessors) -> str:
    """The resolved display value, empty when the provider has none."""
    value = access.style_value(node, "display")
    return "" if value is None else str(value)


# Position

def absolute(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "position", ("absolute",))


def position_absolute(node: Any, access: BoxAccessors) -> bool:
    return absolute(node, access)


def fixed(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "position", ("fixed",))


def position_relative(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "position", ("relative",))


def position_static(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "position", ("static",))


def positioned_element(node: Any, access: BoxAccessors) -> bool:
    """Anything but ``position: static``."""
    return not position_static(node, access)


# Float and overflow

def floated(node: Any, access: BoxAccessors) -> bool:
    return style_differs(node, access, "float", "none")


def overflow_hidden(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "overflow", ("hidden",))


def overflow_visible(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "overflow", ("visible",))


# Animation and transforms

def has_animation_name(node: Any, access: BoxAccessors) -> bool:
    return style_differs(node, access, "animation-name", "none")


def has_transform(node: Any, access: BoxAccessors) -> bool:
    return style_differs(node, access, "transform", "none")


def has_transition_duration(node: Any, access: BoxAccessors) -> bool:
    """
    Check for a non-zero transition duration.

    Only the exact serialization "0s" counts as zero; "0ms" or "0s, 0s" do
    not.
    """
    return style_differs(node, access, "transition-duration", "0s")


# Multi-column

def multi_col_container(node: Any, access: BoxAccessors) -> bool:
    """Check for a positive ``column-count``. "auto" is not positive."""
    value = access.style_value(node, "column-count")
    if isinstance(value, bool) or value is None:
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


# Display keywords

def inline(node: Any, access: BoxAccessors) -> bool:
    """Any display value starting with "inline" (inline, inline-block, inline-flex, ...)."""
    return display(node, access).startswith("inline")


def inline_block(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("inline-block",))


def inline_table(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("inline-table",))


def list_item(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("list-item",))


def marker(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("marker",))


def list_style_type_none(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "list-style-type", ("none",))


# Attributes

def disabled(node: Any, access: BoxAccessors) -> bool:
    return access.has_attribute(node, "disabled")
