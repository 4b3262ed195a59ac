"""
Box-model composite predicates: block-level boxes, block containers and
their formatting context, flow status, scrollbars and grid ancestry.
"""

from typing import Any

from .accessors import BoxAccessors
from .categories import BLOCK_LEVEL_DISPLAYS
from .style import absolute, fixed, floated, style_equals


def is_block(node: Any, access: BoxAccessors) -> bool:
    """Check if ``node``'s display is one of the block-level keywords."""
    return style_equals(node, access, "display", BLOCK_LEVEL_DISPLAYS)


def block_level_element(node: Any, access: BoxAccessors) -> bool:
    return is_block(node, access)


def block_container_with_block_context(node: Any, access: BoxAccessors) -> bool:
    """
    A block-level element establishing a block formatting context: at least
    one of its children is block-level.

    A block-level element with no children at all also counts; an empty
    container defaults to a block context. It can therefore satisfy this and
    ``block_container_with_inline_context`` at the same time.
    """
    if not is_block(node, access):
        return False

    children = access.children(node)
    if not children:
        return True
    return any(is_block(child, access) for child in children)


def block_container_with_inline_context(node: Any, access: BoxAccessors) -> bool:
    """A block-level element none of whose children is block-level."""
    if not is_block(node, access):
        return False
    return not any(is_block(child, access) for child in access.children(node))


def block_container(node: Any, access: BoxAccessors) -> bool:
    return (block_container_with_block_context(node, access)
            or block_container_with_inline_context(node, access))


def in_flow(node: Any, access: BoxAccessors) -> bool:
    """
    Displayed, not floated, and absolutely or fixed positioned.

    This is narrower than the usual meaning of "in flow"; callers rely on
    exactly this composition.
    """
    return (access.style_value(node, "display") != "none"
            and not floated(node, access)
            and (absolute(node, access) or fixed(node, access)))


def has_horizontal_scrollbar(node: Any, access: BoxAccessors) -> bool:
    if style_equals(node, access, "overflow", ("hidden",)):
        return False
    return access.scroll_width(node) > access.client_width(node)


def has_vertical_scrollbar(node: Any, access: BoxAccessors) -> bool:
    if style_equals(node, access, "overflow", ("hidden",)):
        return False
    return access.scroll_height(node) > access.client_height(node)


def has_scrollbar(node: Any, access: BoxAccessors) -> bool:
    return has_horizontal_scrollbar(node, access) or has_vertical_scrollbar(node, access)


def is_grid_element(node: Any, access: BoxAccessors) -> bool:
    """
    Check if ``node`` is block-level with an empty-string
    grid-template-areas, grid-template-rows or grid-template-columns.

    Note that this tests for *empty* values, not for an explicit grid.
    """
    if not is_block(node, access):
        return False
    style = access.style(node)
    return any(style.get(prop) == "" for prop in (
        "grid-template-areas", "grid-template-rows", "grid-template-columns"))


def has_grid_ancestor(node: Any, access: BoxAccessors) -> bool:
    """Check if the node itself or any of its ancestors is a grid element."""
    return access.closest(node, lambda candidate: is_grid_element(candidate, access)) is not None
