"""
Replaced element, input and width/height acceptance predicates.

A replaced element is one whose content comes from outside the document
markup: images, media, embedded documents and form widgets.
"""

from typing import Any

from .accessors import BoxAccessors
from .categories import ALWAYS_REPLACED_ELEMENTS, INPUT_ELEMENTS
from .identity import node_name_one_of
from .style import inline, style_equals
from .table import table_column, table_column_group, table_row, table_row_group


def replaced(node: Any, access: BoxAccessors) -> bool:
    """
    Check if the node is a replaced element.

    ``<audio>`` is replaced only while it exposes a user interface (has a
    ``controls`` attribute) and ``<img>`` only once its image has loaded.
    """
    if node_name_one_of(node, access, ALWAYS_REPLACED_ELEMENTS):
        return True

    name = access.node_name(node)
    if name == "audio" and access.has_attribute(node, "controls"):
        return True
    if name == "img" and access.is_complete(node):
        return True

    return False


def non_replaced(node: Any, access: BoxAccessors) -> bool:
    return not replaced(node, access)


def non_replaced_inline_box(node: Any, access: BoxAccessors) -> bool:
    """A non-replaced element with ``display: inline`` exactly."""
    return non_replaced(node, access) and style_equals(node, access, "display", ("inline",))


def _non_replaced_inline(node: Any, access: BoxAccessors) -> bool:
    # Any inline-level display here, unlike non_replaced_inline_box.
    return non_replaced(node, access) and inline(node, access)


def accepts_input(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, INPUT_ELEMENTS)


def accepts_width(node: Any, access: BoxAccessors) -> bool:
    """Width applies to all elements but non-replaced inline elements, table rows and row groups."""
    return (not _non_replaced_inline(node, access)
            and not table_row(node, access)
            and not table_row_group(node, access))


def accepts_height(node: Any, access: BoxAccessors) -> bool:
    """Height applies to all elements but non-replaced inline elements, table columns and column groups."""
    return (not _non_replaced_inline(node, access)
            and not table_column(node, access)
            and not table_column_group(node, access))


def accepts_width_and_height(node: Any, access: BoxAccessors) -> bool:
    """Both dimensions apply: rows, row groups, columns and column groups are all excluded."""
    return (not _non_replaced_inline(node, access)
            and not table_row(node, access)
            and not table_row_group(node, access)
            and not table_column(node, access)
            and not table_column_group(node, access))
