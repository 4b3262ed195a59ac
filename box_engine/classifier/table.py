"""
Table role classifier.

Roles come from the resolved ``display`` value, except for the header cell
which is recognised by element kind.
"""

from enum import Enum
from typing import Any, Optional

from .accessors import BoxAccessors
from .categories import INTERNAL_TABLE_DISPLAYS, TABLE_DISPLAYS, TABLE_HEADER_ELEMENT
from .style import style_equals


class TableRole(Enum):
    """Table box roles, keyed by the display keyword that produces them."""
    TABLE = "table"
    INLINE_TABLE = "inline-table"
    CAPTION = "table-caption"
    ROW_GROUP = "table-row-group"
    HEADER_GROUP = "table-header-group"
    FOOTER_GROUP = "table-footer-group"
    ROW = "table-row"
    COLUMN_GROUP = "table-column-group"
    COLUMN = "table-column"
    CELL = "table-cell"


_ROLES_BY_DISPLAY = {role.value: role for role in TableRole}


def table(node: Any, access: BoxAccessors) -> bool:
    """Block-level or inline-level table box."""
    return style_equals(node, access, "display", TABLE_DISPLAYS)


def table_cell(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-cell",))


def table_caption_box(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-caption",))


def table_column(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-column",))


def table_column_group(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-column-group",))


def table_row(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-row",))


def table_row_group(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("table-row-group",))


def table_header(node: Any, access: BoxAccessors) -> bool:
    """A header cell element, whatever its display."""
    return access.node_name(node) == TABLE_HEADER_ELEMENT


def internal_table_element(node: Any, access: BoxAccessors) -> bool:
    """Produces a row, row group, column, column group or cell."""
    return style_equals(node, access, "display", INTERNAL_TABLE_DISPLAYS)


def internal_table_element_except_table_cells(node: Any, access: BoxAccessors) -> bool:
    if table_cell(node, access):
        return False
    return internal_table_element(node, access)


def internal_table_element_where_border_collapse_is_collapse(node: Any, access: BoxAccessors) -> bool:
    """
    Negation of "internal table element inside a table with
    ``border-collapse: collapse``".

    The negation is kept as the rule set defines it, even though the name
    reads as the un-negated conjunction. The enclosing table is the nearest
    ``table`` element, starting with the node itself; without one the
    conjunction is false.
    """
    if not internal_table_element(node, access):
        return True
    enclosing = access.closest_of_kind(node, "table")
    collapsed = enclosing is not None and style_equals(enclosing, access, "border-collapse", ("collapse",))
    return not collapsed


def table_role(node: Any, access: BoxAccessors) -> Optional[TableRole]:
    """The table role of the node's box, or None outside the table model."""
    value = access.style_value(node, "display")
    if not isinstance(value, str):
        return None
    return _ROLES_BY_DISPLAY.get(value)
