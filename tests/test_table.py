"""Tests for table role predicates and the border-collapse check."""

import pytest

from box_engine.classifier import TableRole
from box_engine.classifier import table as tb


class TestTableKeywords:
    @pytest.mark.parametrize("display", ["table", "inline-table"])
    def test_table(self, access, make_node, display):
        assert tb.table(make_node("table", style={"display": display}), access)

    def test_single_keyword_predicates(self, access, make_node):
        assert tb.table_cell(make_node("td", style={"display": "table-cell"}), access)
        assert tb.table_caption_box(make_node("caption", style={"display": "table-caption"}), access)
        assert tb.table_column(make_node("col", style={"display": "table-column"}), access)
        assert tb.table_column_group(make_node("colgroup", style={"display": "table-column-group"}), access)
        assert tb.table_row(make_node("tr", style={"display": "table-row"}), access)
        assert tb.table_row_group(make_node("tbody", style={"display": "table-row-group"}), access)

    def test_roles_follow_display_not_kind(self, access, make_node):
        node = make_node("div", style={"display": "table-row"})
        assert tb.table_row(node, access)
        assert not tb.table_row(make_node("tr", style={"display": "block"}), access)

    def test_header_is_element_kind(self, access, make_node):
        assert tb.table_header(make_node("th", style={"display": "block"}), access)
        assert not tb.table_header(make_node("td", style={"display": "table-cell"}), access)


class TestInternalTableElements:
    @pytest.mark.parametrize("display", [
        "table-row", "table-row-group", "table-column", "table-column-group",
        "table-cell", "table-header-group", "table-footer-group",
    ])
    def test_internal_displays(self, access, make_node, display):
        assert tb.internal_table_element(make_node(style={"display": display}), access)

    @pytest.mark.parametrize("display", ["table", "inline-table", "table-caption", "block"])
    def test_not_internal(self, access, make_node, display):
        assert not tb.internal_table_element(make_node(style={"display": display}), access)

    def test_except_cells(self, access, make_node):
        assert not tb.internal_table_element_except_table_cells(
            make_node("td", style={"display": "table-cell"}), access)
        assert tb.internal_table_element_except_table_cells(
            make_node("tr", style={"display": "table-row"}), access)


class TestBorderCollapse:
    def _table(self, make_node, collapse, row):
        return make_node("table", style={"display": "table", "border-collapse": collapse},
                         children=[make_node("tbody", style={"display": "table-row-group"},
                                             children=[row])])

    def test_row_in_collapsed_table(self, access, make_node):
        row = make_node("tr", style={"display": "table-row"})
        self._table(make_node, "collapse", row)
        assert tb.internal_table_element(row, access)
        assert not tb.table_cell(row, access)
        assert tb.internal_table_element_except_table_cells(row, access)
        assert not tb.internal_table_element_where_border_collapse_is_collapse(row, access)

    def test_row_in_separated_table(self, access, make_node):
        row = make_node("tr", style={"display": "table-row"})
        self._table(make_node, "separate", row)
        assert tb.internal_table_element_where_border_collapse_is_collapse(row, access)

    def test_row_without_table(self, access, make_node):
        row = make_node("tr", style={"display": "table-row"})
        assert tb.internal_table_element_where_border_collapse_is_collapse(row, access)

    def test_non_internal_box(self, access, make_node):
        assert tb.internal_table_element_where_border_collapse_is_collapse(
            make_node("div", style={"display": "block"}), access)

    def test_parsed_table(self, parse, dom_access):
        document = parse(
            '<table style="border-collapse: collapse"><tr id="a"><td>1</td></tr></table>'
            '<table><tr id="b"><td>2</td></tr></table>')
        collapsed_row = document.get_element_by_id("a")
        separate_row = document.get_element_by_id("b")
        assert tb.table_row(collapsed_row, dom_access)
        assert not tb.internal_table_element_where_border_collapse_is_collapse(collapsed_row, dom_access)
        assert tb.internal_table_element_where_border_collapse_is_collapse(separate_row, dom_access)


class TestTableRole:
    @pytest.mark.parametrize("display, role", [
        ("table", TableRole.TABLE),
        ("inline-table", TableRole.INLINE_TABLE),
        ("table-caption", TableRole.CAPTION),
        ("table-header-group", TableRole.HEADER_GROUP),
        ("table-cell", TableRole.CELL),
    ])
    def test_role_from_display(self, access, make_node, display, role):
        assert tb.table_role(make_node(style={"display": display}), access) is role

    def test_no_role(self, access, make_node):
        assert tb.table_role(make_node(style={"display": "block"}), access) is None
        assert tb.table_role(make_node(), access) is None
