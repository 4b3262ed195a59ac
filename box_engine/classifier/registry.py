"""
Name table of the node predicates.

Predicates are registered under their snake_case name and can also be
looked up by the camelCase name inspection front ends use
(``blockContainerWithInlineContext``).
"""

import re
from typing import Any, Callable, Dict

from . import box_model, identity, replaced, ruby, style, svg, table
from .accessors import BoxAccessors
from .errors import UnknownPredicateError

Predicate = Callable[[Any, BoxAccessors], bool]

_MODULE_PREDICATES = {
    identity: ("has_svg_namespace",),
    style: (
        "absolute", "position_absolute", "fixed", "position_relative",
        "position_static", "positioned_element", "floated",
        "overflow_hidden", "overflow_visible", "has_animation_name",
        "has_transform", "has_transition_duration", "multi_col_container",
        "inline", "inline_block", "inline_table", "list_item", "marker",
        "list_style_type_none", "disabled",
    ),
    replaced: (
        "replaced", "non_replaced", "non_replaced_inline_box",
        "accepts_input", "accepts_width", "accepts_height",
        "accepts_width_and_height",
    ),
    box_model: (
        "block_level_element", "block_container_with_block_context",
        "block_container_with_inline_context", "block_container", "in_flow",
        "has_horizontal_scrollbar", "has_vertical_scrollbar", "has_scrollbar",
        "is_grid_element", "has_grid_ancestor",
    ),
    table: (
        "table", "table_cell", "table_caption_box", "table_column",
        "table_column_group", "table_row", "table_row_group", "table_header",
        "internal_table_element", "internal_table_element_except_table_cells",
        "internal_table_element_where_border_collapse_is_collapse",
    ),
    ruby: (
        "ruby_base", "ruby_annotation", "ruby_annotation_container",
        "ruby_base_container", "internal_ruby_box",
    ),
    svg: (
        "svg_animation_element", "svg_basic_shape", "svg_container_element",
        "svg_container_excluding_defs", "svg_descriptive_element",
        "svg_filter_primitive_element", "svg_font_element",
        "svg_gradient_element", "svg_graphics_element",
        "svg_graphics_referencing_element", "svg_light_source_element",
        "svg_never_rendered_element", "svg_paint_server_element",
        "svg_renderable_element", "svg_shape_element",
        "svg_structural_element", "svg_text_content_element",
        "svg_text_content_child_element", "svg_uncategorized_element",
        "transformable_element",
    ),
}

PREDICATES: Dict[str, Predicate] = {
    name: getattr(module, name)
    for module, names in _MODULE_PREDICATES.items()
    for name in names
}


def to_snake_case(name: str) -> str:
    """``acceptsWidthAndHeight`` -> ``accepts_width_and_height``."""
    return re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', name).lower()


def to_camel_case(name: str) -> str:
    """``accepts_width_and_height`` -> ``acceptsWidthAndHeight``."""
    head, *rest = name.split('_')
    return head + "".join(part.capitalize() for part in rest)


def get_predicate(name: str) -> Predicate:
    """
    Look up a predicate by snake_case or camelCase name.

    Raises:
        UnknownPredicateError: If no predicate has that name
    """
    predicate = PREDICATES.get(name) or PREDICATES.get(to_snake_case(name))
    if predicate is None:
        raise UnknownPredicateError(name)
    return predicate


def predicate_names() -> list:
    """All registered snake_case names, sorted."""
    return sorted(PREDICATES)
