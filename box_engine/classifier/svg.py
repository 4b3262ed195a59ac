"""
SVG element category classifier.

Categories are membership tests on the element kind; an element may belong
to several categories at once.
"""

from enum import Enum
from typing import Any, FrozenSet

from . import categories
from .accessors import BoxAccessors
from .identity import node_name_one_of
from .replaced import non_replaced
from .style import inline
from .table import table_column, table_column_group


class SvgCategory(Enum):
    ANIMATION = "animation"
    BASIC_SHAPE = "basic-shape"
    CONTAINER = "container"
    DESCRIPTIVE = "descriptive"
    FILTER_PRIMITIVE = "filter-primitive"
    FONT = "font"
    GRADIENT = "gradient"
    GRAPHICS = "graphics"
    GRAPHICS_REFERENCING = "graphics-referencing"
    LIGHT_SOURCE = "light-source"
    NEVER_RENDERED = "never-rendered"
    PAINT_SERVER = "paint-server"
    RENDERABLE = "renderable"
    SHAPE = "shape"
    STRUCTURAL = "structural"
    TEXT_CONTENT = "text-content"
    TEXT_CONTENT_CHILD = "text-content-child"
    UNCATEGORIZED = "uncategorized"


def svg_animation_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_ANIMATION_ELEMENTS)


def svg_basic_shape(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_BASIC_SHAPES)


def svg_container_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_CONTAINER_ELEMENTS)


def svg_container_excluding_defs(node: Any, access: BoxAccessors) -> bool:
    if access.node_name(node) == "defs":
        return False
    return svg_container_element(node, access)


def svg_descriptive_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_DESCRIPTIVE_ELEMENTS)


def svg_filter_primitive_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_FILTER_PRIMITIVE_ELEMENTS)


def svg_font_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_FONT_ELEMENTS)


def svg_gradient_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_GRADIENT_ELEMENTS)


def svg_graphics_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_GRAPHICS_ELEMENTS)


def svg_graphics_referencing_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_GRAPHICS_REFERENCING_ELEMENTS)


def svg_light_source_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_LIGHT_SOURCE_ELEMENTS)


def svg_never_rendered_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_NEVER_RENDERED_ELEMENTS)


def svg_paint_server_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_PAINT_SERVER_ELEMENTS)


def svg_renderable_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_RENDERABLE_ELEMENTS)


def svg_shape_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_SHAPE_ELEMENTS)


def svg_structural_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_STRUCTURAL_ELEMENTS)


def svg_text_content_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_TEXT_CONTENT_ELEMENTS)


def svg_text_content_child_element(node: Any, access: BoxAccessors) -> bool:
    """
    A ``textPath`` or ``tspan`` element.

    The enclosing text content search starts at the node itself, and a
    ``textPath`` or ``tspan`` is itself one, so the check comes down to the
    element kind.
    """
    if not node_name_one_of(node, access, categories.SVG_TEXT_CONTENT_CHILD_ELEMENTS):
        return False
    return access.closest_of_kind(node, *categories.SVG_TEXT_CONTENT_PARENTS) is not None


def svg_uncategorized_element(node: Any, access: BoxAccessors) -> bool:
    return node_name_one_of(node, access, categories.SVG_UNCATEGORIZED_ELEMENTS)


def transformable_element(node: Any, access: BoxAccessors) -> bool:
    """
    Check if the ``transform`` property applies to the node.

    Transformable elements are those laid out by the CSS box model except
    non-replaced inline boxes, table-column boxes and table-column-group
    boxes, intersected here with the SVG side of the definition: paint
    servers, ``clipPath``, and renderable elements that are not text content
    children.
    """
    box_model_ok = (not (non_replaced(node, access) and inline(node, access))
                    and not table_column(node, access)
                    and not table_column_group(node, access))
    if not box_model_ok:
        return False

    return (svg_paint_server_element(node, access)
            or access.node_name(node) == "clipPath"
            or (svg_renderable_element(node, access)
                and not svg_text_content_child_element(node, access)))


_CATEGORY_PREDICATES = (
    (SvgCategory.ANIMATION, svg_animation_element),
    (SvgCategory.BASIC_SHAPE, svg_basic_shape),
    (SvgCategory.CONTAINER, svg_container_element),
    (SvgCategory.DESCRIPTIVE, svg_descriptive_element),
    (SvgCategory.FILTER_PRIMITIVE, svg_filter_primitive_element),
    (SvgCategory.FONT, svg_font_element),
    (SvgCategory.GRADIENT, svg_gradient_element),
    (SvgCategory.GRAPHICS, svg_graphics_element),
    (SvgCategory.GRAPHICS_REFERENCING, svg_graphics_referencing_element),
    (SvgCategory.LIGHT_SOURCE, svg_light_source_element),
    (SvgCategory.NEVER_RENDERED, svg_never_rendered_element),
    (SvgCategory.PAINT_SERVER, svg_paint_server_element),
    (SvgCategory.RENDERABLE, svg_renderable_element),
    (SvgCategory.SHAPE, svg_shape_element),
    (SvgCategory.STRUCTURAL, svg_structural_element),
    (SvgCategory.TEXT_CONTENT, svg_text_content_element),
    (SvgCategory.TEXT_CONTENT_CHILD, svg_text_content_child_element),
    (SvgCategory.UNCATEGORIZED, svg_uncategorized_element),
)


def svg_categories(node: Any, access: BoxAccessors) -> FrozenSet[SvgCategory]:
    """Every SVG category the node's kind belongs to."""
    return frozenset(category for category, predicate in _CATEGORY_PREDICATES
                     if predicate(node, access))
