"""Tests for SVG categories and transformability."""

import pytest

from box_engine.classifier import SvgCategory
from box_engine.classifier import svg
from box_engine.classifier.categories import SVG_NAMESPACE


def svg_node(make_node, name, display="inline", **kwargs):
    return make_node(name, style={"display": display}, namespace=SVG_NAMESPACE, **kwargs)


class TestCategories:
    def test_rect(self, access, make_node):
        assert svg.svg_categories(svg_node(make_node, "rect"), access) == {
            SvgCategory.BASIC_SHAPE, SvgCategory.GRAPHICS,
            SvgCategory.RENDERABLE, SvgCategory.SHAPE,
        }

    def test_defs(self, access, make_node):
        defs = svg_node(make_node, "defs", display="none")
        assert svg.svg_container_element(defs, access)
        assert not svg.svg_container_excluding_defs(defs, access)
        assert svg.svg_never_rendered_element(defs, access)
        assert svg.svg_structural_element(defs, access)

    def test_group_is_container(self, access, make_node):
        assert svg.svg_container_excluding_defs(svg_node(make_node, "g"), access)

    def test_names_are_case_sensitive(self, access, make_node):
        assert svg.svg_gradient_element(svg_node(make_node, "linearGradient"), access)
        assert not svg.svg_gradient_element(svg_node(make_node, "lineargradient"), access)

    @pytest.mark.parametrize("predicate, name", [
        (svg.svg_animation_element, "animateMotion"),
        (svg.svg_descriptive_element, "desc"),
        (svg.svg_filter_primitive_element, "feGaussianBlur"),
        (svg.svg_font_element, "font-face"),
        (svg.svg_graphics_referencing_element, "use"),
        (svg.svg_light_source_element, "fePointLight"),
        (svg.svg_paint_server_element, "solidcolor"),
        (svg.svg_text_content_element, "altGlyph"),
        (svg.svg_uncategorized_element, "foreignObject"),
    ])
    def test_membership(self, access, make_node, predicate, name):
        assert predicate(svg_node(make_node, name), access)
        assert not predicate(svg_node(make_node, "div"), access)

    def test_html_element_has_no_categories(self, access, make_node):
        assert svg.svg_categories(make_node("p"), access) == frozenset()


class TestTextContentChild:
    def test_tspan_in_text(self, access, make_node):
        tspan = svg_node(make_node, "tspan")
        svg_node(make_node, "text", children=[tspan])
        assert svg.svg_text_content_child_element(tspan, access)

    def test_search_starts_at_the_node(self, access, make_node):
        # A lone tspan is its own enclosing text content element
        assert svg.svg_text_content_child_element(svg_node(make_node, "tspan"), access)

    def test_text_itself_is_not_a_child(self, access, make_node):
        assert not svg.svg_text_content_child_element(svg_node(make_node, "text"), access)


class TestTransformable:
    def test_renderable_block(self, access, make_node):
        assert svg.transformable_element(svg_node(make_node, "rect", display="block"), access)

    def test_paint_server_and_clip_path(self, access, make_node):
        assert svg.transformable_element(svg_node(make_node, "linearGradient", display="none"), access)
        assert svg.transformable_element(svg_node(make_node, "clipPath", display="none"), access)

    def test_replaced_inline_svg_root(self, access, make_node):
        assert svg.transformable_element(svg_node(make_node, "svg"), access)

    def test_non_replaced_inline_box(self, access, make_node):
        assert not svg.transformable_element(svg_node(make_node, "rect"), access)
        assert not svg.transformable_element(make_node("span", style={"display": "inline"}), access)

    def test_text_content_child(self, access, make_node):
        tspan = svg_node(make_node, "tspan", display="block")
        svg_node(make_node, "text", display="block", children=[tspan])
        assert not svg.transformable_element(tspan, access)

    @pytest.mark.parametrize("display", ["table-column", "table-column-group"])
    def test_table_columns(self, access, make_node, display):
        assert not svg.transformable_element(svg_node(make_node, "rect", display=display), access)

    def test_not_renderable(self, access, make_node):
        assert not svg.transformable_element(make_node("div", style={"display": "block"}), access)


class TestParsedSvg:
    def test_foreign_content_keeps_case_and_namespace(self, parse, dom_access):
        document = parse(
            '<svg><defs><linearGradient id="g"></linearGradient></defs>'
            '<clipPath id="c"><rect></rect></clipPath>'
            '<text><tspan id="t">a</tspan></text></svg>')
        gradient = document.get_element_by_id("g")
        clip = document.get_element_by_id("c")
        tspan = document.get_element_by_id("t")

        assert dom_access.node_name(gradient) == "linearGradient"
        assert dom_access.namespace(clip) == SVG_NAMESPACE
        assert svg.svg_paint_server_element(gradient, dom_access)
        assert svg.transformable_element(clip, dom_access)
        assert svg.svg_text_content_child_element(tspan, dom_access)
        assert SvgCategory.NEVER_RENDERED in svg.svg_categories(clip, dom_access)
