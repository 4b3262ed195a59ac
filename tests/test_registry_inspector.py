"""Tests for predicate lookup and the BoxInspector front end."""

import logging

import pytest

from box_engine.classifier import (
    BoxInspector, PREDICATES, RubyRole, SvgCategory, TableRole,
    UnknownPredicateError, get_predicate, predicate_names,
)
from box_engine.classifier import box_model
from box_engine.classifier.categories import SVG_NAMESPACE
from box_engine.classifier.registry import to_camel_case, to_snake_case
from box_engine.utils.config import Config


class TestRegistry:
    def test_case_conversion(self):
        assert to_snake_case("acceptsWidthAndHeight") == "accepts_width_and_height"
        assert to_camel_case("accepts_width_and_height") == "acceptsWidthAndHeight"
        assert to_snake_case("table") == "table"

    def test_lookup_by_either_name(self):
        predicate = box_model.block_container_with_inline_context
        assert get_predicate("block_container_with_inline_context") is predicate
        assert get_predicate("blockContainerWithInlineContext") is predicate

    def test_every_camel_case_name_resolves(self):
        for name in PREDICATES:
            assert get_predicate(to_camel_case(name)) is PREDICATES[name]

    def test_unknown_name(self):
        with pytest.raises(UnknownPredicateError) as excinfo:
            get_predicate("isAwesome")
        assert isinstance(excinfo.value, KeyError)
        assert "isAwesome" in str(excinfo.value)

    def test_names_are_sorted(self):
        names = predicate_names()
        assert names == sorted(names)
        assert "transformable_element" in names


class TestInspector:
    def test_check(self, fake_inspector, make_node):
        node = make_node("div", style={"display": "block"})
        assert fake_inspector.check("blockContainer", node)
        assert not fake_inspector.check("replaced", node)

    def test_check_unknown(self, fake_inspector, make_node):
        with pytest.raises(UnknownPredicateError):
            fake_inspector.check("nope", make_node())

    def test_classify_selected_names(self, fake_inspector, make_node):
        node = make_node("video", style={"display": "inline", "position": "absolute"})
        result = fake_inspector.classify(node, ["replaced", "absolute", "floated"])
        assert result == {"replaced": True, "absolute": True, "floated": False}

    def test_classify_all(self, fake_inspector, make_node):
        result = fake_inspector.classify(make_node(style={"display": "block"}))
        assert set(result) == set(PREDICATES)

    def test_matching(self, fake_inspector, make_node):
        node = make_node("th", style={"display": "table-cell", "position": "static"})
        assert fake_inspector.matching(node, ["table_header", "table_cell", "positioned_element"]) == [
            "table_cell", "table_header",
        ]

    def test_tags(self, fake_inspector, make_node):
        assert fake_inspector.table_role(make_node(style={"display": "table-row"})) is TableRole.ROW
        assert fake_inspector.ruby_role(make_node("rbc")) is RubyRole.BASE_CONTAINER
        categories = fake_inspector.svg_categories(make_node("use", namespace=SVG_NAMESPACE))
        assert SvgCategory.GRAPHICS_REFERENCING in categories

    def test_parameterised_queries(self, fake_inspector, make_node):
        node = make_node("rect", style={"display": "none"}, namespace=SVG_NAMESPACE,
                         selector_text="rect::after",
                         children=[make_node(style={"display": "block"})])
        assert fake_inspector.node_name_one_of(node, ["rect"])
        assert fake_inspector.has_namespace(node, SVG_NAMESPACE)
        assert fake_inspector.style_equals(node, "display", ["none"])
        assert fake_inspector.child_has_style_one_of(node, "display", ["block"])
        assert fake_inspector.is_pseudo(node, "after")
        assert fake_inspector.pseudo_one_of(node, ["before", "after"])

    def test_dom_inspector(self, inspector, parse):
        document = parse("<div id='d'><p>block child</p></div>")
        element = document.get_element_by_id("d")
        assert inspector.check("blockContainerWithBlockContext", element)
        assert not inspector.check("blockContainerWithInlineContext", element)


class TestInspectorConfig:
    def test_timing_is_logged(self, tmp_path, parse, caplog):
        config = Config(str(tmp_path / "config.json"))
        config.set("inspector.time_classification", True)
        inspector = BoxInspector.from_config(config)
        element = parse("<span id='s'>x</span>").get_element_by_id("s")

        caplog.set_level(logging.DEBUG, logger="box_engine")
        assert inspector.classify(element, ["inline"]) == {"inline": True}
        assert any("classify took" in record.getMessage() for record in caplog.records)

    def test_timing_disabled_by_default(self, tmp_path, parse, caplog):
        inspector = BoxInspector.from_config(Config(str(tmp_path / "config.json")))
        element = parse("<span id='s'>x</span>").get_element_by_id("s")

        caplog.set_level(logging.DEBUG, logger="box_engine")
        inspector.classify(element, ["inline"])
        assert not any("took" in record.getMessage() for record in caplog.records)
