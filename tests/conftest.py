"""
Pytest configuration and shared fixtures for box inspector tests.
"""

import pytest

from box_engine.classifier import BoxAccessors, BoxInspector
from box_engine.classifier.providers import NodeProvider, RuleProvider, StyleProvider
from box_engine.dom import Document


class FakeNode:
    """A bare node handle whose state the fake providers read directly."""

    def __init__(self, name="div", style=None, namespace=None, attributes=(),
                 children=(), complete=False, selector_text=None, **extents):
        self.name = name
        self.style = dict(style or {})
        self.namespace = namespace
        self.attributes = set(attributes)
        self.parent = None
        self.children = []
        self.complete = complete
        self.selector_text = selector_text
        self.extents = {"scroll_width": 0, "scroll_height": 0,
                        "client_width": 0, "client_height": 0}
        self.extents.update(extents)
        for child in children:
            self.append(child)

    def append(self, child):
        child.parent = self
        self.children.append(child)
        return child

    def __repr__(self):
        return f"<FakeNode {self.name}>"


class FakeStyleProvider(StyleProvider):
    def __init__(self):
        self.calls = 0

    def get_computed_style(self, node):
        self.calls += 1
        return dict(node.style)


class FakeNodeProvider(NodeProvider):
    def node_name(self, node):
        return node.name

    def namespace(self, node):
        return node.namespace

    def has_attribute(self, node, name):
        return name in node.attributes

    def is_complete(self, node):
        return node.complete

    def scroll_width(self, node):
        return node.extents["scroll_width"]

    def scroll_height(self, node):
        return node.extents["scroll_height"]

    def client_width(self, node):
        return node.extents["client_width"]

    def client_height(self, node):
        return node.extents["client_height"]

    def children(self, node):
        return node.children

    def parent(self, node):
        return node.parent


class FakeRuleProvider(RuleProvider):
    def selector_text(self, node):
        return node.selector_text


@pytest.fixture
def make_node():
    return FakeNode


@pytest.fixture
def style_provider():
    return FakeStyleProvider()


@pytest.fixture
def access(style_provider):
    """Accessors over FakeNode handles."""
    return BoxAccessors(style_provider, FakeNodeProvider(), FakeRuleProvider())


@pytest.fixture
def fake_inspector(style_provider):
    return BoxInspector(style_provider, FakeNodeProvider(), FakeRuleProvider())


@pytest.fixture
def dom_access():
    """Accessors over the reference DOM."""
    return BoxAccessors()


@pytest.fixture
def inspector():
    return BoxInspector()


@pytest.fixture
def parse():
    """Parse an HTML string into a reference DOM document."""
    def _parse(html):
        document = Document()
        assert document.parse_html(html)
        return document
    return _parse
