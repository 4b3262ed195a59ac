"""
Static element-kind and keyword tables used by the predicates.

SVG groupings follow the "SVG elements by category" taxonomy:
https://developer.mozilla.org/docs/Web/SVG/Element#SVG_elements_by_category
"""

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Display keywords

BLOCK_LEVEL_DISPLAYS = frozenset({
    "block", "inline-block", "flex", "inline-flex", "grid", "inline-grid",
})

TABLE_DISPLAYS = frozenset({"table", "inline-table"})

INTERNAL_TABLE_DISPLAYS = frozenset({
    "table-row", "table-row-group", "table-column", "table-column-group",
    "table-cell", "table-header-group", "table-footer-group",
})

INTERNAL_RUBY_DISPLAYS = frozenset({"ruby-base", "ruby-text", "ruby-text-container"})

# Element kinds

# <applet> is gone from the platform and is not listed.
ALWAYS_REPLACED_ELEMENTS = frozenset({
    "br", "button", "canvas", "embed", "hr", "iframe", "math",
    "object", "picture", "svg", "video",
})

INPUT_ELEMENTS = frozenset({
    "color", "date", "datetime", "datetime-local", "email",
    "input", "month", "number", "range", "search", "select",
    "tel", "textarea", "time", "url", "week",
})

TABLE_HEADER_ELEMENT = "th"
RUBY_BASE_CONTAINER_ELEMENT = "rbc"

SVG_ANIMATION_ELEMENTS = frozenset({
    "animate", "animateColor", "animateMotion", "animateTransform",
    "discard", "mpath", "set",
})

SVG_BASIC_SHAPES = frozenset({
    "circle", "ellipse", "line", "polygon", "polyline", "rect",
})

SVG_CONTAINER_ELEMENTS = frozenset({
    "a", "defs", "g", "marker", "mask", "missing-glyph",
    "pattern", "svg", "switch", "symbol", "unknown",
})

SVG_DESCRIPTIVE_ELEMENTS = frozenset({"desc", "metadata", "title"})

SVG_FILTER_PRIMITIVE_ELEMENTS = frozenset({
    "feBlend", "feColorMatrix", "feComponentTransfer", "feComposite",
    "feConvolveMatrix", "feDiffuseLighting", "feDisplacementMap", "feDropShadow",
    "feFlood", "feFuncA", "feFuncB", "feFuncG", "feFuncR", "feGaussianBlur",
    "feImage", "feMerge", "feMergeNode", "feMorphology", "feOffset",
    "feSpecularLighting", "feTile", "feTurbulence",
})

SVG_FONT_ELEMENTS = frozenset({
    "font", "font-face", "font-face-format", "font-face-name",
    "font-face-src", "font-face-uri", "hkern", "vkern",
})

SVG_GRADIENT_ELEMENTS = frozenset({
    "linearGradient", "meshgradient", "radialGradient", "stop",
})

SVG_GRAPHICS_ELEMENTS = frozenset({
    "circle", "ellipse", "image", "line", "mesh", "path",
    "polygon", "polyline", "rect", "text", "use",
})

SVG_GRAPHICS_REFERENCING_ELEMENTS = frozenset({"mesh", "use"})

SVG_LIGHT_SOURCE_ELEMENTS = frozenset({"feDistantLight", "fePointLight", "feSpotLight"})

SVG_NEVER_RENDERED_ELEMENTS = frozenset({
    "clipPath", "defs", "hatch", "linearGradient", "marker", "mask",
    "meshgradient", "metadata", "pattern", "radialGradient", "script",
    "style", "symbol", "title",
})

SVG_PAINT_SERVER_ELEMENTS = frozenset({
    "hatch", "linearGradient", "meshgradient",
    "pattern", "radialGradient", "solidcolor",
})

SVG_RENDERABLE_ELEMENTS = frozenset({
    "a", "circle", "ellipse", "foreignObject", "g", "image", "line", "mesh",
    "path", "polygon", "polyline", "rect", "svg", "switch", "symbol", "text",
    "textPath", "tspan", "unknown", "use",
})

SVG_SHAPE_ELEMENTS = frozenset({
    "circle", "ellipse", "line", "mesh", "path", "polygon", "polyline", "rect",
})

SVG_STRUCTURAL_ELEMENTS = frozenset({"defs", "g", "svg", "symbol", "use"})

SVG_TEXT_CONTENT_ELEMENTS = frozenset({
    "altGlyph", "altGlyphDef", "altGlyphItem", "glyph",
    "glyphRef", "textPath", "text", "tref", "tspan",
})

SVG_TEXT_CONTENT_CHILD_ELEMENTS = frozenset({"textPath", "tspan"})

# Kinds a text content child element must sit inside
SVG_TEXT_CONTENT_PARENTS = ("text", "textPath", "tspan")

SVG_UNCATEGORIZED_ELEMENTS = frozenset({
    "clipPath", "color-profile", "cursor", "filter", "foreignObject",
    "hatchpath", "meshpatch", "meshrow", "script", "style", "view",
})
