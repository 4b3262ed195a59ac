"""
Initial values and user agent display defaults for the reference DOM.

Only the properties the box inspector reads are resolved here.
"""

from typing import Dict

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"

# Initial values, as serialized by a computed style
INITIAL_VALUES: Dict[str, str] = {
    'display': 'inline',
    'position': 'static',
    'float': 'none',
    'overflow': 'visible',
    'animation-name': 'none',
    'transform': 'none',
    'transition-duration': '0s',
    'column-count': 'auto',
    'grid-template-areas': 'none',
    'grid-template-rows': 'none',
    'grid-template-columns': 'none',
    'border-collapse': 'separate',
    'list-style-type': 'disc',
}

INHERITED_PROPERTIES = ('border-collapse', 'list-style-type')

# User agent display values for HTML elements
HTML_DISPLAY: Dict[str, str] = {}
HTML_DISPLAY.update(dict.fromkeys((
    'address', 'article', 'aside', 'blockquote', 'body', 'center', 'dd',
    'details', 'dialog', 'dir', 'div', 'dl', 'dt', 'fieldset', 'figcaption',
    'figure', 'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header',
    'hgroup', 'hr', 'html', 'legend', 'main', 'menu', 'nav', 'ol', 'p',
    'pre', 'section', 'summary', 'ul',
), 'block'))
HTML_DISPLAY.update(dict.fromkeys((
    'area', 'base', 'basefont', 'datalist', 'head', 'link', 'meta',
    'noembed', 'noframes', 'param', 'rp', 'script', 'style', 'template',
    'title',
), 'none'))
HTML_DISPLAY.update(dict.fromkeys((
    'button', 'input', 'meter', 'progress', 'select', 'textarea',
), 'inline-block'))
HTML_DISPLAY.update({
    'li': 'list-item',
    'table': 'table',
    'caption': 'table-caption',
    'colgroup': 'table-column-group',
    'col': 'table-column',
    'thead': 'table-header-group',
    'tbody': 'table-row-group',
    'tfoot': 'table-footer-group',
    'tr': 'table-row',
    'td': 'table-cell',
    'th': 'table-cell',
    'ruby': 'ruby',
    'rb': 'ruby-base',
    'rt': 'ruby-text',
    'rtc': 'ruby-text-container',
})

# SVG elements that are never rendered do not generate boxes
SVG_DISPLAY: Dict[str, str] = dict.fromkeys((
    'clipPath', 'defs', 'desc', 'filter', 'linearGradient', 'marker',
    'mask', 'metadata', 'pattern', 'radialGradient', 'script', 'style',
    'symbol', 'title',
), 'none')


# List markers set by the user agent stylesheet; these override inheritance
HTML_LIST_STYLE: Dict[str, str] = {
    'ol': 'decimal',
    'ul': 'disc',
    'menu': 'disc',
}


def user_agent_style(local_name: str, namespace: str) -> Dict[str, str]:
    """
    Get the user agent declarations for an element kind.

    Only properties the user agent stylesheet sets are returned; everything
    else resolves from inheritance or the initial value.

    Args:
        local_name: Element name, lower-cased for HTML elements
        namespace: Element namespace URI

    Returns:
        A new dictionary of property values
    """
    style: Dict[str, str] = {}
    if namespace == HTML_NAMESPACE:
        if local_name in HTML_DISPLAY:
            style['display'] = HTML_DISPLAY[local_name]
        if local_name in HTML_LIST_STYLE:
            style['list-style-type'] = HTML_LIST_STYLE[local_name]
    elif namespace == SVG_NAMESPACE and local_name in SVG_DISPLAY:
        style['display'] = SVG_DISPLAY[local_name]
    return style
