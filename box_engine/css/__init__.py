"""
CSS support for the reference DOM.
This package parses declarations with cssutils and supplies the default
resolved values the box inspector reads.
"""

from .parser import CSSParser
from .defaults import HTML_NAMESPACE, SVG_NAMESPACE, MATHML_NAMESPACE, user_agent_style

__all__ = [
    'CSSParser', 'HTML_NAMESPACE', 'SVG_NAMESPACE', 'MATHML_NAMESPACE',
    'user_agent_style'
]
