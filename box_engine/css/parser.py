"""
CSS parsing helpers built on cssutils.
Parses inline declarations and stylesheets, and locates the style rules that
generate pseudo-element boxes.
"""

import logging
from typing import Dict, Iterator, List

import cssutils
from cssutils import css

logger = logging.getLogger(__name__)

# Suppress cssutils warning logs, unknown properties are expected
cssutils.log.setLevel(logging.CRITICAL)


class CSSParser:
    """
    CSS Parser for declarations and stylesheets.

    Values are returned exactly as cssutils serializes them; no cascade or
    selector matching takes place here.
    """

    def parse(self, css_content: str) -> css.CSSStyleSheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed CSS stylesheet, empty when the content cannot be parsed
        """
        try:
            return cssutils.parseString(css_content, validate=False)
        except (ValueError, TypeError) as e:
            logger.error(f"Error parsing CSS: {e}")
            return css.CSSStyleSheet()

    def parse_inline_styles(self, style_attr: str) -> Dict[str, str]:
        """
        Parse an inline style attribute.

        Args:
            style_attr: Inline style attribute value

        Returns:
            Dictionary of CSS properties keyed by lower-cased property name
        """
        if not style_attr or not style_attr.strip():
            return {}
        declaration = cssutils.parseStyle(style_attr, validate=False)
        return self._declaration_to_dict(declaration)

    def declarations(self, rule: css.CSSStyleRule) -> Dict[str, str]:
        """Get the declarations of a style rule as a dictionary."""
        return self._declaration_to_dict(rule.style)

    def style_rules(self, stylesheet: css.CSSStyleSheet) -> Iterator[css.CSSStyleRule]:
        """
        Iterate over the style rules of a stylesheet, including those nested
        in media rules.
        """
        yield from self._iter_style_rules(stylesheet.cssRules)

    def find_pseudo_rules(self, stylesheet: css.CSSStyleSheet, pseudo: str) -> List[css.CSSStyleRule]:
        """
        Find the rules whose selector targets a pseudo-element.

        Args:
            stylesheet: Stylesheet to search
            pseudo: Pseudo-element name, with or without the "::" prefix

        Returns:
            Matching style rules in stylesheet order
        """
        if pseudo.startswith("::"):
            pseudo = pseudo[2:]
        suffix = f"::{pseudo}"
        return [rule for rule in self.style_rules(stylesheet)
                if rule.selectorText.endswith(suffix)]

    def _iter_style_rules(self, rules) -> Iterator[css.CSSStyleRule]:
        for rule in rules:
            if rule.type == css.CSSRule.STYLE_RULE:
                yield rule
            elif rule.type == css.CSSRule.MEDIA_RULE:
                yield from self._iter_style_rules(rule.cssRules)

    @staticmethod
    def _declaration_to_dict(declaration: css.CSSStyleDeclaration) -> Dict[str, str]:
        result = {}
        for prop in declaration.getProperties():
            result[prop.name.lower()] = prop.value
        return result
