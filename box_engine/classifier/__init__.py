"""
Box-type classification.

Predicates live in one module per family and take ``(node, access)``:
``identity``, ``style``, ``replaced``, ``box_model``, ``table``, ``ruby``,
``svg`` and ``pseudo``. ``BoxInspector`` binds them to a set of providers.
"""

from .accessors import BoxAccessors
from .errors import BoxEngineError, InvalidNodeError, UnknownPredicateError
from .inspector import BoxInspector
from .providers import (
    DOMNodeProvider, DOMRuleProvider, DOMStyleProvider,
    NodeProvider, RuleProvider, StyleProvider,
)
from .registry import PREDICATES, get_predicate, predicate_names
from .ruby import RubyRole
from .svg import SvgCategory
from .table import TableRole

__all__ = [
    'BoxAccessors', 'BoxInspector',
    'BoxEngineError', 'InvalidNodeError', 'UnknownPredicateError',
    'StyleProvider', 'NodeProvider', 'RuleProvider',
    'DOMStyleProvider', 'DOMNodeProvider', 'DOMRuleProvider',
    'PREDICATES', 'get_predicate', 'predicate_names',
    'TableRole', 'RubyRole', 'SvgCategory',
]
