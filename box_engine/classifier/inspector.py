"""
BoxInspector: the classifier bound to a set of providers.

The inspector is a convenience for callers that classify many nodes against
the same providers. It holds no per-node state; every answer is derived
again from the providers.
"""

import logging
from contextlib import nullcontext
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from . import identity, pseudo, ruby, style, svg, table
from .accessors import BoxAccessors
from .providers import NodeProvider, RuleProvider, StyleProvider
from .registry import PREDICATES, get_predicate
from .ruby import RubyRole
from .svg import SvgCategory
from .table import TableRole
from ..utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


class BoxInspector:
    """
    Answers box-type questions about nodes.

    Example::

        inspector = BoxInspector()
        inspector.check("blockContainer", element)
        inspector.classify(element)["replaced"]
    """

    def __init__(self,
                 style_provider: Optional[StyleProvider] = None,
                 node_provider: Optional[NodeProvider] = None,
                 rule_provider: Optional[RuleProvider] = None,
                 time_classification: bool = False):
        """
        Args:
            style_provider: Resolved style source, the reference DOM when omitted
            node_provider: Identity and navigation, the reference DOM when omitted
            rule_provider: Pseudo-element rule source, the reference DOM when omitted
            time_classification: Log how long each ``classify`` call takes
        """
        self.access = BoxAccessors(style_provider, node_provider, rule_provider)
        self._perf = PerformanceLogger(logger, "BoxInspector") if time_classification else None

    @classmethod
    def from_config(cls, config, **providers) -> 'BoxInspector':
        """Create an inspector using the ``inspector.*`` settings of a ``Config``."""
        return cls(time_classification=bool(config.get("inspector.time_classification", False)),
                   **providers)

    def check(self, name: str, node: Any) -> bool:
        """
        Evaluate one named predicate.

        Args:
            name: Predicate name, snake_case or camelCase
            node: The node to classify

        Raises:
            UnknownPredicateError: If the name is not registered
            InvalidNodeError: If node is None
        """
        return bool(get_predicate(name)(node, self.access))

    def classify(self, node: Any, names: Optional[Iterable[str]] = None) -> Dict[str, bool]:
        """
        Evaluate several predicates at once.

        Args:
            node: The node to classify
            names: Predicate names, every registered predicate when omitted

        Returns:
            Mapping of the requested names to their results
        """
        if names is None:
            names = PREDICATES
        timer = self._perf.measure("classify") if self._perf is not None else nullcontext()
        with timer:
            result = {name: self.check(name, node) for name in names}

        logger.debug(f"Classified {node!r}: {sum(result.values())} of {len(result)} predicates hold")
        return result

    def matching(self, node: Any, names: Optional[Iterable[str]] = None) -> List[str]:
        """Sorted names of the predicates that hold for the node."""
        return sorted(name for name, value in self.classify(node, names).items() if value)

    # Parameterised queries

    def node_name_one_of(self, node: Any, names: Iterable[str]) -> bool:
        return identity.node_name_one_of(node, self.access, names)

    def has_namespace(self, node: Any, uri: str) -> bool:
        return identity.has_namespace(node, self.access, uri)

    def style_equals(self, node: Any, prop: str, values: Iterable[Any]) -> bool:
        return style.style_equals(node, self.access, prop, values)

    def child_has_style_one_of(self, node: Any, prop: str, values: Iterable[Any]) -> bool:
        return style.child_has_style_one_of(node, self.access, prop, values)

    def is_pseudo(self, node: Any, name: str) -> bool:
        return pseudo.is_pseudo(node, self.access, name)

    def pseudo_one_of(self, node: Any, names: Iterable[str]) -> bool:
        return pseudo.pseudo_one_of(node, self.access, names)

    # Category tags

    def table_role(self, node: Any) -> Optional[TableRole]:
        return table.table_role(node, self.access)

    def ruby_role(self, node: Any) -> Optional[RubyRole]:
        return ruby.ruby_role(node, self.access)

    def svg_categories(self, node: Any) -> FrozenSet[SvgCategory]:
        return svg.svg_categories(node, self.access)
