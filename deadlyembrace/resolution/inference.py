"""
Exportable property inference.

Used only when the caller gives no explicit property list. The default rule
picks attributes whose names end in ``Arn`` or ``Name``, the conventional
markers for identifier-bearing attributes on tables, buckets, queues and
topics. Platforms whose bindings use snake case widen the suffix set (see
``Platform.exportable_suffixes``). Callers with atypical resources pass their
own predicate.
"""

from typing import Any, Callable, List, Optional

from ..config import Config
from ..logging_utils import get_logger
from ..platforms import Platform, default_platform

logger = get_logger(__name__)

# Spellings recognised when choosing an export-name convention
ARN_SUFFIXES = ("Arn", "_arn")
NAME_SUFFIXES = ("Name", "_name")

ExportablePredicate = Callable[[str, Any], bool]


def suffix_predicate(name: str, value: Any) -> bool:
    """Camel-case rule: the attribute name ends in ``Arn`` or ``Name``."""
    return name.endswith(("Arn", "Name"))


class PropertyInference:
    """Infers which attributes of a resource should be re-exported."""

    def __init__(self, config: Config, platform: Optional[Platform] = None):
        self.config = config
        self.platform = platform or default_platform()
        self.logger = logger

    def infer(self, resource: Any, predicate: Optional[ExportablePredicate] = None) -> List[str]:
        """
        Own, non-callable attributes accepted by ``predicate``.

        Without a predicate the platform's name rule decides, and only the
        attributes it accepts are read. Order follows the platform's
        attribute enumeration order.
        """
        attributes = self.platform.own_attributes(resource)
        props = []

        for name in attributes:
            if predicate is None and not self.platform.is_exportable_name(name):
                continue
            value = attributes[name]
            if callable(value):
                continue
            if predicate is None or predicate(name, value):
                props.append(name)

        self.logger.debug(f"Inferred exportable properties: {props}")
        return props


def infer_exportable_properties(
    resource: Any,
    predicate: Optional[ExportablePredicate] = None,
    platform: Optional[Platform] = None,
    config: Optional[Config] = None,
) -> List[str]:
    """Module-level shortcut for ``PropertyInference.infer``."""
    return PropertyInference(config or Config(), platform).infer(resource, predicate)
