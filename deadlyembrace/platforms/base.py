"""
Platform capabilities the resolver relies on.

A platform adapts one construct model (the native reference model, the AWS
CDK bindings, ...) to the handful of operations export preservation needs.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Tuple


class Platform(ABC):
    """Access to stacks, construct paths, attributes and the output registry."""

    name: str = "abstract"

    # Attribute-name suffixes the default inference rule accepts
    exportable_suffixes: Tuple[str, ...] = ("Arn", "Name")

    def is_exportable_name(self, name: str) -> bool:
        """Default inference rule, decided on the attribute name alone."""
        return name.endswith(self.exportable_suffixes)

    @abstractmethod
    def stack_of(self, resource: Any) -> Any:
        """Owning stack of ``resource``."""

    @abstractmethod
    def stack_name(self, stack: Any) -> Any:
        """Stack name; may be an unresolved placeholder."""

    @abstractmethod
    def node_path(self, construct: Any) -> Optional[str]:
        """Hierarchical path of ``construct`` in the tree."""

    @abstractmethod
    def node_id(self, construct: Any) -> Optional[str]:
        """Bare id of ``construct`` within its parent."""

    @abstractmethod
    def default_child(self, construct: Any) -> Optional[Any]:
        """Low-level resource wrapped by ``construct``, if any."""

    @abstractmethod
    def own_attributes(self, resource: Any) -> Mapping[str, Any]:
        """Own (non-inherited) readable attributes, in enumeration order."""

    @abstractmethod
    def is_unresolved(self, value: Any) -> bool:
        """True if ``value`` is a placeholder rather than a plain value."""

    @abstractmethod
    def add_output(self, stack: Any, output_id: str, value: Any, export_name: str) -> Any:
        """Register one exported output on ``stack``."""
