"""
Platform over the reference model in ``deadlyembrace.model``.
"""

from typing import Any, Mapping, Optional

from ..model import Construct, Stack, is_unresolved, plain_string
from .base import Platform


class NativePlatform(Platform):
    """Adapter for ``deadlyembrace.model`` constructs."""

    name = "native"

    def stack_of(self, resource: Any) -> Stack:
        return Stack.of(resource)

    def stack_name(self, stack: Stack) -> Any:
        return plain_string(stack.stack_name)

    def node_path(self, construct: Any) -> Optional[str]:
        node = getattr(construct, "node", None)
        return node.path if node is not None else None

    def node_id(self, construct: Any) -> Optional[str]:
        node = getattr(construct, "node", None)
        return node.id if node is not None else None

    def default_child(self, construct: Any) -> Optional[Any]:
        node = getattr(construct, "node", None)
        return node.default_child if node is not None else None

    def own_attributes(self, resource: Any) -> Mapping[str, Any]:
        if isinstance(resource, Construct):
            return resource.own_attributes()
        return {k: v for k, v in vars(resource).items() if not k.startswith("_")}

    def is_unresolved(self, value: Any) -> bool:
        return is_unresolved(value)

    def add_output(self, stack: Stack, output_id: str, value: Any, export_name: str) -> Any:
        return stack.add_output(output_id, value, export_name)
