"""
Platform over the AWS CDK v2 Python bindings.

Requires the ``cdk`` extra (aws-cdk-lib, constructs).
"""

import inspect
from typing import Any, Iterator, List, Mapping, Optional

import aws_cdk as cdk
from constructs import IConstruct

from ..logging_utils import get_logger
from .base import Platform

logger = get_logger(__name__)

# Construct plumbing exposed as properties on every construct
_PLUMBING = frozenset({"node", "env", "stack"})


class _PropertyView(Mapping):
    """Read-only view over a construct's public properties, fetched on access."""

    def __init__(self, resource: Any, names: List[str]):
        self._resource = resource
        self._names = names

    def __getitem__(self, name: str) -> Any:
        if name not in self._names:
            raise KeyError(name)
        try:
            return getattr(self._resource, name)
        except RuntimeError as e:
            # jsii getters throw for attributes the resource was not configured with
            logger.debug(f"Property {name} of {type(self._resource).__name__} is not readable: {e}")
            return None

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


def _public_properties(cls: type) -> List[str]:
    names = []
    for name in dir(cls):
        if name.startswith("_") or name in _PLUMBING:
            continue
        if isinstance(inspect.getattr_static(cls, name, None), property):
            names.append(name)
    return names


class CdkPlatform(Platform):
    """
    Adapter for ``aws_cdk`` constructs.

    jsii objects keep no instance attributes of their own; their readable
    attributes are the public properties of the construct class, so those
    stand in for own attributes here.
    """

    name = "cdk"

    # Python bindings expose jsii properties in snake case
    exportable_suffixes = ("Arn", "Name", "_arn", "_name")

    def stack_of(self, resource: IConstruct) -> cdk.Stack:
        return cdk.Stack.of(resource)

    def stack_name(self, stack: cdk.Stack) -> Any:
        return stack.stack_name

    def node_path(self, construct: IConstruct) -> Optional[str]:
        return construct.node.path

    def node_id(self, construct: IConstruct) -> Optional[str]:
        return construct.node.id

    def default_child(self, construct: IConstruct) -> Optional[Any]:
        return construct.node.default_child

    def own_attributes(self, resource: Any) -> Mapping[str, Any]:
        return _PropertyView(resource, _public_properties(type(resource)))

    def is_unresolved(self, value: Any) -> bool:
        return cdk.Token.is_unresolved(value)

    def add_output(self, stack: cdk.Stack, output_id: str, value: Any, export_name: str) -> cdk.CfnOutput:
        return cdk.CfnOutput(stack, output_id, value=value, export_name=export_name)
