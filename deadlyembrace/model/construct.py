# deadlyembrace/model/construct.py
from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..errors import DuplicateOutputError
from .values import Deferred, ExportValue, render_value

PATH_SEP = "/"
_HIDDEN_ID = "Default"
_HIDDEN_FROM_HUMAN_ID = "Resource"
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


class Node:
    """
    Tree bookkeeping for a construct.

    Fields:
      scope         -- parent construct (None for the root)
      id            -- id within the parent
      default_child -- low-level resource a higher-level construct wraps
    """

    def __init__(self, host: "Construct", scope: Optional["Construct"], id: str):
        self.host = host
        self.scope = scope
        self.id = id
        self.default_child: Optional["Construct"] = None
        self.children: Dict[str, "Construct"] = {}

    @property
    def path(self) -> str:
        if self.scope is None:
            return ""
        parent_path = self.scope.node.path
        return f"{parent_path}{PATH_SEP}{self.id}" if parent_path else self.id

    @property
    def scopes(self) -> List["Construct"]:
        """All constructs from the root down to (and including) the host."""
        chain = []
        current: Optional[Construct] = self.host
        while current is not None:
            chain.append(current)
            current = current.node.scope
        return list(reversed(chain))


class Construct:
    """Minimal construct-tree node used by the native platform."""

    def __init__(self, scope: Optional["Construct"], id: str):
        if scope is not None:
            if PATH_SEP in id:
                raise ValueError(f"Construct id {id!r} must not contain '{PATH_SEP}'")
            if id in scope.node.children:
                raise ValueError(f"There is already a construct named {id!r} in {scope.node.path or '<root>'}")
        self.node = Node(self, scope, id)
        if scope is not None:
            scope.node.children[id] = self

    def own_attributes(self) -> Mapping[str, Any]:
        """Public instance attributes in definition order."""
        return {
            name: value
            for name, value in vars(self).items()
            if not name.startswith("_") and name != "node"
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node.path or self.node.id}>"


class App(Construct):
    """Root of a construct tree."""

    def __init__(self):
        super().__init__(None, "App")


@dataclass(frozen=True)
class OutputRecord:
    output_id: str
    value: Any
    export_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"Value": render_value(self.value)}
        if self.export_name is not None:
            out["Export"] = {"Name": self.export_name}
        return out


class Stack(Construct):
    """
    A deployable unit with a name and an append-only output registry.

    ``add_output`` is the only way to record an output; ``outputs`` is a
    read-only view in registration order.
    """

    def __init__(self, scope: Optional[Construct], id: str, stack_name: Optional[ExportValue] = None):
        super().__init__(scope, id)
        self._stack_name = stack_name if stack_name is not None else id
        self._outputs: Dict[str, OutputRecord] = {}

    @property
    def stack_name(self) -> ExportValue:
        return self._stack_name

    @property
    def outputs(self) -> Mapping[str, OutputRecord]:
        return MappingProxyType(self._outputs)

    def add_output(self, output_id: str, value: ExportValue, export_name: Optional[str] = None) -> OutputRecord:
        if output_id in self._outputs:
            raise DuplicateOutputError(output_id)
        record = OutputRecord(output_id=output_id, value=value, export_name=export_name)
        self._outputs[output_id] = record
        return record

    def to_template(self) -> dict:
        """Outputs section of the synthesized template."""
        return {"Outputs": {oid: rec.to_dict() for oid, rec in self._outputs.items()}}

    @staticmethod
    def of(construct: Construct) -> "Stack":
        """Nearest enclosing stack of ``construct`` (itself if it is one)."""
        for scope in reversed(construct.node.scopes):
            if isinstance(scope, Stack):
                return scope
        raise LookupError(f"{construct!r} is not defined within a stack")


class CfnResource(Construct):
    """
    Low-level resource with a lazily allocated logical id.

    The logical id is only known once the tree is complete, so ``logical_id``,
    ``ref`` and ``get_att`` all hand out ``Deferred`` placeholders.
    """

    def __init__(self, scope: Construct, id: str, type: str):
        super().__init__(scope, id)
        self._type = type

    @property
    def cfn_resource_type(self) -> str:
        return self._type

    @property
    def logical_id(self) -> Deferred:
        return Deferred("LogicalId", payload=allocate_logical_id(self))

    @property
    def ref(self) -> Deferred:
        return Deferred("Ref", payload={"Ref": allocate_logical_id(self)})

    def get_att(self, attribute: str) -> Deferred:
        return Deferred("GetAtt", payload={"Fn::GetAtt": [allocate_logical_id(self), attribute]})


def allocate_logical_id(construct: Construct) -> str:
    """
    Logical id from the path below the owning stack: a readable part plus an
    8-character md5 digest of the full path, like the platform allocates it.
    """
    stack = Stack.of(construct)
    scopes = construct.node.scopes
    components = [c.node.id for c in scopes[scopes.index(stack) + 1:]]
    components = [c for c in components if c != _HIDDEN_ID]
    if not components:
        raise ValueError("Unable to allocate a logical id for a stack")
    if len(components) == 1:
        candidate = _NON_ALNUM.sub("", components[0])
        if candidate:
            return candidate[:255]

    digest = hashlib.md5(PATH_SEP.join(components).encode("utf-8")).hexdigest()[:8].upper()
    human = []
    for component in components:
        if component == _HIDDEN_FROM_HUMAN_ID:
            continue
        if human and human[-1] == component:
            continue
        human.append(component)
    readable = _NON_ALNUM.sub("", "".join(human))[: 255 - len(digest)]
    return readable + digest
