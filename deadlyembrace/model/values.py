"""
Resolved and deferred values.

A ``Deferred`` stands for a value only known at a later synthesis phase
(a Ref, a GetAtt, a lazily allocated logical id). Its string form is a token
marker, so a placeholder interpolated into a larger string stays detectable
by ``is_unresolved``.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from typing import Any, Union

TOKEN_MARKER = re.compile(r"\$\{Token\[[^\]]*\]\}")

_token_numbers = itertools.count(1)


@dataclass(frozen=True)
class Resolved:
    """A plain string value, known at construction time."""
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Deferred:
    """
    Placeholder for a value resolved during synthesis.

    Fields:
      hint    -- short label shown in the token marker ("Ref", "GetAtt", ...)
      payload -- what the placeholder renders to in a template, if anything
    """
    hint: str = "Token"
    payload: Any = None
    number: int = field(default_factory=lambda: next(_token_numbers))

    def __str__(self) -> str:
        hint = self.hint.replace("]", "").replace("}", "")
        return f"${{Token[{hint}.{self.number}]}}"

    def render(self) -> Any:
        """Template form of the placeholder."""
        return self.payload if self.payload is not None else str(self)


ExportValue = Union[Resolved, Deferred, str]


def is_unresolved(value: Any) -> bool:
    """True for placeholders and for strings that embed a token marker."""
    if isinstance(value, Deferred):
        return True
    if isinstance(value, str):
        return TOKEN_MARKER.search(value) is not None
    return False


def render_value(value: Any) -> Any:
    """Convert a value to the form it takes in a synthesized template."""
    if isinstance(value, Deferred):
        return value.render()
    if isinstance(value, Resolved):
        return value.value
    return value


def plain_string(value: Any) -> Any:
    """Unwrap ``Resolved`` to its string; other values are returned as-is."""
    if isinstance(value, Resolved):
        return value.value
    return value
