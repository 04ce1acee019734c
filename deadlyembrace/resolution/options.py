"""
Resolve options model.

Callers may pass a ``ResolveOptions`` instance or a plain mapping; mappings
accept both ``export_names`` and the camel-case ``exportNames`` key.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from ..model import Deferred, Resolved


class ResolveOptions(BaseModel):
    """Which properties to export and under which names."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
    )

    properties: Optional[List[str]] = Field(
        None,
        description="Explicit property names to export; disables inference"
    )

    export_names: Dict[str, Union[str, InstanceOf[Resolved], InstanceOf[Deferred]]] = Field(
        default_factory=dict,
        alias="exportNames",
        description="Explicit export name per property, used verbatim; must resolve to a plain string"
    )

    predicate: Optional[Callable[[str, Any], bool]] = Field(
        None,
        exclude=True,
        description="Replaces suffix matching during inference"
    )

    @field_validator("properties")
    @classmethod
    def properties_must_be_named(cls, v):
        if v is not None:
            for name in v:
                if not name or not name.strip():
                    raise ValueError("property names must be non-empty")
        return v

    @field_validator("export_names")
    @classmethod
    def export_name_keys_must_be_named(cls, v):
        for name in v:
            if not name or not name.strip():
                raise ValueError("export_names keys must be non-empty property names")
        return v

    @classmethod
    def coerce(cls, options: Union["ResolveOptions", Mapping[str, Any], None]) -> "ResolveOptions":
        """Accept None, a mapping or an instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))
