"""
Export planner.

Turns a resource, its identity basis and the caller's options into the
ordered list of outputs to register. Planning is complete before anything is
registered, so a bad export name aborts the call with the stack untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..config import Config, AnomalyCodes
from ..errors import InvalidExportNameError, InvalidOutputIdError, UnresolvedExportNameError
from ..logging_utils import get_logger
from ..model import plain_string
from ..platforms import Platform, default_platform
from .inference import PropertyInference
from .naming import EXPORT_NAME_PATTERN, OUTPUT_ID_PATTERN, Convention, ExportNamer, convention_for
from .options import ResolveOptions

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExportPlanEntry:
    """
    One output to register.

    ``value`` may still be a placeholder; ``export_name`` and ``output_id``
    are always plain strings.
    """
    property_name: str
    value: Any
    export_name: str
    output_id: str
    convention: Convention = Convention.OTHER

    def to_dict(self) -> dict:
        return {
            "property": self.property_name,
            "export_name": self.export_name,
            "output_id": self.output_id,
            "convention": self.convention.value,
        }


class ExportPlanner:
    """Plans export entries for a single resource."""

    def __init__(self, config: Config, platform: Optional[Platform] = None):
        self.config = config
        self.platform = platform or default_platform()
        self.logger = logger
        self.inference = PropertyInference(config, self.platform)
        self.namer = ExportNamer(config, self.platform)

    def plan(
        self,
        resource: Any,
        identity_basis: str,
        options: Union[ResolveOptions, Mapping[str, Any], None] = None,
    ) -> Tuple[List[ExportPlanEntry], List[str]]:
        """
        Plan the exports of ``resource``.

        Args:
            resource: Resource whose attributes are exported
            identity_basis: Pure-string basis from the identity resolver
            options: Explicit properties, export-name overrides, predicate

        Returns:
            Tuple of (entries, anomalies)
        """
        options = ResolveOptions.coerce(options)
        anomalies = []
        entries = []

        if options.properties is not None:
            prop_names = list(options.properties)
        else:
            prop_names = self.inference.infer(resource, options.predicate)

        attributes = self.platform.own_attributes(resource)
        stack = self.platform.stack_of(resource)
        stack_fragment: Optional[str] = None

        for prop_name in prop_names:
            if prop_name not in attributes:
                self.logger.debug(f"Skipping {prop_name}: not an own attribute")
                anomalies.append(AnomalyCodes.PROPERTY_NOT_OWNED)
                continue

            value = attributes[prop_name]
            if value is None:
                self.logger.debug(f"Skipping {prop_name}: value is absent")
                anomalies.append(AnomalyCodes.PROPERTY_VALUE_ABSENT)
                continue

            if prop_name in options.export_names:
                export_name = plain_string(options.export_names[prop_name])
            else:
                if stack_fragment is None:
                    stack_fragment, stack_anomalies = self.namer.stack_fragment(stack)
                    anomalies.extend(stack_anomalies)
                export_name = self.namer.export_name(stack_fragment, identity_basis, prop_name)

            self._ensure_plain_export_name(prop_name, export_name)

            output_id, id_anomalies = self.namer.output_id(identity_basis, prop_name)
            anomalies.extend(id_anomalies)
            self._ensure_plain_output_id(prop_name, output_id)

            entries.append(
                ExportPlanEntry(
                    property_name=prop_name,
                    value=value,
                    export_name=export_name,
                    output_id=output_id,
                    convention=convention_for(prop_name),
                )
            )

        return entries, anomalies

    def _ensure_plain_export_name(self, prop_name: str, export_name: Any) -> None:
        if not isinstance(export_name, str) or self.platform.is_unresolved(export_name):
            raise UnresolvedExportNameError(prop_name, export_name)
        if not EXPORT_NAME_PATTERN.match(export_name):
            raise InvalidExportNameError(prop_name, export_name)

    def _ensure_plain_output_id(self, prop_name: str, output_id: Any) -> None:
        if not isinstance(output_id, str) or not OUTPUT_ID_PATTERN.match(output_id):
            raise InvalidOutputIdError(prop_name, output_id)


def plan_exports(
    resource: Any,
    identity_basis: str,
    options: Union[ResolveOptions, Mapping[str, Any], None] = None,
    platform: Optional[Platform] = None,
    config: Optional[Config] = None,
) -> List[ExportPlanEntry]:
    """Module-level shortcut for ``ExportPlanner.plan`` returning entries only."""
    entries, _ = ExportPlanner(config or Config(), platform).plan(resource, identity_basis, options)
    return entries


def summarize_plan(entries: List[ExportPlanEntry]) -> Dict[str, Any]:
    """Loggable summary of a plan."""
    return {
        "count": len(entries),
        "exports": [e.to_dict() for e in entries],
    }
