"""
Resolution entrypoint.

Preserves the cross-stack exports of a resource after a refactor, so that
consumer stacks keep finding the export names they were deployed against.
Remove the call once consumers have been redeployed and the old exports are
no longer imported.
"""

from typing import Any, List, Mapping, Optional, Union

from ..config import Config
from ..logging_utils import get_logger, log_export_plan, log_resolution_step
from ..platforms import Platform, default_platform

from .identity import IdentityResolver
from .options import ResolveOptions
from .planner import ExportPlanEntry, ExportPlanner, summarize_plan

logger = get_logger(__name__)


def register_exports(stack: Any, entries: List[ExportPlanEntry], platform: Platform) -> None:
    """
    Register each planned entry on ``stack``.

    Registrar failures propagate unchanged; there is no retry and no undo of
    entries registered before the failure.
    """
    for entry in entries:
        platform.add_output(stack, entry.output_id, entry.value, entry.export_name)
        logger.debug(f"Registered {entry.output_id} -> {entry.export_name}")


def unsafe_resolve_deadly_embrace(
    resource: Any,
    options: Union[ResolveOptions, Mapping[str, Any], None] = None,
    *,
    config: Optional[Config] = None,
    platform: Optional[Platform] = None,
) -> List[ExportPlanEntry]:
    """
    Keep the exports of ``resource`` alive under their historical names.

    "Unsafe" because which attributes to export and how their names were
    built are heuristics; explicit ``properties`` and ``export_names`` take
    precedence over both.

    Args:
        resource: Construct whose exports should be preserved
        options: ResolveOptions or a mapping with properties/exportNames
        config: Optional configuration object
        platform: Construct model adapter; defaults to the native model

    Returns:
        The entries that were registered (planned only, under dry_run)
    """
    if config is None:
        config = Config()
    if platform is None:
        platform = default_platform()

    log_resolution_step("preserve_exports", "started", {"platform": platform.name})

    try:
        options = ResolveOptions.coerce(options)
        identity_basis = IdentityResolver(config, platform).resolve(resource)
        entries, anomalies = ExportPlanner(config, platform).plan(resource, identity_basis, options)

        log_export_plan(identity_basis, entries, anomalies)

        if config.dry_run:
            logger.info(f"Dry run: {len(entries)} exports planned for {identity_basis}, none registered")
        else:
            register_exports(platform.stack_of(resource), entries, platform)

        log_resolution_step("preserve_exports", "completed", {
            "identity_basis": identity_basis,
            "anomalies": anomalies,
            "dry_run": config.dry_run,
            **summarize_plan(entries),
        })
        return entries

    except Exception as e:
        log_resolution_step("preserve_exports", "failed", {"error": str(e)})
        raise
