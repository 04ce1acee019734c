"""
Resolution module - export preservation

Derives a placeholder-free identity for a resource, plans which of its
attributes to re-export under which names, and registers the outputs.
"""

from .identity import IdentityResolver, resolve_identity_basis, sanitize_logical_id
from .inference import PropertyInference, infer_exportable_properties, suffix_predicate
from .naming import Convention, ExportNamer, build_output_id, default_export_name, sanitize_export_fragment
from .options import ResolveOptions
from .planner import ExportPlanEntry, ExportPlanner, plan_exports
from .run_resolution import register_exports, unsafe_resolve_deadly_embrace

__all__ = [
    "Convention",
    "ExportNamer",
    "ExportPlanEntry",
    "ExportPlanner",
    "IdentityResolver",
    "PropertyInference",
    "ResolveOptions",
    "build_output_id",
    "default_export_name",
    "infer_exportable_properties",
    "plan_exports",
    "register_exports",
    "resolve_identity_basis",
    "sanitize_export_fragment",
    "sanitize_logical_id",
    "suffix_predicate",
    "unsafe_resolve_deadly_embrace",
]
