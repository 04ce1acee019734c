"""
Deadly-embrace resolver.

Preserves CloudFormation-style cross-stack exports of a resource after its
stack is refactored or split, using deterministic, placeholder-free names.
"""

from .config import Config, AnomalyCodes
from .errors import (
    DeadlyEmbraceError,
    DuplicateOutputError,
    InvalidExportNameError,
    InvalidOutputIdError,
    UnresolvedExportNameError,
    UnresolvedStackNameError,
)
from .resolution import (
    ExportPlanEntry,
    ResolveOptions,
    infer_exportable_properties,
    plan_exports,
    resolve_identity_basis,
    unsafe_resolve_deadly_embrace,
)

__version__ = "0.1.0"

__all__ = [
    "AnomalyCodes",
    "Config",
    "DeadlyEmbraceError",
    "DuplicateOutputError",
    "ExportPlanEntry",
    "InvalidExportNameError",
    "InvalidOutputIdError",
    "ResolveOptions",
    "UnresolvedExportNameError",
    "UnresolvedStackNameError",
    "infer_exportable_properties",
    "plan_exports",
    "resolve_identity_basis",
    "unsafe_resolve_deadly_embrace",
]
