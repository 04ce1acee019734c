"""Error hierarchy for export preservation.

Every error raised by the resolver itself derives from ``DeadlyEmbraceError``.
Failures raised by an output registrar outside this package pass through
unchanged.
"""

from __future__ import annotations

from typing import Optional


class DeadlyEmbraceError(Exception):
    """Base error for the deadly-embrace resolver."""


class UnresolvedExportNameError(DeadlyEmbraceError, ValueError):
    """An export name is an unresolved placeholder instead of a plain string."""

    def __init__(self, property_name: str, export_name: object = None):
        self.property_name = property_name
        self.export_name = export_name
        super().__init__(
            f'Export name for property "{property_name}" resolved to a Token; expected string'
        )


class InvalidExportNameError(DeadlyEmbraceError, ValueError):
    """An export name contains characters outside ``[A-Za-z0-9:_-]``."""

    def __init__(self, property_name: str, export_name: str):
        self.property_name = property_name
        self.export_name = export_name
        super().__init__(
            f'Export name "{export_name}" for property "{property_name}" contains '
            "characters outside [A-Za-z0-9:_-]"
        )


class InvalidOutputIdError(DeadlyEmbraceError, ValueError):
    """A generated output id is not a plain alphanumeric string."""

    def __init__(self, property_name: str, output_id: object):
        self.property_name = property_name
        self.output_id = output_id
        super().__init__(
            f'Output id {output_id!r} for property "{property_name}" is not alphanumeric'
        )


class UnresolvedStackNameError(DeadlyEmbraceError, ValueError):
    """The owning stack's name is a placeholder and strict mode is on."""

    def __init__(self, stack_path: Optional[str] = None):
        self.stack_path = stack_path
        where = f" at {stack_path}" if stack_path else ""
        super().__init__(f"Stack name{where} is unresolved; cannot build export names")


class DuplicateOutputError(DeadlyEmbraceError, KeyError):
    """An output id was registered twice on the same stack."""

    def __init__(self, output_id: str):
        self.output_id = output_id
        super().__init__(output_id)

    def __str__(self) -> str:
        return f'Output "{self.output_id}" is already registered on this stack'
