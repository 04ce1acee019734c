"""
Reference construct model.

A small construct tree (App, Stack, Construct, CfnResource) with tagged
resolved/deferred values, used by the native platform and by tests.
"""

from .values import Deferred, Resolved, ExportValue, is_unresolved, plain_string, render_value
from .construct import App, CfnResource, Construct, Node, OutputRecord, Stack, allocate_logical_id

__all__ = [
    "App",
    "CfnResource",
    "Construct",
    "Deferred",
    "ExportValue",
    "Node",
    "OutputRecord",
    "Resolved",
    "Stack",
    "allocate_logical_id",
    "is_unresolved",
    "plain_string",
    "render_value",
]
