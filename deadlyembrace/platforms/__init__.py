"""
Platform adapters.

``NativePlatform`` works over ``deadlyembrace.model``. The AWS CDK adapter
lives in ``deadlyembrace.platforms.cdk`` and is imported explicitly since it
needs the ``cdk`` extra.
"""

from .base import Platform
from .native import NativePlatform

__all__ = [
    "Platform",
    "NativePlatform",
    "default_platform",
]


def default_platform() -> Platform:
    return NativePlatform()
