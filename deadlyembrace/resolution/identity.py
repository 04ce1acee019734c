"""
Identity resolver.

Derives a pure-string basis for generated names from a resource's structural
location in the construct tree. Attribute values are never consulted, and
neither is the default child's logical id: before synthesis that id may still
be a placeholder, and a placeholder inside a name corrupts every name built
from it.
"""

import re
from typing import Any, Iterator, Optional

from ..config import Config
from ..logging_utils import get_logger
from ..platforms import Platform, default_platform

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[/:]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def sanitize_logical_id(path_or_id: str) -> str:
    """
    Capitalise each path segment and keep only alphanumerics.

    'MyStack/Table/Resource' -> 'MyStackTableResource'
    """
    cleaned = path_or_id[1:] if path_or_id.startswith("/") else path_or_id
    parts = [p for p in _SEPARATORS.split(cleaned) if p]
    capitalised = "".join(p[:1].upper() + p[1:] for p in parts)
    return _NON_ALNUM.sub("", capitalised)


class IdentityResolver:
    """Resolves the identity basis of a resource."""

    def __init__(self, config: Config, platform: Optional[Platform] = None):
        self.config = config
        self.platform = platform or default_platform()
        self.logger = logger

    def resolve(self, resource: Any) -> str:
        """
        Resolve the identity basis for ``resource``.

        Tries the default child's path, the resource's path, then its bare
        id; the first candidate that is a plain string and sanitises to a
        non-empty value wins. Falls back to ``config.identity_fallback``.
        """
        for source, candidate in self._candidates(resource):
            if not isinstance(candidate, str) or not candidate:
                continue
            if self.platform.is_unresolved(candidate):
                self.logger.debug(f"Skipping unresolved {source} for identity basis")
                continue
            basis = sanitize_logical_id(candidate)
            if basis:
                self.logger.debug(f"Identity basis from {source}: '{candidate}' -> '{basis}'")
                return basis

        fallback = sanitize_logical_id(self.config.identity_fallback) or "Resource"
        self.logger.debug(f"No structural identity available, using fallback '{fallback}'")
        return fallback

    def _candidates(self, resource: Any) -> Iterator[tuple]:
        child = self.platform.default_child(resource)
        if child is not None:
            yield "default child path", self.platform.node_path(child)
        yield "node path", self.platform.node_path(resource)
        yield "node id", self.platform.node_id(resource)


def resolve_identity_basis(
    resource: Any,
    platform: Optional[Platform] = None,
    config: Optional[Config] = None,
) -> str:
    """Module-level shortcut for ``IdentityResolver.resolve``."""
    return IdentityResolver(config or Config(), platform).resolve(resource)
