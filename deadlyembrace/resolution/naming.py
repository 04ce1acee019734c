"""
Export names and output ids.

Export names follow the platform's historical cross-stack convention, minus
the hash suffixes it appends:

  - Arn properties:   <Stack>:ExportsOutputFnGetAtt<Basis>Arn
  - Name properties:  <Stack>:ExportsOutputRef<Basis>
  - anything else:    <Stack>:ExportsOutput<Basis><property>

Output ids are alphanumeric, built from a fixed prefix, the basis and a
convention suffix, and capped at the logical id length limit.
"""

import hashlib
import re
from enum import Enum
from typing import Any, List, Optional, Tuple

from ..config import Config, AnomalyCodes
from ..errors import UnresolvedStackNameError
from ..logging_utils import get_logger
from ..platforms import Platform, default_platform
from .inference import ARN_SUFFIXES, NAME_SUFFIXES

logger = get_logger(__name__)

EXPORT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9:_-]+$")
OUTPUT_ID_PATTERN = re.compile(r"^[A-Za-z0-9]+$")

_EXPORT_UNSAFE = re.compile(r"[^A-Za-z0-9:_-]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


class Convention(str, Enum):
    ARN = "arn"
    NAME = "name"
    OTHER = "other"


def convention_for(prop_name: str) -> Convention:
    """ARN is checked before Name; the two are mutually exclusive."""
    if prop_name.endswith(ARN_SUFFIXES):
        return Convention.ARN
    if prop_name.endswith(NAME_SUFFIXES):
        return Convention.NAME
    return Convention.OTHER


def sanitize_export_fragment(fragment: str) -> str:
    """Keep alphanumerics, dash, underscore and colon."""
    return _EXPORT_UNSAFE.sub("", str(fragment))


def default_export_name(stack_fragment: str, identity_basis: str, prop_name: str) -> str:
    convention = convention_for(prop_name)
    if convention is Convention.ARN:
        return f"{stack_fragment}:ExportsOutputFnGetAtt{identity_basis}Arn"
    if convention is Convention.NAME:
        return f"{stack_fragment}:ExportsOutputRef{identity_basis}"
    return f"{stack_fragment}:ExportsOutput{identity_basis}{prop_name}"


def output_id_suffix(prop_name: str) -> str:
    convention = convention_for(prop_name)
    if convention is Convention.ARN:
        return "Arn"
    if convention is Convention.NAME:
        return "Name"
    return _NON_ALNUM.sub("", prop_name[:1].upper() + prop_name[1:])


def build_output_id(identity_basis: str, prop_name: str, config: Config) -> Tuple[str, bool]:
    """
    Build the output id for a property.

    Returns (output_id, truncated). Ids over ``config.max_output_id_length``
    keep their head and end in a short sha1 digest of the full id, so two
    long ids that share a prefix stay distinct.
    """
    full = _NON_ALNUM.sub(
        "", f"{config.output_id_prefix}{identity_basis}{output_id_suffix(prop_name)}"
    )
    limit = config.max_output_id_length
    if len(full) <= limit:
        return full, False

    digest = hashlib.sha1(full.encode("utf-8")).hexdigest()[: config.output_id_digest_length]
    return full[: limit - len(digest)] + digest, True


class ExportNamer:
    """Computes export names and output ids for one stack."""

    def __init__(self, config: Config, platform: Optional[Platform] = None):
        self.config = config
        self.platform = platform or default_platform()
        self.logger = logger

    def stack_fragment(self, stack: Any) -> Tuple[str, List[str]]:
        """
        Sanitised stack name for the export-name prefix.

        A placeholder stack name is never stringified into the prefix; the
        fallback literal is used instead, or ``UnresolvedStackNameError`` is
        raised in strict mode.
        """
        anomalies = []
        stack_name = self.platform.stack_name(stack)

        if self.platform.is_unresolved(stack_name) or not isinstance(stack_name, str):
            if self.config.strict_stack_name:
                raise UnresolvedStackNameError(self.platform.node_path(stack))
            self.logger.warning(
                f"Stack name is unresolved; export names will use '{self.config.stack_name_fallback}'"
            )
            anomalies.append(AnomalyCodes.STACK_NAME_UNRESOLVED)
            return sanitize_export_fragment(self.config.stack_name_fallback), anomalies

        return sanitize_export_fragment(stack_name), anomalies

    def export_name(self, stack_fragment: str, identity_basis: str, prop_name: str) -> str:
        return default_export_name(stack_fragment, identity_basis, prop_name)

    def output_id(self, identity_basis: str, prop_name: str) -> Tuple[str, List[str]]:
        anomalies = []
        output_id, truncated = build_output_id(identity_basis, prop_name, self.config)
        if truncated:
            self.logger.debug(f"Output id for {prop_name} truncated to {len(output_id)} chars")
            anomalies.append(AnomalyCodes.OUTPUT_ID_TRUNCATED)
        return output_id, anomalies
