"""
Configuration management for the deadly-embrace resolver.
"""

from dataclasses import dataclass


@dataclass
class Config:
    """Main configuration class for export preservation."""

    # Output id settings
    output_id_prefix: str = "PreservedExport"
    max_output_id_length: int = 255  # CloudFormation logical id ceiling
    output_id_digest_length: int = 8

    # Fallback literals
    identity_fallback: str = "Resource"
    stack_name_fallback: str = "Stack"

    # Fail instead of falling back when the stack name is a placeholder
    strict_stack_name: bool = False

    # General settings
    dry_run: bool = False

    def __post_init__(self):
        if not self.output_id_prefix.isalnum():
            raise ValueError("output_id_prefix must be alphanumeric")
        if self.max_output_id_length <= self.output_id_digest_length:
            raise ValueError("max_output_id_length must exceed output_id_digest_length")


class AnomalyCodes:
    """Anomaly codes reported while planning exports."""

    # Skips (not errors)
    PROPERTY_NOT_OWNED = "PROPERTY_NOT_OWNED"
    PROPERTY_VALUE_ABSENT = "PROPERTY_VALUE_ABSENT"

    # Degraded naming
    STACK_NAME_UNRESOLVED = "STACK_NAME_UNRESOLVED"
    OUTPUT_ID_TRUNCATED = "OUTPUT_ID_TRUNCATED"
