"""Trigger configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class HookableConfig:
    """Settings that shape how Hookable.trigger runs its phases.

    Attributes:
        validation_action: Reserved action name dispatched to the entity
            type's before_validation/after_validation instead of the registry
        legacy_after_alias: When True, the generic after phase re-runs the
            before chain (the after list is never executed)
    """

    validation_action: str = "validate"
    legacy_after_alias: bool = False

    @classmethod
    def from_env(cls) -> HookableConfig:
        """Create config from environment variables.

        Reads:
        1. HOOKABLE_VALIDATION_ACTION (default: "validate")
        2. HOOKABLE_LEGACY_AFTER_ALIAS (1/true/yes/on enables it)
        """
        validation_action = os.environ.get("HOOKABLE_VALIDATION_ACTION") or "validate"
        legacy = os.environ.get("HOOKABLE_LEGACY_AFTER_ALIAS", "")

        return cls(
            validation_action=validation_action,
            legacy_after_alias=legacy.strip().lower() in _TRUTHY,
        )
