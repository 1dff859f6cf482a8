"""hookable: before/after lifecycle hooks around entity actions."""

from hookable.config import HookableConfig
from hookable.hooks import HookRegistry, HookRunner, Phase, TriggerResult
from hookable.model import Hookable, ValidationHooks

__all__ = [
    "HookRegistry",
    "HookRunner",
    "Hookable",
    "HookableConfig",
    "Phase",
    "TriggerResult",
    "ValidationHooks",
]
