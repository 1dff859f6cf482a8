"""hookable lifecycle hook system.

Lets independent observers run callbacks before and after a named action
on an entity:
- before: runs ahead of the action's work (can abort it)
- after: runs once the work has completed (can fail the action)

Usage:
    from hookable.hooks import before

    @before("save")
    async def stamp_updated_at(target, data):
        data["updatedAt"] = utcnow()
"""

from hookable.hooks.loader import (
    apply_hook_bindings,
    load_hook_bindings,
    parse_hook_bindings,
)
from hookable.hooks.registry import HookRegistry, after, before, default_registry
from hookable.hooks.runner import HookRunner
from hookable.hooks.types import (
    CorruptRegistryError,
    HookBinding,
    HookCallback,
    HookError,
    HookLoadError,
    MissingValidationHooksError,
    Phase,
    TriggerResult,
    WorkFn,
)


def register_before(action: str, callback: HookCallback) -> bool:
    """Register a before hook on the default registry."""
    return default_registry.register_before(action, callback)


def register_after(action: str, callback: HookCallback) -> bool:
    """Register an after hook on the default registry."""
    return default_registry.register_after(action, callback)


def unregister_before(action: str, callback: HookCallback) -> bool:
    """Remove a before hook from the default registry."""
    return default_registry.unregister_before(action, callback)


def unregister_after(action: str, callback: HookCallback) -> bool:
    """Remove an after hook from the default registry."""
    return default_registry.unregister_after(action, callback)


__all__ = [
    "CorruptRegistryError",
    "HookBinding",
    "HookCallback",
    "HookError",
    "HookLoadError",
    "HookRegistry",
    "HookRunner",
    "MissingValidationHooksError",
    "Phase",
    "TriggerResult",
    "WorkFn",
    "after",
    "apply_hook_bindings",
    "before",
    "default_registry",
    "load_hook_bindings",
    "parse_hook_bindings",
    "register_after",
    "register_before",
    "unregister_after",
    "unregister_before",
]
