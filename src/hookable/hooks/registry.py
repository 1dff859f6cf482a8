"""Hook registry for hookable.

Holds, for each action name, an ordered list of callbacks per phase.
Registration has set semantics: a callback appears at most once in a
given (action, phase) list, and lists keep registration order.
"""

import logging
from collections.abc import Callable

from hookable.hooks.types import HookCallback, Phase

logger = logging.getLogger(__name__)


def phase_key(phase: Phase | str) -> str:
    """Normalize a phase to the plain string used as a registry key."""
    if isinstance(phase, Phase):
        return phase.value
    return phase


class HookRegistry:
    """Registry of lifecycle hooks keyed by action and phase.

    Registries are plain values: create one per application (or per test)
    and hand it to the runner and the entity types that trigger actions.

    Example:
        registry = HookRegistry()
        registry.register_before("save", stamp_updated_at)
        registry.register_after("save", publish_change)
    """

    def __init__(self) -> None:
        self.hooks: dict[str, dict[str, list[HookCallback]]] = {}

    def register(self, action: str, phase: Phase | str, callback: HookCallback) -> bool:
        """Append a callback to the (action, phase) list.

        Args:
            action: Action name (e.g., "save")
            phase: Phase to register under, normally before or after
            callback: Hook callable, invoked as callback(target, data)

        Returns:
            True if the callback was appended, False if it was already registered.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError(f"Hook callback must be callable, got {callback!r}")

        key = phase_key(phase)
        phases = self.hooks.setdefault(action, {})
        hook_list = phases.setdefault(key, [])

        if callback in hook_list:
            logger.debug("Hook %r already registered for '%s' (%s)", callback, action, key)
            return False

        hook_list.append(callback)
        logger.debug("Registered hook %r for '%s' (%s)", callback, action, key)
        return True

    def unregister(self, action: str, phase: Phase | str, callback: HookCallback) -> bool:
        """Remove a callback from the (action, phase) list.

        Returns:
            False if the action, phase, or callback is not registered, True if removed.
        """
        phases = self.hooks.get(action)
        if phases is None:
            return False

        hook_list = phases.get(phase_key(phase))
        if hook_list is None:
            return False

        try:
            hook_list.remove(callback)
        except ValueError:
            return False

        logger.debug("Unregistered hook %r from '%s' (%s)", callback, action, phase_key(phase))
        return True

    def register_before(self, action: str, callback: HookCallback) -> bool:
        return self.register(action, Phase.BEFORE, callback)

    def register_after(self, action: str, callback: HookCallback) -> bool:
        return self.register(action, Phase.AFTER, callback)

    def unregister_before(self, action: str, callback: HookCallback) -> bool:
        return self.unregister(action, Phase.BEFORE, callback)

    def unregister_after(self, action: str, callback: HookCallback) -> bool:
        return self.unregister(action, Phase.AFTER, callback)

    def hook_list(self, action: str, phase: Phase | str) -> list[HookCallback] | None:
        """Return the live list for (action, phase), or None if it was never created.

        The runner walks this list directly, so registrations made while a
        phase is running may be seen by that run.
        """
        phases = self.hooks.get(action)
        if phases is None:
            return None
        return phases.get(phase_key(phase))

    def get(self, action: str, phase: Phase | str) -> list[HookCallback]:
        """Return a copy of the callbacks registered for (action, phase)."""
        return list(self.hook_list(action, phase) or [])

    def is_registered(self, action: str, phase: Phase | str, callback: HookCallback) -> bool:
        """Check if a callback is registered for (action, phase)."""
        return callback in (self.hook_list(action, phase) or [])

    def list_actions(self) -> list[str]:
        """List all action names that have had hooks registered."""
        return sorted(self.hooks.keys())

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        self.hooks.clear()


# Process-wide registry used by the decorators and by Hookable types that
# don't supply their own.
default_registry = HookRegistry()


def before(
    action: str, registry: HookRegistry | None = None
) -> Callable[[HookCallback], HookCallback]:
    """Decorator to register a before hook.

    Usage:
        @before("save")
        async def stamp_updated_at(target, data):
            ...
    """

    def decorator(fn: HookCallback) -> HookCallback:
        (registry or default_registry).register_before(action, fn)
        return fn

    return decorator


def after(
    action: str, registry: HookRegistry | None = None
) -> Callable[[HookCallback], HookCallback]:
    """Decorator to register an after hook."""

    def decorator(fn: HookCallback) -> HookCallback:
        (registry or default_registry).register_after(action, fn)
        return fn

    return decorator
