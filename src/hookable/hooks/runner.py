"""Sequential hook runner for hookable.

Executes the callbacks registered for one (action, phase) pair, one at a
time and in registration order, stopping at the first error.
"""

import inspect
import logging
from typing import Any

from hookable.hooks.registry import HookRegistry, default_registry, phase_key
from hookable.hooks.types import CorruptRegistryError, Phase

logger = logging.getLogger(__name__)


async def maybe_await(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


class HookRunner:
    """Runs a phase's hook chain against a target.

    Hooks within a phase execute sequentially in registration order. Each
    hook is awaited to completion before the next one starts. A hook that
    raises aborts the rest of the chain and the exception propagates to the
    caller unchanged.
    """

    def __init__(self, registry: HookRegistry | None = None):
        self.registry = registry if registry is not None else default_registry

    async def run(
        self,
        target: Any,
        action: str,
        phase: Phase | str,
        data: Any = None,
    ) -> None:
        """Execute the hooks registered for (action, phase).

        Args:
            target: The entity instance the action is performed on
            action: Action name
            phase: Phase whose chain should run
            data: Opaque payload passed unchanged to every hook

        Raises:
            CorruptRegistryError: If a non-callable entry is found in the list
            Exception: Whatever the first failing hook raised
        """
        key = phase_key(phase)
        hook_list = self.registry.hook_list(action, key)
        if not hook_list:
            return

        # Walk the live list by index: no snapshot is taken.
        index = 0
        while index < len(hook_list):
            callback = hook_list[index]
            if not callable(callback):
                logger.error(
                    "Non-callable hook entry for '%s' (%s) at position %d: %r",
                    action,
                    key,
                    index,
                    callback,
                )
                raise CorruptRegistryError(action, key, index, callback)

            index += 1
            logger.debug("Running %s hook %r for '%s'", key, callback, action)
            await maybe_await(callback(target, data))
