"""Hookable entity mixin.

Entity types inherit from Hookable to gain trigger(), which wraps a unit
of work in the before/after hook phases for a named action:

    START -> BEFORE -> WORK -> AFTER -> DONE

An error at BEFORE, WORK, or AFTER skips the remaining steps and is
returned in the TriggerResult. The reserved validation action bypasses
the registry and calls the entity type's own validation hooks.
"""

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

from hookable.config import HookableConfig
from hookable.hooks.registry import HookRegistry, default_registry
from hookable.hooks.runner import HookRunner, maybe_await
from hookable.hooks.types import (
    HookCallback,
    MissingValidationHooksError,
    Phase,
    TriggerResult,
    WorkFn,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class ValidationHooks(Protocol):
    """Capability an entity type provides to handle the validation action."""

    def before_validation(self, data: Any) -> Any:
        ...

    def after_validation(self, data: Any) -> Any:
        ...


class Hookable:
    """Mixin giving entity instances a hook-aware trigger().

    Class attributes:
        hook_registry: Registry consulted for this type's hooks
        hook_config: Reserved action name and after-phase behaviour. When None,
            it is read from the environment on each trigger.

    Example:
        class Contact(Hookable):
            hook_registry = HookRegistry()

        Contact.register_before("save", check_email)
        result = await contact.trigger("save", persist_contact, payload)
        if not result.ok:
            raise result.error
    """

    hook_registry: ClassVar[HookRegistry] = default_registry
    hook_config: ClassVar[HookableConfig | None] = None

    @classmethod
    def register_before(cls, action: str, callback: HookCallback) -> bool:
        return cls.hook_registry.register_before(action, callback)

    @classmethod
    def register_after(cls, action: str, callback: HookCallback) -> bool:
        return cls.hook_registry.register_after(action, callback)

    @classmethod
    def unregister_before(cls, action: str, callback: HookCallback) -> bool:
        return cls.hook_registry.unregister_before(action, callback)

    @classmethod
    def unregister_after(cls, action: str, callback: HookCallback) -> bool:
        return cls.hook_registry.unregister_after(action, callback)

    @classmethod
    def resolve_hook_config(cls) -> HookableConfig:
        """Return the type's config, falling back to the environment."""
        if cls.hook_config is not None:
            return cls.hook_config
        return HookableConfig.from_env()

    async def trigger(
        self,
        action: str,
        work: WorkFn | None = None,
        data: Any = None,
    ) -> TriggerResult:
        """Perform an action on this instance, surrounded by its hooks.

        Args:
            action: Action name (e.g., "save")
            work: Unit of work, called as work(instance, data). When omitted
                the before phase is skipped.
            data: Opaque payload passed to every hook and to work

        Returns:
            TriggerResult holding this instance and the first error, if any.
            Errors are never raised out of trigger().
        """
        runner = HookRunner(type(self).hook_registry)
        config = self.resolve_hook_config()

        try:
            await self._before_phase(runner, config, action, work, data)
            await self._after_phase(runner, config, action, data)
        except Exception as e:
            logger.warning(
                "Trigger '%s' on %s aborted: %s: %s",
                action,
                type(self).__name__,
                type(e).__name__,
                e,
            )
            return TriggerResult(target=self, error=e)

        return TriggerResult(target=self)

    async def _before_phase(
        self,
        runner: HookRunner,
        config: HookableConfig,
        action: str,
        work: WorkFn | None,
        data: Any,
    ) -> None:
        if work is None:
            return

        if action == config.validation_action:
            await maybe_await(self._validation_hooks(action).before_validation(data))
        else:
            await runner.run(self, action, Phase.BEFORE, data)

        await maybe_await(work(self, data))

    async def _after_phase(
        self, runner: HookRunner, config: HookableConfig, action: str, data: Any
    ) -> None:
        if action == config.validation_action:
            await maybe_await(self._validation_hooks(action).after_validation(data))
            return

        # Open question: the historical pipeline re-ran the before chain here,
        # leaving after hooks unreachable. legacy_after_alias keeps that.
        phase = Phase.BEFORE if config.legacy_after_alias else Phase.AFTER
        await runner.run(self, action, phase, data)

    def _validation_hooks(self, action: str) -> ValidationHooks:
        if not isinstance(self, ValidationHooks):
            raise MissingValidationHooksError(
                f"{type(self).__name__} must define before_validation and "
                f"after_validation to handle the '{action}' action"
            )
        return self
