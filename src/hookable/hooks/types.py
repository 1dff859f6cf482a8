"""Hook system types for hookable.

Defines the core data structures for the lifecycle hook pipeline:
- Phase: when a hook runs relative to the action's work
- HookCallback / WorkFn: the callable shapes the runner and facade accept
- TriggerResult: the single outcome of one trigger call
- HookBinding: one hook reference loaded from a binding file
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Phase(str, Enum):
    """When a hook runs relative to an action's work."""

    BEFORE = "before"
    AFTER = "after"


# Hook signature: (target, data) -> awaitable or None. Raising aborts the chain.
HookCallback = Callable[[Any, Any], Awaitable[None] | None]

# Work signature: (target, data) -> awaitable or None
WorkFn = Callable[[Any, Any], Awaitable[None] | None]


class HookError(Exception):
    """Base class for errors raised by the hook system itself."""


class CorruptRegistryError(HookError):
    """A non-callable entry was found inside a hook list."""

    def __init__(self, action: str, phase: str, index: int, entry: Any):
        self.action = action
        self.phase = phase
        self.index = index
        self.entry = entry
        super().__init__(
            f"Non-callable encountered in hook list for '{action}' ({phase}) "
            f"at position {index}: {entry!r}"
        )


class MissingValidationHooksError(HookError):
    """The reserved validation action was triggered on a type without validation hooks."""


class HookLoadError(HookError, ValueError):
    """A hook binding file could not be parsed or resolved."""


@dataclass
class TriggerResult:
    """Outcome of a trigger call.

    Attributes:
        target: The entity instance the action was performed on
        error: The error that stopped the pipeline, or None on success
    """

    target: Any
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class HookBinding:
    """A hook reference read from a binding file.

    Attributes:
        action: Action name (e.g., "save")
        phase: Phase name, normally "before" or "after"
        reference: Import reference in "module:attr" form
        callback: The resolved callable
    """

    action: str
    phase: str
    reference: str
    callback: HookCallback
