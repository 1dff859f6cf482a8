"""YAML hook binding loader.

Reads hook bindings from a YAML file and resolves each "module:attr"
reference to a callable:

    hooks:
      save:
        before:
          - myapp.hooks:stamp_updated_at
        after:
          - myapp.hooks:publish_change
"""

import importlib
import logging
from pathlib import Path

import yaml

from hookable.hooks.registry import HookRegistry
from hookable.hooks.types import HookBinding, HookLoadError, Phase

logger = logging.getLogger(__name__)

VALID_PHASES = tuple(p.value for p in Phase)


def resolve_reference(reference: str):
    """Import the callable named by a "module:attr" reference.

    Dotted attribute paths after the colon are followed (e.g.
    "myapp.models:Contact.audit").

    Raises:
        HookLoadError: If the reference is malformed, unimportable, or not callable
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise HookLoadError(f"Hook reference '{reference}' must look like 'module:attr'")

    try:
        obj = importlib.import_module(module_name)
    except Exception as e:
        raise HookLoadError(
            f"Cannot import module for hook '{reference}': {type(e).__name__}: {e}"
        ) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise HookLoadError(f"Hook '{reference}' not found: {e}") from e

    if not callable(obj):
        raise HookLoadError(f"Hook '{reference}' is not callable")

    return obj


def parse_hook_bindings(data: dict) -> list[HookBinding]:
    """Build bindings from an already-parsed YAML document, in file order."""
    if not isinstance(data, dict) or not isinstance(data.get("hooks"), dict):
        raise HookLoadError("Hook file must contain a 'hooks' mapping")

    bindings: list[HookBinding] = []
    for action, phases in data["hooks"].items():
        if not isinstance(phases, dict):
            raise HookLoadError(f"Action '{action}' must map phases to hook lists")

        for phase, references in phases.items():
            if phase not in VALID_PHASES:
                raise HookLoadError(
                    f"Unknown phase '{phase}' for action '{action}'. "
                    f"Expected one of: {', '.join(VALID_PHASES)}"
                )
            if references is None:
                continue
            if isinstance(references, str):
                references = [references]
            if not isinstance(references, list):
                raise HookLoadError(f"Hooks for '{action}' ({phase}) must be a list")

            for reference in references:
                if not isinstance(reference, str):
                    raise HookLoadError(
                        f"Hook reference for '{action}' ({phase}) must be a string, "
                        f"got {reference!r}"
                    )
                bindings.append(
                    HookBinding(
                        action=str(action),
                        phase=phase,
                        reference=reference,
                        callback=resolve_reference(reference),
                    )
                )

    return bindings


def load_hook_bindings(path: Path) -> list[HookBinding]:
    """Load and resolve hook bindings from a YAML file.

    Raises:
        HookLoadError: If the file is unreadable, malformed, or references
            a hook that cannot be resolved
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise HookLoadError(f"Cannot read hook file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise HookLoadError(f"Invalid YAML in {path}: {e}") from e

    return parse_hook_bindings(data)


def apply_hook_bindings(
    bindings: list[HookBinding], registry: HookRegistry
) -> list[HookBinding]:
    """Register bindings in order.

    Returns:
        The bindings that were skipped because the callback was already registered.
    """
    duplicates: list[HookBinding] = []
    for binding in bindings:
        if not registry.register(binding.action, binding.phase, binding.callback):
            logger.warning(
                "Hook '%s' already registered for '%s' (%s), skipping",
                binding.reference,
                binding.action,
                binding.phase,
            )
            duplicates.append(binding)
    return duplicates
