"""Interactive questions asked before a mod is generated.

Two passes: the first asks for the mod's name and type, the second asks the
type-dependent details, defaulting author and donation link to the answers
remembered from the previous run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import questionary

from .config import Configuration
from .errors import PromptCancelled
from .scaffolder.models import (
    DEFAULT_AUTHOR,
    DEFAULT_DESCRIPTION,
    DEFAULT_MOD_NAME,
    ModInfo,
    ModType,
)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def required(message: str) -> Callable[[str], bool | str]:
    """Build a questionary validator that rejects empty or blank answers."""

    def _validate(value: str) -> bool | str:
        if not value or not value.strip():
            return message
        return True

    return _validate


# ---------------------------------------------------------------------------
# Asking
# ---------------------------------------------------------------------------


def _ask(question: questionary.Question) -> Any:
    try:
        return question.unsafe_ask()
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelled() from exc


def _text(
    message: str,
    default: str = "",
    validate: Callable[[str], bool | str] | None = None,
) -> str:
    answer = _ask(questionary.text(message, default=default, validate=validate))
    return (answer or "").strip()


def prompt_initial_info() -> tuple[str, ModType]:
    """First pass: mod name and mod type."""
    name = _text(
        "What is your mod called?",
        default=DEFAULT_MOD_NAME,
        validate=required("Mod name is required!"),
    )
    mod_type = _ask(
        questionary.select("What type of mod is this?", choices=ModType.choices())
    )
    return name, ModType(mod_type)


def prompt_detailed_info(mod_type: ModType, config: Configuration) -> dict[str, str]:
    """Second pass: category (Action only), description, author, donation."""
    answers: dict[str, str] = {}

    descriptor = mod_type.descriptor
    if descriptor.requires_category:
        answers["category"] = _text(
            f"What category does your {descriptor.name.lower()} mod belong to?",
            default=descriptor.default_category or "",
            validate=required(f"Category is required for {descriptor.name} mods!"),
        )

    answers["description"] = _text(
        "How would you describe your mod?",
        default=DEFAULT_DESCRIPTION,
    )
    answers["author"] = _text(
        "Who is the author of this mod?",
        default=config.author or DEFAULT_AUTHOR,
        validate=required("Author name is required!"),
    )
    answers["donation"] = _text(
        "Where can users donate to support you? (Leave empty if none)",
        default=config.donation or "",
    )
    return answers


def collect_mod_info(config: Configuration) -> ModInfo:
    """Run both prompt passes and merge them into a ``ModInfo``.

    Raises:
        PromptCancelled: If the operator aborts any prompt.
    """
    name, mod_type = prompt_initial_info()
    details = prompt_detailed_info(mod_type, config)
    return ModInfo(name=name, mod_type=mod_type, **details)
