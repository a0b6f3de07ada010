"""Exception types raised by create-bmd.

Every fatal, user-reportable failure derives from ``CreateBmdError`` so the
CLI entry point can report it and exit non-zero.  ``PromptCancelled`` is kept
outside that hierarchy because the operator aborting a prompt is not a
failure.
"""

from __future__ import annotations

from pathlib import Path


class CreateBmdError(Exception):
    """Base class for fatal create-bmd errors."""


class TemplateError(CreateBmdError):
    """Raised when a bundled template cannot be read."""

    def __init__(self, template_path: str | Path, cause: Exception) -> None:
        self.template_path = Path(template_path)
        self.cause = cause
        super().__init__(f"Failed to process template {self.template_path}: {cause}")


class InstallationNotFoundError(CreateBmdError):
    """Raised when no Bot Maker for Discord installation can be located."""

    def __init__(self, config_file: str | Path | None = None) -> None:
        self.config_file = Path(config_file) if config_file else None
        super().__init__("Bot Maker for Discord installation not found!")


class UnsupportedModTypeError(CreateBmdError):
    """Raised when mod generation is asked for a type it does not know."""

    def __init__(self, mod_type: object) -> None:
        self.mod_type = mod_type
        super().__init__(f"Unsupported mod type: {mod_type}")


class PromptCancelled(Exception):
    """Raised when the operator aborts an interactive prompt."""
