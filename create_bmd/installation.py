"""Locating the Bot Maker for Discord installation.

Three sources are tried in order, first hit wins:

1. the ``bmdPath`` override saved in the configuration, if it still exists
2. the well-known Steam library locations for this operating system
3. asking the operator, re-prompting until the answer looks like a BMD
   installation, then saving it as the override
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Iterable
from pathlib import Path

import questionary

from .config import RunContext
from .errors import InstallationNotFoundError, PromptCancelled
from .utils import print_info, print_success, print_warning

_STEAM_APP_DIR = ("steamapps", "common", "Bot Maker For Discord")

# Any of these inside a directory marks it as a BMD installation.
INSTALLATION_MARKERS: tuple[str, ...] = ("Bot Maker For Discord.exe", "resources")


def common_bmd_paths(system: str | None = None) -> list[Path]:
    """Known install locations for *system* (defaults to this OS), most likely first."""
    system = system or platform.system()
    if system == "Windows":
        roots = [
            Path("C:\\Program Files (x86)\\Steam"),
            Path("C:\\Program Files\\Steam"),
        ]
    elif system == "Darwin":
        roots = [Path.home() / "Library" / "Application Support" / "Steam"]
    else:
        roots = [
            Path.home() / ".steam" / "steam",
            Path.home() / ".local" / "share" / "Steam",
            Path.home() / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam",
        ]
    return [root.joinpath(*_STEAM_APP_DIR) for root in roots]


def is_bmd_installation(path: str | Path) -> bool:
    """Return ``True`` if *path* contains at least one installation marker."""
    root = Path(path)
    return any((root / marker).exists() for marker in INSTALLATION_MARKERS)


def find_bmd_installation(candidates: Iterable[str | Path] | None = None) -> Path | None:
    """Return the first existing path among *candidates*, or ``None``."""
    if candidates is None:
        candidates = common_bmd_paths()
    for candidate in candidates:
        path = Path(candidate)
        if path.exists():
            print_info(f"Found BMD installation at: {path}")
            return path
    return None


def validate_bmd_path(value: str) -> bool | str:
    """questionary validator for the installation path prompt."""
    if not value or not value.strip():
        return "BMD installation path is required!"

    path = Path(value.strip()).expanduser()
    if not path.exists():
        return "The specified path does not exist!"
    if not is_bmd_installation(path):
        return "This doesn't appear to be a valid Bot Maker for Discord installation!"
    return True


def prompt_for_bmd_path() -> Path:
    """Ask the operator where BMD is installed.

    Raises:
        PromptCancelled: If the operator aborts the prompt.
    """
    try:
        answer = questionary.text(
            "Please enter the path to your Bot Maker for Discord installation:",
            validate=validate_bmd_path,
        ).unsafe_ask()
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelled() from exc
    return Path(answer.strip()).expanduser()


def get_bmd_path(ctx: RunContext, *, interactive: bool | None = None) -> Path:
    """Resolve the installation root for this run.

    Args:
        ctx: The run context; its saved ``bmd_path`` is consulted first and
            updated when the operator supplies a path.
        interactive: Whether the operator may be asked.  Defaults to
            whether stdin is a terminal.

    Raises:
        InstallationNotFoundError: If nothing was found and asking is not
            possible.
        PromptCancelled: If the operator aborts the path prompt.
    """
    saved = ctx.config.bmd_path
    if saved and Path(saved).exists():
        print_info(f"Using saved BMD path: {saved}")
        return Path(saved)

    detected = find_bmd_installation()
    if detected is not None:
        return detected

    if interactive is None:
        interactive = sys.stdin.isatty()
    if not interactive:
        raise InstallationNotFoundError(ctx.config_file)

    print_warning("❌ Bot Maker for Discord installation not found in common locations.")
    user_path = prompt_for_bmd_path()
    if ctx.remember_path(user_path):
        print_success("✓ BMD path saved to configuration for future use.")
    return user_path
