"""create-bmd configuration.

Persists the operator's remembered answers (author, donation link) and an
optional Bot Maker for Discord installation override in a per-user JSON file
at ``<app-data>/create-bmd/config.json``.  The JSON keys are ``bmdPath``,
``author`` and ``donation``, all optional.

Configuration is never ambient: a ``RunContext`` is created once per run and
handed to every component that reads or updates it.
"""

from __future__ import annotations

import json
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import CreateBmdError
from .utils import print_warning

if TYPE_CHECKING:
    from .scaffolder.models import ModInfo

APP_NAME = "create-bmd"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_ENV = "CREATE_BMD_CONFIG_DIR"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class Configuration(BaseModel):
    """Remembered per-user preferences."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    bmd_path: str | None = Field(default=None, alias="bmdPath")
    author: str | None = Field(default=None)
    donation: str | None = Field(default=None)

    def to_json(self) -> str:
        """Serialise using the on-disk key names, omitting unset keys."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


# ---------------------------------------------------------------------------
# Per-user location
# ---------------------------------------------------------------------------


def app_data_folder(app_name: str = APP_NAME) -> Path:
    """Return the per-user application data folder for this platform.

    * Windows: ``%APPDATA%\\<app_name>``
    * macOS: ``~/Library/Application Support/<app_name>``
    * anything else: ``$XDG_CONFIG_HOME/<app_name>`` or ``~/.config/<app_name>``

    ``CREATE_BMD_CONFIG_DIR`` overrides the computed location entirely.

    Raises:
        CreateBmdError: On Windows when ``%APPDATA%`` is not set.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)

    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise CreateBmdError(
                f"Unable to determine application data folder for platform: {system}"
            )
        base = Path(appdata)
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"

    return base / app_name


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class ConfigStore:
    """Loads and saves ``Configuration`` at a fixed file location.

    Both directions are forgiving: a missing or unreadable file loads as an
    empty configuration, and a failed save only prints a warning.
    """

    def __init__(self, config_dir: str | Path | None = None) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else app_data_folder()

    @property
    def config_file(self) -> Path:
        """Path to ``config.json`` inside the config directory."""
        return self.config_dir / CONFIG_FILE_NAME

    def ensure_folder(self) -> None:
        """Create the config directory if it does not exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Configuration:
        """Read the configuration, or return an empty one."""
        if not self.config_file.exists():
            return Configuration()

        try:
            raw = self.config_file.read_text(encoding="utf-8")
            return Configuration.model_validate(json.loads(raw))
        except (OSError, ValueError, ValidationError) as exc:
            print_warning(f"Warning: Could not load config file: {exc}")
            return Configuration()

    def save(self, config: Configuration) -> bool:
        """Write *config* to disk.

        Returns:
            ``True`` when the file was written, ``False`` when the write
            failed and a warning was printed instead.
        """
        try:
            self.ensure_folder()
            self.config_file.write_text(config.to_json(), encoding="utf-8")
        except OSError as exc:
            print_warning(f"Warning: Could not save config file: {exc}")
            return False
        return True


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------


@dataclass
class RunContext:
    """State shared by the components of a single create-bmd run.

    Attributes:
        store: Where the configuration lives on disk.
        config: The in-memory configuration, loaded at construction.
    """

    store: ConfigStore
    config: Configuration = field(default_factory=Configuration)

    @classmethod
    def load(cls, store: ConfigStore | None = None) -> "RunContext":
        """Create a context and load its configuration from *store*."""
        store = store or ConfigStore()
        return cls(store=store, config=store.load())

    @property
    def config_file(self) -> Path:
        return self.store.config_file

    def remember_path(self, bmd_path: str | Path) -> bool:
        """Record an installation override and persist it."""
        self.config = self.config.model_copy(update={"bmd_path": str(bmd_path)})
        return self.store.save(self.config)

    def remember_answers(self, mod_info: "ModInfo") -> bool:
        """Record the author and donation answers as future defaults and persist them."""
        self.config = self.config.model_copy(
            update={"author": mod_info.author, "donation": mod_info.donation}
        )
        return self.store.save(self.config)
