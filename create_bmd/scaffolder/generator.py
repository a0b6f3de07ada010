"""Mod generation.

Takes a ``ModInfo`` and a Bot Maker for Discord installation root and writes
the mod's files into the type-specific folder under that root:

* Action / Event: one ``<camelName>_MOD.js`` file
* Automation: ``Automations/<slug>/`` with four rendered files
* Theme: ``Themes/<slug>/`` with ``data.json`` and a copied ``theme.css``
* Translation: ``Translations/<slug>/`` with ``data.json`` and a copied
  ``strings.json``

Files are written one after another; if a write fails, files already written
for the mod are left in place.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import UnsupportedModTypeError
from ..utils import print_success, sanitize_folder_name, to_camel_case
from .models import ModInfo, ModType
from .templates import TemplateRenderer

MOD_FILE_SUFFIX = "_MOD.js"

# Output file name -> template path, in write order
AUTOMATION_TEMPLATES: dict[str, str] = {
    "data.json": "Automation/data.json",
    "main.js": "Automation/main.js",
    "startup.js": "Automation/startup.js",
    "startup_info.json": "Automation/startup_info.json",
}


def mod_file_name(mod_name: str) -> str:
    """File name for single-file mods, e.g. ``myCoolMod_MOD.js``."""
    return f"{to_camel_case(mod_name)}{MOD_FILE_SUFFIX}"


class ModGenerator:
    """Writes mods into a Bot Maker for Discord installation."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, bmd_path: str | Path, mod_info: ModInfo) -> list[Path]:
        """Create the mod described by *mod_info* under *bmd_path*.

        Returns:
            Every file written, in write order.

        Raises:
            UnsupportedModTypeError: If ``mod_info.mod_type`` is not a known
                mod type.
            TemplateError: If a template cannot be read.
        """
        root = Path(bmd_path)
        match mod_info.mod_type:
            case ModType.ACTION:
                return self.create_action_mod(root, mod_info)
            case ModType.EVENT:
                return self.create_event_mod(root, mod_info)
            case ModType.AUTOMATION:
                return self.create_automation_mod(root, mod_info)
            case ModType.THEME:
                return self.create_theme_mod(root, mod_info)
            case ModType.TRANSLATION:
                return self.create_translation_mod(root, mod_info)
            case _:
                raise UnsupportedModTypeError(mod_info.mod_type)

    def output_dir(self, bmd_path: str | Path, mod_info: ModInfo) -> Path:
        """Where the mod goes: the file's directory, or the mod folder itself."""
        descriptor = mod_info.mod_type.descriptor
        base = Path(bmd_path) / descriptor.output_path
        if descriptor.is_folder:
            return base / sanitize_folder_name(mod_info.name)
        return base

    # -- Single-file mods --------------------------------------------------

    def create_action_mod(self, bmd_path: Path, mod_info: ModInfo) -> list[Path]:
        out = self._render(
            "Action.js",
            self.output_dir(bmd_path, mod_info) / mod_file_name(mod_info.name),
            mod_info,
        )
        print_success(f"✓ Action mod created: {out}")
        return [out]

    def create_event_mod(self, bmd_path: Path, mod_info: ModInfo) -> list[Path]:
        out = self._render(
            "Event.js",
            self.output_dir(bmd_path, mod_info) / mod_file_name(mod_info.name),
            mod_info,
        )
        print_success(f"✓ Event mod created: {out}")
        return [out]

    # -- Folder mods -------------------------------------------------------

    def create_automation_mod(self, bmd_path: Path, mod_info: ModInfo) -> list[Path]:
        folder = self.output_dir(bmd_path, mod_info)
        folder.mkdir(parents=True, exist_ok=True)

        written = [
            self._render(template, folder / name, mod_info)
            for name, template in AUTOMATION_TEMPLATES.items()
        ]
        print_success(f"✓ Automation mod created: {folder}")
        return written

    def create_theme_mod(self, bmd_path: Path, mod_info: ModInfo) -> list[Path]:
        folder = self.output_dir(bmd_path, mod_info)
        folder.mkdir(parents=True, exist_ok=True)

        written = [
            self._render("Theme/data.json", folder / "data.json", mod_info),
            self.renderer.copy_static("Theme/theme.css", folder / "theme.css"),
        ]
        print_success(f"✓ Theme mod created: {folder}")
        return written

    def create_translation_mod(self, bmd_path: Path, mod_info: ModInfo) -> list[Path]:
        folder = self.output_dir(bmd_path, mod_info)
        folder.mkdir(parents=True, exist_ok=True)

        written = [
            self._render("Translation/data.json", folder / "data.json", mod_info),
            self.renderer.copy_static("Translation/strings.json", folder / "strings.json"),
        ]
        print_success(f"✓ Translation mod created: {folder}")
        return written

    # -- Internal ----------------------------------------------------------

    def _render(self, template: str, output_path: Path, mod_info: ModInfo) -> Path:
        return self.renderer.render_to_file(template, output_path, mod_info.replacements())
