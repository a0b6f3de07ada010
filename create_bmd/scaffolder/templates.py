"""Placeholder substitution over the bundled mod templates.

Templates live under ``create_bmd/scaffolder/templates/`` and mark each
substitutable slot as ``//slot//``.  Substitution is literal: there is no
expression language, and a marker whose slot is not in the replacement map is
left in the output untouched.
"""

from __future__ import annotations

import re
import shutil
from collections.abc import Mapping
from pathlib import Path

from ..errors import TemplateError
from ..utils import print_warning


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_MARKER_PATTERN = re.compile(r"//(\w+)//")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders and copies the template files that make up a mod."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str | Path, replacements: Mapping[str, str | None]) -> str:
        """Render a template with its ``//slot//`` markers substituted.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"Automation/main.js"``), or an absolute path.
            replacements: Slot name -> value.  ``None`` substitutes an
                empty string.

        Returns:
            The rendered text.

        Raises:
            TemplateError: If the template cannot be read.
        """
        return substitute(self._read(template_path), replacements)

    def render_to_file(
        self,
        template_path: str | Path,
        output_path: str | Path,
        replacements: Mapping[str, str | None],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Markers left in the
        output produce a warning but the file is still written.
        """
        content = self.render(template_path, replacements)
        out = Path(output_path)
        leftover = unresolved_markers(content)
        if leftover:
            print_warning(
                f"Warning: {out.name} still contains unfilled placeholders: "
                + ", ".join(f"//{slot}//" for slot in leftover)
            )
        _write_file(out, content)
        return out

    def copy_static(self, template_path: str | Path, output_path: str | Path) -> Path:
        """Copy a template verbatim, byte for byte, to *output_path*.

        Raises:
            TemplateError: If the copy fails.  The error names the template,
                whichever side of the copy failed.
        """
        source = self.resolve(template_path)
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        try:
            shutil.copyfile(source, out)
        except OSError as exc:
            raise TemplateError(source, exc) from exc
        return out

    # -- Utility -----------------------------------------------------------

    def resolve(self, template_path: str | Path) -> Path:
        """Return the absolute path of a template."""
        return self.template_dir / template_path

    def _read(self, template_path: str | Path) -> str:
        path = self.resolve(template_path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateError(path, exc) from exc


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def substitute(text: str, replacements: Mapping[str, str | None]) -> str:
    """Replace every ``//slot//`` marker whose slot appears in *replacements*."""
    for placeholder, value in replacements.items():
        text = text.replace(f"//{placeholder}//", value or "")
    return text


def unresolved_markers(text: str) -> list[str]:
    """Return the distinct slot names still marked in *text*, in order of appearance."""
    seen: list[str] = []
    for match in _MARKER_PATTERN.finditer(text):
        if match.group(1) not in seen:
            seen.append(match.group(1))
    return seen


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
