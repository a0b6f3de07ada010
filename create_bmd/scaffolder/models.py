"""Mod types and the answers collected for one generated mod."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Mod types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModTypeDescriptor:
    """Static metadata for one kind of mod.

    Attributes:
        name: Display name, also the value offered in the type prompt.
        output_path: Output directory relative to the installation root.
        requires_category: Whether the category prompt is asked.
        default_category: Default answer for the category prompt.
        is_folder: ``True`` when the mod is a folder of files rather than
            a single file.
    """

    name: str
    output_path: str
    requires_category: bool = False
    default_category: str | None = None
    is_folder: bool = False


class ModType(str, Enum):
    """The five kinds of mod Bot Maker for Discord loads."""

    ACTION = "Action"
    EVENT = "Event"
    AUTOMATION = "Automation"
    THEME = "Theme"
    TRANSLATION = "Translation"

    @property
    def descriptor(self) -> ModTypeDescriptor:
        return MOD_TYPES[self]

    @classmethod
    def choices(cls) -> list[str]:
        """Display names in prompt order."""
        return [member.value for member in cls]


MOD_TYPES: dict[ModType, ModTypeDescriptor] = {
    ModType.ACTION: ModTypeDescriptor(
        name="Action",
        output_path="AppData/Actions",
        requires_category=True,
        default_category="Message",
    ),
    ModType.EVENT: ModTypeDescriptor(
        name="Event",
        output_path="AppData/Events",
    ),
    ModType.AUTOMATION: ModTypeDescriptor(
        name="Automation",
        output_path="Automations",
        is_folder=True,
    ),
    ModType.THEME: ModTypeDescriptor(
        name="Theme",
        output_path="Themes",
        is_folder=True,
    ),
    ModType.TRANSLATION: ModTypeDescriptor(
        name="Translation",
        output_path="Translations",
        is_folder=True,
    ),
}


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

DEFAULT_MOD_NAME = "My Mod"
DEFAULT_DESCRIPTION = "Created with create-bmd"
DEFAULT_AUTHOR = "Your Name"


class ModInfo(BaseModel):
    """Everything the operator answered for one mod.

    ``category`` is set if and only if the mod type asks for one.
    """

    name: str = Field(..., min_length=1, description="Mod display name")
    mod_type: ModType
    description: str = Field(default=DEFAULT_DESCRIPTION)
    author: str = Field(..., min_length=1)
    donation: str = Field(default="", description="Donation link, may be empty")
    category: str | None = Field(default=None)

    @model_validator(mode="after")
    def _check_category(self) -> "ModInfo":
        requires = self.mod_type.descriptor.requires_category
        if requires and not (self.category and self.category.strip()):
            raise ValueError(f"Category is required for {self.mod_type.value} mods")
        if not requires and self.category is not None:
            raise ValueError(f"{self.mod_type.value} mods do not take a category")
        return self

    def replacements(self) -> dict[str, str | None]:
        """Placeholder values for this mod's templates."""
        values: dict[str, str | None] = {
            "name": self.name,
            "author": self.author,
            "description": self.description,
            "donation": self.donation,
        }
        if self.mod_type.descriptor.requires_category:
            values["category"] = self.category
        return values

    def summary(self) -> dict[str, str]:
        """Label -> value rows for the pre-generation summary table."""
        rows = {
            "Name": self.name,
            "Type": self.mod_type.value,
        }
        if self.category is not None:
            rows["Category"] = self.category
        rows["Description"] = self.description
        rows["Author"] = self.author
        rows["Donation"] = self.donation or "(none)"
        return rows
