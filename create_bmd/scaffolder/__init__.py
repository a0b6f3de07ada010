"""create-bmd scaffolder -- renders and writes mod files.

Quick usage::

    from create_bmd.scaffolder import ModGenerator, ModInfo, ModType

    info = ModInfo(
        name="My Cool Mod",
        mod_type=ModType.ACTION,
        author="Alex",
        category="Message",
    )
    written = ModGenerator().generate(bmd_path, info)
"""

from create_bmd.scaffolder.generator import ModGenerator, mod_file_name
from create_bmd.scaffolder.models import MOD_TYPES, ModInfo, ModType, ModTypeDescriptor
from create_bmd.scaffolder.templates import TemplateRenderer

__all__ = [
    "MOD_TYPES",
    "ModGenerator",
    "ModInfo",
    "ModType",
    "ModTypeDescriptor",
    "TemplateRenderer",
    "mod_file_name",
]
