"""create-bmd -- starter mod generator for Bot Maker for Discord.

Quick usage::

    from create_bmd.config import ConfigStore, RunContext
    from create_bmd.scaffolder import ModGenerator, ModInfo, ModType

    info = ModInfo(name="My Cool Mod", mod_type=ModType.EVENT, author="Alex")
    ModGenerator().generate("/path/to/Bot Maker For Discord", info)
"""

__version__ = "1.0.0"
