"""create-bmd command line entry point.

Runs the whole interactive flow: load the remembered answers, ask about the
mod, find the Bot Maker for Discord installation and write the mod into it.

Usage::

    create-bmd
    python -m create_bmd

Exit status is 0 on success or when the operator cancels a prompt, and 1 on
any other failure.
"""

from __future__ import annotations

import argparse
import os
import sys
import traceback

from . import __version__
from .config import ConfigStore, RunContext
from .errors import InstallationNotFoundError, PromptCancelled
from .installation import get_bmd_path
from .prompts import collect_mod_info
from .scaffolder import ModGenerator
from .utils import (
    console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)

DEBUG_ENV = "CREATE_BMD_ENV"


def run(store: ConfigStore | None = None) -> int:
    """Run the interactive flow once and return the process exit status."""
    try:
        console.print()
        store = store or ConfigStore()
        store.ensure_folder()
        ctx = RunContext.load(store)

        mod_info = collect_mod_info(ctx.config)
        ctx.remember_answers(mod_info)

        bmd_path = get_bmd_path(ctx)

        console.print()
        print_step(f'🔨 Creating {mod_info.mod_type.value} mod: "{mod_info.name}"')
        print_summary_table(mod_info.summary(), title="Mod details")
        written = ModGenerator().generate(bmd_path, mod_info)
        for path in written:
            print_info(f"  {path}")

        console.print()
        print_success("✅ Mod creation completed successfully!")
        print_info("Your mod is now ready to use in Bot Maker for Discord.")
        return 0

    except PromptCancelled:
        console.print()
        print_warning("❌ Operation cancelled by user")
        return 0

    except InstallationNotFoundError as exc:
        print_error(f"❌ {exc}")
        print_warning("📁 Please install Bot Maker for Discord from Steam or")
        print_warning("   manually set the installation path in the config file.")
        if exc.config_file is not None:
            print_info(f"   Config location: {exc.config_file}")
        return 1

    except Exception as exc:
        console.print()
        print_error("💥 An error occurred:")
        print_error(str(exc))
        if os.environ.get(DEBUG_ENV) == "development":
            print_info("\nStack trace:")
            print_info(traceback.format_exc())
        return 1


def main() -> None:
    """CLI entry point for ``create-bmd``."""
    parser = argparse.ArgumentParser(
        prog="create-bmd",
        description="Create starter mods for Bot Maker for Discord",
        epilog=(
            "All details are asked interactively. Answers for author and\n"
            "donation link are remembered for the next run."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args()

    sys.exit(run())


if __name__ == "__main__":
    main()
