"""Allow ``python -m create_bmd``."""

from create_bmd.cli import main

main()
