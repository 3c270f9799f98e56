"""Allow ``python -m cubetimer``."""

from cubetimer.cli.app import main

main()
