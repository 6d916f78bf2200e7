"""Allow ``python -m ptcal``."""

from ptcal.cli import main

main()
