"""Permet l'exécution via « python -m linux_process_utils »."""

import sys

from linux_process_utils.cli import main

if __name__ == "__main__":
    sys.exit(main())
