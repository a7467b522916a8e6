"""
Entry point for running casingcalc as a module.

Usage:
    python -m casingcalc calculate --input example.json
    python -m casingcalc make-example
"""

import sys

from casingcalc.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
