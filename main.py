#!/usr/bin/env python3
"""
agendasub Entry Point Script

This script initializes the CLI handler and parses a single transcript.
"""

import sys
from agendasub.cli import CLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("agendasub requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    cli.run()
