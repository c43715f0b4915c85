#!/usr/bin/env python3
"""
agendasub Batch Processing Entry Point

Parses every .srt transcript in a directory and writes the results into a
Segments/ subfolder.
"""

import sys

from agendasub.batch import run_batch_processing

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("agendasub requires Python 3.8 or later.\n")
        sys.exit(1)

    run_batch_processing()
