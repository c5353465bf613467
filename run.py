#!/usr/bin/env python3
import sys
import os

# Run the CLI from a checkout without installing the package
ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(ROOT, "src")
sys.path.insert(0, SRC)

from edi_parser.cli import main

if __name__ == "__main__":
    main()
