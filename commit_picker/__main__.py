#!/usr/bin/env python3
"""
Main entry point for running commit_picker as a module.
"""

from .commit_picker import main
import sys

if __name__ == "__main__":
    sys.exit(main())
