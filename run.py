#!/usr/bin/env python3
"""
Simple Bank Entry Point

Runs the savings/current account demonstration and prints the account
statements to stdout. Structured logs go to stderr.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from simple_bank.scenario import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
