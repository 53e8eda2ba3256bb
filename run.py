#!/usr/bin/env python3
"""
Cashbox Entry Point

Runs the currency demo: prints the total of $5.75 and $3.50 and whether it
equals $9.25.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from cashbox.demo import main


if __name__ == "__main__":
    sys.exit(main())
