#!/usr/bin/env python3
"""Run the deposit/withdraw demonstration.

Prints the customer name and the final balance:

    Customer: Tim Shao
    Balance: 1300
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_classes.demo import main

if __name__ == "__main__":
    sys.exit(main())
