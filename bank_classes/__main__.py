"""Allow ``python -m bank_classes``."""

import sys

from bank_classes.demo import main

sys.exit(main())
