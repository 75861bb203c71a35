"""Allow `python -m bidiscan`."""

import sys

from bidiscan.cli import main

sys.exit(main())
