"""Allow ``python -m statelab``."""

import sys

from statelab.cli import main

sys.exit(main())
