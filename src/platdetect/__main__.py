"""Allow ``python -m platdetect``."""

import sys

from platdetect.cli import main

sys.exit(main())
