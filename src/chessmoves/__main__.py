"""Allow ``python -m chessmoves``."""

import sys

from chessmoves.app import main

sys.exit(main())
