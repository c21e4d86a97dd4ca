"""Allow ``python -m gravcal``."""

import sys

from gravcal.cli.main import main

sys.exit(main())
