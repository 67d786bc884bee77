"""Allow running as ``python -m daemonctl``."""

import sys

from daemonctl.cli.main import main

sys.exit(main())
