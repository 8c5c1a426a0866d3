"""Allow ``python -m pseudoscss INPUT OUTPUT``."""

import sys

from pseudoscss.cli import main

sys.exit(main())
