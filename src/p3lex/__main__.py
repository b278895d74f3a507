"""Allow ``python -m p3lex INPUT OUTPUT``."""

import sys

from p3lex.cli import main

sys.exit(main())
