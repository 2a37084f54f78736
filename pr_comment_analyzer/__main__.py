"""Allow running the analyzer with ``python -m pr_comment_analyzer``."""

import sys

from pr_comment_analyzer.cli import main

if __name__ == "__main__":
    sys.exit(main())
