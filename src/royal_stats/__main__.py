import sys

from royal_stats.cli import main

sys.exit(main())
