import sys

from dfalex.cli import main

sys.exit(main())
