import sys

from ulice.cli import main

sys.exit(main())
