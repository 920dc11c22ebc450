import sys

from towersym.cli import main

sys.exit(main())
