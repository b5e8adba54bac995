import sys

from deskdash.cli import main

sys.exit(main())
