import sys

from dpalign.cli import main

sys.exit(main())
