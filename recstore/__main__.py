import sys

from recstore.cli import main

sys.exit(main())
