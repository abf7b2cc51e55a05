import sys

from actsel.cli import main

sys.exit(main())
