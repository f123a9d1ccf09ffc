import sys

from keyfmt.cli import main

sys.exit(main())
