import sys

from orthocount.cli import main

sys.exit(main())
