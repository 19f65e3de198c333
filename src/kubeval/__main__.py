import sys

from kubeval.cli import main

sys.exit(main())
