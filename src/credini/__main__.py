import sys

from _credini.cli import main

sys.exit(main())
