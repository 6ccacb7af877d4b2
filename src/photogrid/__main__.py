import sys

from photogrid.cli import main

sys.exit(main())
