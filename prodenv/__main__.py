import sys

from prodenv.cli import main


sys.exit(main())
