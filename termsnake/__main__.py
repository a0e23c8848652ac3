import sys

from termsnake.cli.play import main

sys.exit(main())
