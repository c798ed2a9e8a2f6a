import sys

from reapclone.cli import main

sys.exit(main())
