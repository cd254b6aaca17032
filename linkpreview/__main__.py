import sys

from linkpreview.cli import main

sys.exit(main())
