import sys

from mojibox.cli import main

sys.exit(main())
