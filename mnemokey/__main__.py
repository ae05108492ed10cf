import sys

from mnemokey.cli import main

sys.exit(main())
