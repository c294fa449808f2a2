import sys

from buffer_split.cli import main

sys.exit(main())
