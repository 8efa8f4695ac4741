import sys

from toum_updater.cli import main

sys.exit(main())
