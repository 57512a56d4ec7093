import sys

from libweather.cli import main

sys.exit(main())
