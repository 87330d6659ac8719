import sys

from xoshiro128.cli import main

sys.exit(main())
