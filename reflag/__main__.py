"""Allow ``python -m reflag``."""

import sys

from reflag.main import main

if __name__ == '__main__':
    sys.exit(main())
