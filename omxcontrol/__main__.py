# ABOUTME: Entry point for running omxcontrol as a module
# ABOUTME: Allows execution via python -m omxcontrol

import sys

from omxcontrol.cli import main

if __name__ == "__main__":
    sys.exit(main())
