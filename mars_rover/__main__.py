import sys

from mars_rover.cli import main

if __name__ == "__main__":
    sys.exit(main())
