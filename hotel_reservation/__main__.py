import sys

from .presentation import main

if __name__ == "__main__":
    sys.exit(main())
