import sys

from sui_dev_tools.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
