import sys

from src.calculator.console import main

if __name__ == "__main__":
    sys.exit(main())
