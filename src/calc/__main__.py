"""
Main entry point for the calculator when run as a module.
"""

import sys
from calc.calc_cli import main

if __name__ == '__main__':
    sys.exit(main())
