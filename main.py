"""Run the nhl235 command line tool from a source checkout.

Usage
-----
python main.py [--nocolors] [--highlight] [--stats]
"""
import sys

from nhl235.cli import main

if __name__ == "__main__":
    sys.exit(main())
