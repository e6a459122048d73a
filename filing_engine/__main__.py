"""
Entry point for running the engine as a module: python -m filing_engine
"""

import sys
from filing_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
