"""
Entry point for running crossargs CLI as a module.

Usage: python -m crossargs.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
