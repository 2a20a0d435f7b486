"""
Entry point for running crossargs CLI as a module.

Usage: python -m crossargs [command] [options]
"""

from crossargs.cli.parser import main

if __name__ == "__main__":
    main()
