"""
Entry point for running rustcfg CLI as a module.

Usage: python -m rustcfg [command] [options]
"""

from rustcfg.cli.parser import main

if __name__ == "__main__":
    main()
