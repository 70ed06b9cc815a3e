"""
Entry point for running rustcfg CLI as a module.

Usage: python -m rustcfg.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
