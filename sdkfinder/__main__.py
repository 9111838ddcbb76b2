"""
Entry point for running the sdkfinder CLI as a module.

Usage: python -m sdkfinder [command] [options]
"""

from sdkfinder.cli.parser import main

if __name__ == "__main__":
    main()
