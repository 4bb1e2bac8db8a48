#!/usr/bin/python3
"""
Main entry point for the rl translator.

Loads the stored configuration, resolves the requested action from the
command line and prints the result.
"""

from rltranslate.cli import main

if __name__ == "__main__":
    main()
