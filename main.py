#!/usr/bin/env python3
"""
Main entry point for the ircwire command-line front end
"""

from ircwire.main import cli

if __name__ == "__main__":
    cli()
