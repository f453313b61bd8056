#!/usr/bin/env python
"""CLI for the phnews proxy and reader."""

from phnews.cli import main

if __name__ == "__main__":
    main()
