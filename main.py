#!/usr/bin/env python3
"""Entry point for cheetsheet."""

from cheetsheet.app.main import main

if __name__ == "__main__":
    main()
