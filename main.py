#!/usr/bin/env python3
"""
ABOUTME: Entry point for the environment validator CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from env_guard.cli import main

if __name__ == "__main__":
    main()
