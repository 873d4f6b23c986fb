#!/usr/bin/env python3
"""
Scoped DNS Manager - Main Entry Point

This is the main entry point for the Scoped DNS Manager.
It can be run directly or imported as a module.
"""

from scoped_dns_manager.cli.main import main

if __name__ == "__main__":
    main()
