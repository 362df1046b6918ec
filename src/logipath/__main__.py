"""Main entry point for the Logipath package when run as a module.

This module enables running Logipath directly using 'python -m logipath'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    if len(sys.argv) < 2:
        print("Usage: python -m logipath <command> [args...]")
        print("\nAvailable commands:")
        print("  route       - Compute a route with one strategy")
        print("  strategies  - List available strategies")
        print("  validate    - Check a network document")
        sys.exit(1)

    sys.exit(cli.main(sys.argv[1:]))


if __name__ == "__main__":
    main()
