"""
Main module entry point.

This allows running the CLI as: python -m isspass.main
"""

from .cli import main

if __name__ == "__main__":
    main()
