"""Allows running the CLI as: python -m isspass"""

from isspass.main.cli import main

if __name__ == "__main__":
    main()
