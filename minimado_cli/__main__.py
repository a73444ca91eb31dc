"""
Entry point for running the package as a module.

Usage:
    $ python -m minimado_cli list
    $ python -m minimado_cli --help
"""

from .main import app

if __name__ == "__main__":
    app()
