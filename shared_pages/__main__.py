"""Main entry point for running shared_pages as a module.

This allows running with: python -m shared_pages
"""

from .app import main_cli_runner

if __name__ == "__main__":
    main_cli_runner()
