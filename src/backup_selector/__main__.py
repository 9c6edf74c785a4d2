"""Entry point for ``python -m backup_selector``."""

from backup_selector.app.cli import main

if __name__ == "__main__":
    main()
