"""Allow running as: python -m artisan_sync <command>."""

from artisan_sync.cli import main

if __name__ == "__main__":
    main()
