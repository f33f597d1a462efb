"""Allow running the CLI with ``python -m delivery_routing``."""
from delivery_routing.cli.main import main

if __name__ == "__main__":
    main()
