"""Command-line entry point."""
from electrontemperature.main import main

if __name__ == "__main__":
    main()
