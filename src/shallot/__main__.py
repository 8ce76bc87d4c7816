"""Allow ``python -m shallot``."""

from shallot.cli import main

if __name__ == "__main__":
    main()
