"""Command-line interface."""
from thinfilmcalc.main import main

if __name__ == "__main__":
    main()
