"""
Application Initialization
==========================
This module parses the command line, sets up logging, loads the library and
starts the menu loop (or the batch run).

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Builds the runtime configuration (AppConfig) from the arguments.
2. Loads the single MaterialLibrary instance of the session.
3. Passes the library and the Console into the WorkflowController.
4. Turns fatal file errors into the process exit status.
"""
import argparse
import logging
import sys
from typing import List, Optional

from thinfilmcalc import __version__
from thinfilmcalc.app.console import Console
from thinfilmcalc.app.controller import WorkflowController, process_batch
from thinfilmcalc.config import (
    AppConfig, DEFAULT_LIBRARY_PATH, DEFAULT_RESULTS_PATH, DEFAULT_LOG_LEVEL, EXIT_OK, EXIT_INTERRUPTED
)
from thinfilmcalc.exceptions import FileOpenError
from thinfilmcalc.logging_config import setup_logging
from thinfilmcalc.model.io import IOManager
from thinfilmcalc.model.library import MaterialLibrary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thinfilmcalc",
        description=(
            "Estimate the thickness of a thin film on silicon from the number of "
            "interference maxima in a spectral range."
        ),
    )
    parser.add_argument("--library", default=DEFAULT_LIBRARY_PATH,
                        help=f"thin film library file (default: {DEFAULT_LIBRARY_PATH})")
    parser.add_argument("--results", default=DEFAULT_RESULTS_PATH,
                        help=f"measurement results log (default: {DEFAULT_RESULTS_PATH})")
    parser.add_argument("--batch", metavar="FILE",
                        help="compute every (name, index, range, maxima) record in FILE and exit")
    parser.add_argument("--save-results", action="store_true",
                        help="with --batch, append every defined result to the results log")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        help=f"console logging level (default: {DEFAULT_LOG_LEVEL})")
    parser.add_argument("--log-file", help="append log records to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(config: AppConfig, console: Optional[Console] = None) -> int:
    """Runs one session and returns the exit status. FileOpenError propagates."""
    console = console or Console()

    if config.batch_path:
        measurements = IOManager.load_measurements(config.batch_path)
        results_path = config.results_path if config.save_results else None
        defined = process_batch(measurements, console, results_path)
        logger.info(f"Batch finished: {defined} of {len(measurements)} thicknesses defined.")
        return EXIT_OK

    # 1. Load the thin films on start up
    library = MaterialLibrary.load(config.library_path)

    # 2. Hand the library to the controller and run the menu
    controller = WorkflowController(library, config.results_path, console)
    controller.run()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = AppConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=config.log_level, log_file=config.log_file)

    try:
        status = run(config)
    except FileOpenError as e:
        logger.error(f"Fatal file error ({e.path}): {e}")
        print(e, file=sys.stdout)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print(file=sys.stdout)
        logger.info("Interrupted by the user.")
        sys.exit(EXIT_INTERRUPTED)

    sys.exit(status)


if __name__ == "__main__":
    main()
