"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded file names ("films.txt", "data.txt") and
   magic numbers (exit codes, column widths) scattered throughout the code.
2. Runtime options: ``AppConfig`` collects the command-line overrides in one
   object that is handed to the bootstrap.

Exports:
    DEFAULT_LIBRARY_PATH (str): File name of the thin film library.
    DEFAULT_RESULTS_PATH (str): File name of the measurement results log.
    AppConfig: Resolved runtime options.
"""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional


# Global Constants
DEFAULT_LIBRARY_PATH: str = "films.txt"
DEFAULT_RESULTS_PATH: str = "data.txt"
DEFAULT_LOG_LEVEL: str = "WARNING"

# Exit statuses
EXIT_OK: int = 0
EXIT_LOAD_FAILURE: int = 1
EXIT_SAVE_FAILURE: int = 255
EXIT_INTERRUPTED: int = 130

# Column widths shared by the console and the results log
MATERIAL_WIDTH: int = 30
INDEX_WIDTH: int = 10
MAXIMA_WIDTH: int = 15
THICKNESS_WIDTH: int = 20


@dataclass
class AppConfig:
    """
    Runtime options of one session.
    Built from the parsed command line. Relative paths resolve against the
    current working directory.
    """
    library_path: str = DEFAULT_LIBRARY_PATH
    results_path: str = DEFAULT_RESULTS_PATH
    batch_path: Optional[str] = None
    save_results: bool = False
    log_level: int = logging.WARNING
    log_file: Optional[str] = None

    @staticmethod
    def from_args(args: argparse.Namespace) -> AppConfig:
        level = logging.getLevelName(str(args.log_level).upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {args.log_level}")

        return AppConfig(
            library_path=os.path.expanduser(args.library),
            results_path=os.path.expanduser(args.results),
            batch_path=os.path.expanduser(args.batch) if args.batch else None,
            save_results=bool(args.save_results),
            log_level=level,
            log_file=args.log_file,
        )
