"""
Input/Output Manager (flat text files)
Handles reading and writing the thin film library and the results log.

Library file: two lines per material (name, refractive index), no header.
Results log: one fixed-width line per accepted measurement, append only.
"""
import logging
import os
from typing import List, Sequence

from thinfilmcalc.config import MATERIAL_WIDTH, INDEX_WIDTH, MAXIMA_WIDTH, EXIT_LOAD_FAILURE, EXIT_SAVE_FAILURE
from thinfilmcalc.exceptions import FileOpenError, MalformedInputError
from thinfilmcalc.model.materials import Material

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:
    """File access for the library store. Every handle lives for one call."""

    @staticmethod
    def load_library(filepath: str) -> List[Material]:
        """
        Reads two-line (name, index) records until the end of the file.

        An incomplete trailing record is dropped. A non-numeric index stops
        the read; the materials read before it are kept.
        """
        logger.info(f"Loading thin film library from: {filepath}")
        materials = IOManager._read_records(filepath, with_measurement=False)
        logger.info(f"Loaded {len(materials)} materials from: {filepath}")
        return materials

    @staticmethod
    def load_measurements(filepath: str) -> List[Material]:
        """Reads four-line (name, index, spectral range, maxima) records."""
        logger.info(f"Loading measurements from: {filepath}")
        measurements = IOManager._read_records(filepath, with_measurement=True)
        logger.info(f"Loaded {len(measurements)} measurements from: {filepath}")
        return measurements

    @staticmethod
    def save_library(materials: Sequence[Material], filepath: str) -> None:
        """
        Overwrites the file with every material, in sequence order.

        Records are rendered before the file is opened, so a material that
        cannot be written (BlankNameError) leaves the old file untouched.
        """
        logger.info(f"Saving {len(materials)} materials to: {filepath}")
        lines = [line for material in materials for line in material.to_lines()]
        try:
            with open(filepath, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(line + "\n" for line in lines)
        except OSError as e:
            logger.exception(f"Failed to save library: {e}")
            raise FileOpenError(
                "Output file failed to open.", path=filepath, exit_code=EXIT_SAVE_FAILURE
            ) from e

    @staticmethod
    def append_material(material: Material, filepath: str) -> None:
        """
        Appends one two-line record to the library file.

        A last line without a line ending (accepted by ``load_library``) is
        terminated first, so the new name starts on a line of its own.
        """
        lines = material.to_lines()
        logger.info(f"Appending material '{material.name}' to: {filepath}")
        try:
            prefix = "" if IOManager._ends_with_newline(filepath) else "\n"
            with open(filepath, "a", encoding="utf-8", newline="\n") as f:
                f.write(prefix + "".join(line + "\n" for line in lines))
        except OSError as e:
            logger.exception(f"Failed to append material: {e}")
            raise FileOpenError(
                "Output file failed to open.", path=filepath, exit_code=EXIT_SAVE_FAILURE
            ) from e

    @staticmethod
    def append_measurement(material: Material, filepath: str) -> None:
        """Appends one result line (name, index, thickness) to the results log."""
        line = IOManager.format_measurement(material)
        logger.info(f"Saving measurement of '{material.name}' to: {filepath}")
        try:
            with open(filepath, "a", encoding="utf-8", newline="\n") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.exception(f"Failed to save measurement: {e}")
            raise FileOpenError(
                "Output file failed to open.", path=filepath, exit_code=EXIT_SAVE_FAILURE
            ) from e

    @staticmethod
    def format_measurement(material: Material) -> str:
        """Name left in 30 columns, index with 2 decimals, thickness with 1 decimal."""
        return (
            f"{material.name:<{MATERIAL_WIDTH}}"
            f"{material.refractive_index:>{INDEX_WIDTH}.2f}"
            f"{material.thickness():>{MAXIMA_WIDTH}.1f}"
        )

    # --- READ HELPERS ---

    @staticmethod
    def _read_records(filepath: str, with_measurement: bool) -> List[Material]:
        records: List[Material] = []
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                lines = iter(f)
                while True:
                    try:
                        record = Material.read(lines, with_measurement=with_measurement)
                    except MalformedInputError as e:
                        logger.warning(
                            f"Stopped reading '{filepath}' after {len(records)} records: {e}"
                        )
                        break
                    if record is None:
                        break
                    records.append(record)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"File {filepath} failed to open: {e}")
            raise FileOpenError(
                f"File {filepath} failed to open.", path=filepath, exit_code=EXIT_LOAD_FAILURE
            ) from e
        return records

    @staticmethod
    def _ends_with_newline(filepath: str) -> bool:
        """True for a missing or empty file, or one whose last byte is a line feed."""
        try:
            with open(filepath, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return True
                f.seek(-1, os.SEEK_END)
                return f.read(1) == b"\n"
        except FileNotFoundError:
            return True
