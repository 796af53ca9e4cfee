"""
Thin Film Materials
===================
Defines the record used for library entries and for measurements.

A library entry only needs a name and a refractive index. When the same
record is used for a measurement it also carries the spectral range and the
number of fringes, and the thickness is derived from the current values.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, TextIO
import logging
import math

import numpy as np

from thinfilmcalc.config import MATERIAL_WIDTH, INDEX_WIDTH, MAXIMA_WIDTH, THICKNESS_WIDTH
from thinfilmcalc.exceptions import BlankNameError, MalformedInputError
from thinfilmcalc.model.thickness import compute_thickness, thickness_is_defined

logger = logging.getLogger(__name__)

# Numeric fields that never hold a negative value
_CLAMPED_FIELDS = frozenset({"refractive_index", "spectral_range", "fringe_count"})

UNDEFINED_THICKNESS_LABEL = "undefined"


def clamp_non_negative(value: float) -> float:
    """Negative values (and -0.0) become 0.0, NaN passes through."""
    value = float(value)
    return 0.0 if value <= 0 else value


def parse_number(text: str) -> float:
    """Parse a finite decimal number, raising MalformedInputError otherwise."""
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise MalformedInputError(stripped) from None
    if not math.isfinite(value):
        raise MalformedInputError(stripped)
    return value


def format_index(value: float) -> str:
    """Shortest decimal text that reads back as the same float (2.0 -> '2')."""
    return np.format_float_positional(value, trim='-')


def _next_content_line(lines: Iterator[str]) -> Optional[str]:
    """Skip blank lines, return the next one without its line ending."""
    for line in lines:
        if line.strip():
            return line.rstrip("\r\n")
    return None


def _read_numbers(lines: Iterator[str], count: int) -> Optional[List[float]]:
    """Whitespace separated numbers, possibly spread over several lines."""
    values: List[float] = []
    while len(values) < count:
        line = _next_content_line(lines)
        if line is None:
            return None
        tokens = line.split()
        needed = count - len(values)
        values.extend(parse_number(token) for token in tokens[:needed])
        if len(tokens) > needed:
            logger.warning(f"Ignoring trailing text on line '{line.strip()}'.")
    return values


def check_name(name: str) -> str:
    """Library records need a non-blank name, otherwise the name line cannot be read back."""
    if not name.strip():
        raise BlankNameError()
    return name


@dataclass
class Material:
    """
    A thin film material.

    Assigning a negative number to any numeric field stores 0.0 instead.
    There is no upper bound.

    Examples
    --------
    >>> film = Material("Glass", 1.5)
    >>> film.spectral_range = 300.0
    >>> film.fringe_count = 4
    >>> round(film.thickness(), 2)
    670.82
    """
    name: str = ""
    refractive_index: float = 0.0
    spectral_range: float = 0.0
    fringe_count: float = 0.0

    def __setattr__(self, key: str, value) -> None:
        if key in _CLAMPED_FIELDS:
            value = clamp_non_negative(value)
        super().__setattr__(key, value)

    def thickness(self) -> float:
        """Film thickness in nm, NaN when the refractive index is below 1."""
        return compute_thickness(self.refractive_index, self.spectral_range, self.fringe_count)

    def thickness_is_defined(self) -> bool:
        return thickness_is_defined(self.refractive_index)

    def copy(self) -> Material:
        return replace(self)

    # ---- RENDERING ----
    def library_row(self) -> str:
        return f"{self.name:<{MATERIAL_WIDTH}}{self.refractive_index:>{INDEX_WIDTH}.2f}"

    def measurement_row(self) -> str:
        thickness = self.thickness()
        if math.isnan(thickness):
            thickness_text = f"{UNDEFINED_THICKNESS_LABEL:>{THICKNESS_WIDTH}}"
        else:
            thickness_text = f"{thickness:>{THICKNESS_WIDTH}.1f}"
        return (
            f"{self.name:<{MATERIAL_WIDTH}}"
            f"{self.refractive_index:>{INDEX_WIDTH}.2f}"
            f"{self.fringe_count:>{MAXIMA_WIDTH}.2f}"
            f"{thickness_text}"
        )

    # ---- SERIALIZATION ----
    def to_lines(self) -> List[str]:
        """Persisted library form: name line, then index line. Raises BlankNameError for a blank name."""
        return [check_name(self.name), format_index(self.refractive_index)]

    def write(self, stream: TextIO) -> None:
        for line in self.to_lines():
            stream.write(line + "\n")

    @classmethod
    def read(cls, lines: Iterator[str], with_measurement: bool = False) -> Optional[Material]:
        """
        Reads the next record from a line iterator.

        Two-line records hold name and index. With ``with_measurement`` the
        index is followed by the spectral range and the fringe count.
        Leading blank lines are skipped and the name keeps inner spaces.

        Returns None when the input ends before a complete record. Raises
        MalformedInputError when a numeric field is not a number.
        """
        line = _next_content_line(lines)
        if line is None:
            return None
        name = line.lstrip()

        numbers = _read_numbers(lines, 3 if with_measurement else 1)
        if numbers is None:
            logger.debug(f"Dropping incomplete record '{name}' at end of input.")
            return None

        return cls(name, *numbers)
