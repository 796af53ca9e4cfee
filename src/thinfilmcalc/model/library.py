"""
Material Library Management
===========================
The ordered in-memory library and its backing file.

Why is this file needed?
------------------------
1. Ownership: One ``MaterialLibrary`` instance holds the sequence for the
   lifetime of a session and is passed to the workflow explicitly.
2. Synchronization: Every mutating method updates memory first and then the
   file, so listing and the file never disagree.
3. Positions: Entries are addressed by position only. The console shows
   1-based positions, the sequence uses 0-based indices.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

from thinfilmcalc.exceptions import InvalidIndexError
from thinfilmcalc.model.io import IOManager
from thinfilmcalc.model.materials import Material, check_name

logger = logging.getLogger(__name__)


class MaterialLibrary:
    """
    Manages the thin film library: loading, listing, adding and deleting
    materials, and writing the result back to ``filepath``.
    """
    def __init__(self, filepath: str, materials: Optional[Sequence[Material]] = None) -> None:
        self.filepath = filepath
        self.materials: List[Material] = list(materials) if materials else []

    @classmethod
    def load(cls, filepath: str) -> MaterialLibrary:
        """Reads the library file. Raises FileOpenError if it cannot be opened."""
        return cls(filepath, IOManager.load_library(filepath))

    def save(self) -> None:
        """Rewrites the whole file from the in-memory sequence."""
        IOManager.save_library(self.materials, self.filepath)

    # ---- QUERIES ----
    def __len__(self) -> int:
        return len(self.materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    def names(self) -> List[str]:
        return [m.name for m in self.materials]

    def index_of(self, position: int) -> int:
        """Converts a displayed 1-based position to a checked 0-based index."""
        index = position - 1
        self._check_index(index)
        return index

    def get(self, position: int) -> Material:
        """Copy of the material at a 1-based position. The stored entry is untouched."""
        return self.materials[self.index_of(position)].copy()

    # ---- MUTATIONS ----
    def add(self, material: Material) -> None:
        """
        Appends a name/index entry in memory and to the end of the file.
        A blank name raises BlankNameError before memory or file change.
        """
        entry = Material(check_name(material.name), material.refractive_index)
        self.materials.append(entry)
        IOManager.append_material(entry, self.filepath)
        logger.info(f"Added '{entry.name}' (n = {entry.refractive_index}) at position {len(self.materials)}.")

    def add_and_save(self, material: Material) -> None:
        """Appends a name/index entry in memory, then rewrites the whole file."""
        entry = Material(check_name(material.name), material.refractive_index)
        self.materials.append(entry)
        self.save()
        logger.info(f"Added '{entry.name}' (n = {entry.refractive_index}) and saved the library.")

    def delete_at(self, index: int) -> Material:
        """
        Removes the entry at a 0-based index and rewrites the file.
        Later entries move one position up. Returns the removed material.
        """
        self._check_index(index)
        removed = self.materials.pop(index)
        self.save()
        logger.info(f"Deleted '{removed.name}' from position {index + 1}.")
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.materials):
            raise InvalidIndexError(index + 1, len(self.materials))
