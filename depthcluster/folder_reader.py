"""Listing of files in a folder, optionally sorted by the number in their names."""

from __future__ import annotations

import logging
import os
import re
from enum import Enum
from typing import Iterator, Optional

_LOG = logging.getLogger(__name__)
_NUMBER = re.compile(r"\d+")


def num_from_string(query_str: str) -> int:
    """Return the last run of digits in ``query_str`` as an integer, or 0 if none."""
    numbers = _NUMBER.findall(query_str)
    return int(numbers[-1]) if numbers else 0


def numeric_string_compare(s1: str, s2: str) -> bool:
    """Whether ``s1`` orders before ``s2`` by the last number each contains."""
    return num_from_string(s1) < num_from_string(s2)


class Order(Enum):
    """How the collected paths are ordered."""

    SORTED = "sorted"
    UNDEFINED = "undefined"


class FolderReader:
    """Collects the paths of the files in a folder that match a prefix and suffix.

    With ``Order.SORTED`` the paths are ordered by the last number in each
    path; otherwise they keep the order in which the folder lists them.
    """

    def __init__(
        self,
        folder_path: str,
        ending_with: str = "",
        starting_with: str = "",
        order: Order = Order.UNDEFINED,
    ) -> None:
        self._all_paths: list[str] = []
        self._path_counter = 0
        if not os.path.exists(folder_path):
            raise FileNotFoundError(f"no such folder: {folder_path}")
        if not os.path.isdir(folder_path):
            return
        _LOG.info("Getting file paths from folder: %s", folder_path)
        with os.scandir(folder_path) as entries:
            self._all_paths = [
                os.path.join(folder_path, entry.name)
                for entry in entries
                if entry.name.startswith(starting_with) and entry.name.endswith(ending_with)
            ]
        if order is Order.SORTED:
            self._all_paths.sort(key=num_from_string)
        _LOG.info(
            "There are %d '%s' files in the folder.", len(self._all_paths), ending_with
        )

    def next_file_path(self) -> Optional[str]:
        """Return the next stored path, or ``None`` once all have been handed out."""
        if self._path_counter < len(self._all_paths):
            path = self._all_paths[self._path_counter]
            self._path_counter += 1
            return path
        _LOG.info("There are no more paths stored.")
        return None

    @property
    def all_file_paths(self) -> list[str]:
        """All collected paths, regardless of how many were handed out."""
        return list(self._all_paths)

    def __iter__(self) -> Iterator[str]:
        """Yield the paths not yet handed out, advancing the reader."""
        while self._path_counter < len(self._all_paths):
            path = self._all_paths[self._path_counter]
            self._path_counter += 1
            yield path