"""Path resolution and file discovery helpers."""

from __future__ import annotations

import logging
import os
import stat

logger = logging.getLogger(__name__)


def get_abs_path(path: str) -> str:
    """Return the absolute form of ``path``, expanding a leading ``~`` to $HOME."""
    if path.startswith("~"):
        home_dir = os.environ.get("HOME", "")
        if len(path) == 1:
            return home_dir
        path = os.path.join(home_dir, path[1:].lstrip(os.sep))
    return os.path.abspath(path)


def _walk_directories(path: str, mode: int, found: list[str]) -> None:
    if not stat.S_ISDIR(mode):
        return
    found.append(path)
    for name in sorted(os.listdir(path)):
        child = os.path.normpath(os.path.join(path, name))
        _walk_directories(child, os.lstat(child).st_mode, found)


def find_all_directories(base_path: str) -> list[str]:
    """Walk ``base_path`` in lexical order and return every directory in it.

    The base path is returned as given; nested paths are normalised.
    Symbolic links are not followed. Raises ``OSError`` on any failure.
    """
    found: list[str] = []
    _walk_directories(base_path, os.lstat(base_path).st_mode, found)
    return found


def filter_by_suffix(names: list[str], suffixes: list[str]) -> list[str]:
    """Return the names that end with any of ``suffixes``, once per matching suffix."""
    return [name for name in names for suffix in suffixes if name.endswith(suffix)]


def find_files_by_suffix(base_path: str, suffixes: list[str]) -> dict[str, list[str]]:
    """Map every directory under ``base_path`` to its entries ending in ``suffixes``.

    Directories without matching entries are left out.
    """
    try:
        directories = find_all_directories(base_path)
    except OSError:
        logger.error("error encountered traversing directories, base path: %s", base_path)
        raise

    if not directories:
        raise NotADirectoryError(f"no directories found for path {base_path}")

    found: dict[str, list[str]] = {}
    for directory in sorted(directories):
        try:
            names = sorted(os.listdir(directory))
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.debug("error while searching for files in %s: %s", directory, exc)
            continue
        matches = filter_by_suffix(names, suffixes)
        if matches:
            found[directory] = matches
    return found


def find_files_by_suffix_in_dir(base_path: str, suffixes: list[str]) -> list[str]:
    """Return the entries directly inside ``base_path`` that end with ``suffixes``."""
    return filter_by_suffix(sorted(os.listdir(base_path)), suffixes)


def add_file_extension(file: str, ext: str) -> str:
    """Return ``file`` with ``.ext`` appended."""
    return f"{file}.{ext}"