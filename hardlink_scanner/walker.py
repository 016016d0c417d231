"""Verzeichnisbaum durchlaufen – liefert alle regulären Dateien unterhalb eines Ordners.

Iterativ mit einem expliziten Stack statt Rekursion, damit auch sehr tiefe
Bäume kein RecursionError auslösen. Symlinks und Junctions auf Ordner werden
nie betreten, Symlinks auf Dateien zählen mit der Größe ihres Ziels.
"""

import errno
import logging
import os
import stat
import sys
from typing import Iterator

logger = logging.getLogger(__name__)


class RootNotFoundError(FileNotFoundError):
    """Der Startordner existiert nicht."""


class RootNotADirectoryError(NotADirectoryError):
    """Der Startpfad existiert, ist aber kein Verzeichnis."""


def check_root(root) -> str:
    """Prüft den Startpfad und gibt ihn als String zurück.

    Raises:
        RootNotFoundError: Wenn der Pfad nicht existiert.
        RootNotADirectoryError: Wenn der Pfad kein Verzeichnis ist.
    """
    path = os.fspath(root)
    if not os.path.exists(path):
        raise RootNotFoundError(errno.ENOENT, "Pfad existiert nicht", path)
    if not os.path.isdir(path):
        raise RootNotADirectoryError(errno.ENOTDIR, "Pfad ist kein Verzeichnis", path)
    return path


def walk_files(root) -> Iterator[str]:
    """Liefert die Pfade aller regulären Dateien unterhalb von ``root``.

    Der Startpfad wird sofort beim Aufruf geprüft, nicht erst beim ersten
    ``next()``. Nicht lesbare Ordner werden samt Unterbaum übersprungen.
    Die Reihenfolge ist nicht festgelegt.

    Raises:
        RootNotFoundError: Wenn der Pfad nicht existiert.
        RootNotADirectoryError: Wenn der Pfad kein Verzeichnis ist.
    """
    return _walk(check_root(root))


def _walk(root: str) -> Iterator[str]:
    pending = [root]
    while pending:
        folder = pending.pop()
        try:
            with os.scandir(folder) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            if not _is_junction(entry):
                                pending.append(entry.path)
                        elif entry.is_file():
                            yield entry.path
                    except OSError as e:
                        logger.debug(f"Eintrag übersprungen: {entry.path} ({e})")
        except OSError as e:
            # Ordner nicht lesbar oder während des Scans gelöscht
            logger.debug(f"Ordner übersprungen: {folder} ({e})")


def _is_junction(entry: os.DirEntry) -> bool:
    # Vor Python 3.12 meldet is_dir(follow_symlinks=False) NTFS-Junctions als Ordner
    if hasattr(entry, "is_junction"):
        return entry.is_junction()
    if sys.platform != "win32":
        return False
    attrs = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    return bool(attrs & stat.FILE_ATTRIBUTE_REPARSE_POINT)
