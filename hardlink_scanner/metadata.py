"""Datei-Metadaten – Größe und Hardlink-Anzahl aus einem einzigen stat().

Symlinks auf Dateien werden aufgelöst: Größe und Link-Anzahl stammen vom Ziel.
"""

import logging
import os
import stat
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileMetadata:
    size: int        # Dateigröße in Bytes
    link_count: int  # Anzahl der Hardlinks auf dieselben Daten

    @property
    def is_shared(self) -> bool:
        """True wenn die Daten über mehr als einen Hardlink erreichbar sind."""
        return self.link_count > 1


def read_metadata(path: str) -> FileMetadata | None:
    """Liest Größe und Link-Anzahl einer Datei.

    Gibt None zurück, wenn die Datei verschwunden, nicht lesbar oder keine
    reguläre Datei mehr ist. Liefert die Plattform keine Link-Anzahl
    (st_nlink == 0), gilt die Datei als nicht geteilt.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug(f"Keine Metadaten: {path} ({e})")
        return None

    if not stat.S_ISREG(st.st_mode):
        logger.debug(f"Keine reguläre Datei mehr: {path}")
        return None

    return FileMetadata(size=st.st_size, link_count=st.st_nlink or 1)
