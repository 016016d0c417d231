"""Ordneranalyse – Gesamtgröße mit und ohne Hardlinks parallel berechnen.

Ablauf: Baum komplett einlesen (walker), Dateiliste in Blöcke teilen, jeden
Block in einem Worker-Thread klassifizieren und aufsummieren, Teilergebnisse
am Ende zusammenführen. Das Zusammenführen ist assoziativ und kommutativ,
daher ist das Ergebnis unabhängig von Blockgröße, Worker-Anzahl und
Reihenfolge.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import reduce
from typing import Iterable, NamedTuple, Sequence

from tqdm import tqdm

from .metadata import FileMetadata, read_metadata
from .walker import walk_files

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 512


class AggregateResult(NamedTuple):
    """Summen eines Scans in Bytes.

    ``total_without_duplicate_links`` zählt nur Dateien mit genau einem Link;
    Dateien mit mehreren Hardlinks fallen komplett heraus.

    Python-ints laufen nicht über. Wer die Summen als u64 ablegt, ist bei
    2**64 - 1 Bytes (16 EiB) begrenzt.
    """

    total_with_links: int = 0
    total_without_duplicate_links: int = 0

    @classmethod
    def from_metadata(cls, meta: FileMetadata) -> "AggregateResult":
        return cls(meta.size, 0 if meta.is_shared else meta.size)

    def combine(self, other: "AggregateResult") -> "AggregateResult":
        return AggregateResult(
            self.total_with_links + other.total_with_links,
            self.total_without_duplicate_links + other.total_without_duplicate_links,
        )

    def __add__(self, other):
        if not isinstance(other, AggregateResult):
            return NotImplemented
        return self.combine(other)

    @property
    def hardlinked_bytes(self) -> int:
        """Bytes, die auf Dateien mit mehreren Hardlinks entfallen."""
        return self.total_with_links - self.total_without_duplicate_links


def fold(items: Iterable[FileMetadata | None]) -> AggregateResult:
    """Summiert Metadaten sequentiell auf. None-Einträge werden ignoriert."""
    return combine_all(AggregateResult.from_metadata(meta) for meta in items if meta is not None)


def combine_all(partials: Iterable[AggregateResult]) -> AggregateResult:
    """Führt Teilergebnisse zusammen (leere Eingabe → (0, 0))."""
    return reduce(AggregateResult.combine, partials, AggregateResult())


def _analyze_chunk(paths: Sequence[str]) -> AggregateResult:
    return fold(read_metadata(path) for path in paths)


def _chunks(paths: Sequence[str], size: int) -> list[Sequence[str]]:
    return [paths[i:i + size] for i in range(0, len(paths), size)]


def aggregate_paths(
    paths: Sequence[str],
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: bool = False,
) -> AggregateResult:
    """Klassifiziert und summiert eine Dateiliste mit einem Thread-Pool.

    Args:
        paths: Bereits eingelesene Dateipfade.
        workers: Anzahl Threads (None = Default des Executors, 1 = sequentiell).
        chunk_size: Dateien pro Arbeitspaket.
        progress: tqdm-Fortschrittsbalken anzeigen.
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers muss >= 1 sein, nicht {workers}")
    size = DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size
    if size < 1:
        raise ValueError(f"chunk_size muss >= 1 sein, nicht {size}")

    chunks = _chunks(paths, size)
    partials = []

    with tqdm(total=len(paths), desc="Analysiere Dateien", unit="Datei", disable=not progress) as bar:
        if workers == 1:
            for chunk in chunks:
                partials.append(_analyze_chunk(chunk))
                bar.update(len(chunk))
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = {pool.submit(_analyze_chunk, chunk): len(chunk) for chunk in chunks}
                for future in as_completed(futures):
                    partials.append(future.result())
                    bar.update(futures[future])

    return combine_all(partials)


def calculate_folder_size(
    folder,
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: bool = False,
) -> AggregateResult:
    """Berechnet die Ordnergröße mit und ohne Hardlinks.

    Der Baum wird zuerst vollständig eingelesen, danach parallel ausgewertet.
    Nicht lesbare Ordner und Dateien tragen zu keiner Summe bei.

    Returns:
        AggregateResult(total_with_links, total_without_duplicate_links)

    Raises:
        RootNotFoundError: Wenn der Ordner nicht existiert.
        RootNotADirectoryError: Wenn der Pfad kein Verzeichnis ist.
    """
    paths = list(walk_files(folder))
    logger.info(f"{len(paths)} Dateien gefunden in: {folder}")
    result = aggregate_paths(paths, workers=workers, chunk_size=chunk_size, progress=progress)
    logger.info(
        f"Scan abgeschlossen: {result.total_with_links} Bytes mit Hardlinks, "
        f"{result.total_without_duplicate_links} Bytes ohne"
    )
    return result
