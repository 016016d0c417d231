"""JSON-Report generieren und speichern."""

import json
from datetime import datetime
from pathlib import Path

from . import __version__
from .analyzer import AggregateResult
from .utils import format_size


def generate_report(scanned_path: str, result: AggregateResult) -> dict:
    """Erstellt einen strukturierten Scan-Report.

    Args:
        scanned_path: Der gescannte Pfad.
        result: Summen aus calculate_folder_size().

    Returns:
        Strukturierter Report als Dict.
    """
    return {
        "scan_info": {
            "scanned_path": scanned_path,
            "scan_date": datetime.now().isoformat(),
            "version": __version__,
        },
        "totals": {
            "with_links_bytes": result.total_with_links,
            "with_links_human": format_size(result.total_with_links),
            "without_duplicate_links_bytes": result.total_without_duplicate_links,
            "without_duplicate_links_human": format_size(result.total_without_duplicate_links),
            "hardlinked_bytes": result.hardlinked_bytes,
        },
    }


def save_report(report: dict, output_path: Path) -> None:
    """Schreibt den Report als JSON-Datei."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
