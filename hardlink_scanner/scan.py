"""Hardlink Scanner – CLI-Einstiegspunkt.

Berechnet die Größe eines Ordners einmal mit allen Hardlinks und einmal ohne
Dateien, die über mehrere Hardlinks geteilt werden. Ohne Pfadangabe wird der
osu!(lazer)-Datenordner aus der storage.ini verwendet.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .analyzer import AggregateResult, calculate_folder_size
from .paths import resolve_scan_root
from .report import generate_report, save_report
from .utils import format_size
from .walker import RootNotADirectoryError, RootNotFoundError

log = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hardlink-scanner",
        description="Berechnet die Ordnergröße mit und ohne Hardlinks.",
    )
    parser.add_argument(
        "path", nargs="?",
        help="Zu scannender Ordner (default: Pfad aus der osu! storage.ini)",
    )
    parser.add_argument("-j", "--workers", type=int, default=None, help="Anzahl Worker-Threads")
    parser.add_argument("--chunk-size", type=int, default=None, help="Dateien pro Arbeitspaket")
    parser.add_argument("-o", "--output", help="Pfad für einen JSON-Report")
    parser.add_argument("--no-progress", action="store_true", help="Keinen Fortschrittsbalken anzeigen")
    parser.add_argument("--pause", action="store_true", help="Vor dem Beenden auf Enter warten")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug-Ausgaben aktivieren")
    parser.add_argument("--log-file", help="Log in eine Datei statt nach stderr schreiben")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_scan(
    folder: str,
    output_path: str | None = None,
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: bool = False,
) -> AggregateResult:
    """Programmatischer Einstiegspunkt für Scans (ohne argparse/sys.exit).

    Args:
        folder: Zu scannender Ordner.
        output_path: Optionaler Pfad für den JSON-Report.

    Raises:
        RootNotFoundError: Wenn der Pfad nicht existiert.
        RootNotADirectoryError: Wenn der Pfad kein Verzeichnis ist.
    """
    result = calculate_folder_size(folder, workers=workers, chunk_size=chunk_size, progress=progress)
    if output_path:
        out = Path(output_path).resolve()
        save_report(generate_report(folder, result), out)
        log.info(f"Report gespeichert: {out}")
    return result


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        return _run(args)
    except KeyboardInterrupt:
        print("\nAbgebrochen.", file=sys.stderr)
        return 130
    finally:
        if args.pause:
            _wait_for_enter()


def _wait_for_enter() -> None:
    try:
        input("Enter drücken zum Beenden...")
    except EOFError:
        pass


def _run(args: argparse.Namespace) -> int:
    folder = resolve_scan_root(args.path)
    if not folder:
        print("Fehler: Kein Ordner angegeben und keine storage.ini gefunden.", file=sys.stderr)
        return 1

    print(f"Scanne: {folder}")
    print("Berechne Dateigrößen...")

    try:
        result = run_scan(
            folder,
            output_path=args.output,
            workers=args.workers,
            chunk_size=args.chunk_size,
            progress=not args.no_progress,
        )
    except RootNotFoundError:
        print(f"Fehler: Pfad existiert nicht: {folder}", file=sys.stderr)
        return 1
    except RootNotADirectoryError:
        print(f"Fehler: Pfad ist kein Verzeichnis: {folder}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Fehler: {e}", file=sys.stderr)
        return 2

    print(f"Gesamtgröße (mit Hardlinks):         {format_size(result.total_with_links)}")
    print(f"Tatsächliche Größe (ohne Hardlinks): {format_size(result.total_without_duplicate_links)}")
    if args.output:
        print(f"Report gespeichert: {Path(args.output).resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
