"""Pfad-Auflösung – findet den osu!(lazer)-Datenordner.

lazer legt eine storage.ini im Standard-Datenordner an, sobald der Benutzer
den Speicherort verschiebt. Die erste Zeile enthält den neuen Pfad
(``FullPath = D:\\osu``).
"""

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

APP_FOLDER = "osu"
STORAGE_INI = "storage.ini"


def default_data_dir() -> Path | None:
    """Standard-Datenordner von osu!(lazer) auf dieser Plattform."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            return None
        return Path(appdata) / APP_FOLDER
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_FOLDER
    xdg = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(xdg) / APP_FOLDER


def storage_ini_path() -> Path | None:
    """Pfad zur storage.ini oder None wenn der Datenordner unbekannt ist."""
    data_dir = default_data_dir()
    if data_dir is None:
        return None
    return data_dir / STORAGE_INI


def read_storage_ini(path: Path) -> str:
    """Liest den Zielpfad aus der ersten Zeile der storage.ini.

    Raises:
        OSError: Wenn die Datei nicht gelesen werden kann.
        ValueError: Wenn die Datei leer ist oder die erste Zeile kein '=' enthält.
    """
    with open(path, encoding="utf-8-sig") as f:
        first_line = f.readline()

    if not first_line.strip():
        raise ValueError(f"storage.ini ist leer: {path}")
    if "=" not in first_line:
        raise ValueError(f"storage.ini enthält keinen Pfad: {path}")

    return first_line.split("=", 1)[1].strip()


def get_lazer_location(ini_path: Path | None = None) -> str | None:
    """Ermittelt den konfigurierten Datenordner aus der storage.ini.

    Gibt None zurück (und loggt eine Warnung), wenn keine storage.ini gefunden
    oder gelesen werden kann.
    """
    if ini_path is None:
        ini_path = storage_ini_path()
    if ini_path is None:
        logger.warning("APPDATA-Pfad kann nicht ermittelt werden.")
        return None

    try:
        location = read_storage_ini(ini_path)
    except (OSError, ValueError) as e:
        logger.warning(f"storage.ini konnte nicht gelesen werden: {e}")
        return None

    if not location:
        logger.warning(f"storage.ini enthält einen leeren Pfad: {ini_path}")
        return None
    return location


def resolve_scan_root(path: str | None = None) -> str | None:
    """Wählt den zu scannenden Ordner: Argument, storage.ini, Standard-Datenordner."""
    if path:
        return path
    location = get_lazer_location()
    if location:
        return location
    data_dir = default_data_dir()
    return str(data_dir) if data_dir is not None else None
