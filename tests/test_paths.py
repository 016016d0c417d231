"""Tests for osu!(lazer) data folder discovery."""

import sys
from pathlib import Path

import pytest

from hardlink_scanner import paths
from hardlink_scanner.paths import (
    default_data_dir,
    get_lazer_location,
    read_storage_ini,
    resolve_scan_root,
    storage_ini_path,
)


def test_read_storage_ini(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_text("FullPath = D:\\osu  \nSomethingElse = 1\n", encoding="utf-8")
    assert read_storage_ini(ini) == "D:\\osu"


def test_read_storage_ini_keeps_later_equals_signs(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_text("FullPath = /data/a=b\n", encoding="utf-8")
    assert read_storage_ini(ini) == "/data/a=b"


def test_read_storage_ini_strips_bom(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_bytes("\ufeffFullPath = /games/osu\n".encode("utf-8"))
    assert read_storage_ini(ini) == "/games/osu"


def test_read_storage_ini_empty(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        read_storage_ini(ini)


def test_read_storage_ini_without_separator(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_text("just a line\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_storage_ini(ini)


def test_read_storage_ini_missing(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_storage_ini(tmp_path / "storage.ini")


def test_get_lazer_location(tmp_path: Path) -> None:
    ini = tmp_path / "storage.ini"
    ini.write_text("FullPath = /games/osu\n", encoding="utf-8")
    assert get_lazer_location(ini) == "/games/osu"


def test_get_lazer_location_failures_return_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    assert get_lazer_location(tmp_path / "missing.ini") is None
    assert "storage.ini" in caplog.text

    empty_value = tmp_path / "empty.ini"
    empty_value.write_text("FullPath =   \n", encoding="utf-8")
    assert get_lazer_location(empty_value) is None


def test_get_lazer_location_without_appdata(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths, "storage_ini_path", lambda: None)
    assert get_lazer_location() is None


def test_windows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert default_data_dir() == tmp_path / "osu"
    assert storage_ini_path() == tmp_path / "osu" / "storage.ini"

    monkeypatch.delenv("APPDATA")
    assert default_data_dir() is None
    assert storage_ini_path() is None


def test_linux_data_dir_respects_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_data_dir() == tmp_path / "osu"

    monkeypatch.delenv("XDG_DATA_HOME")
    assert default_data_dir() == Path.home() / ".local" / "share" / "osu"


def test_macos_data_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "darwin")
    assert default_data_dir() == Path.home() / "Library" / "Application Support" / "osu"


def test_resolve_scan_root_order(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert resolve_scan_root("/explicit") == "/explicit"

    monkeypatch.setattr(paths, "get_lazer_location", lambda: "/from/ini")
    assert resolve_scan_root(None) == "/from/ini"

    monkeypatch.setattr(paths, "get_lazer_location", lambda: None)
    monkeypatch.setattr(paths, "default_data_dir", lambda: tmp_path / "osu")
    assert resolve_scan_root(None) == str(tmp_path / "osu")

    monkeypatch.setattr(paths, "default_data_dir", lambda: None)
    assert resolve_scan_root(None) is None
