# trollpad/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from trollpad.domain.interfaces import IConfigService

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first readable file wins):
      1. Explicit path provided at construction
      2. User config dir (~/.config/TrollTextEditor/config.ini, %APPDATA%\TrollTextEditor\config.ini, ...)
      3. Project default at <repo>/config/config.ini

    Recognised keys:
      [app]      version
      [logging]  level, file
    """

    DEFAULT_APP_DIR = "TrollTextEditor"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        for path in self.candidates(explicit_path, project_root):
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, configparser.Error, UnicodeDecodeError) as e:
                # A broken file is skipped; the app still runs on defaults.
                logger.warning("Ignoring unreadable config %s: %s", path, e)
                continue
            self._parser = parser
            self._loaded_from = path
            break

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    @classmethod
    def candidates(cls, explicit_path: Path | None, project_root: Path | None) -> list[Path]:
        paths: list[Path] = []
        if explicit_path:
            paths.append(explicit_path)
        paths.append(Path(user_config_dir(cls.DEFAULT_APP_DIR)) / cls.DEFAULT_FILE)
        if project_root:
            paths.append(project_root / "config" / cls.DEFAULT_FILE)
        return paths

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        s = val.strip().lower()
        if s in _TRUTHY:
            return True
        if s in _FALSY:
            return False
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {sect: dict(self._parser[sect]) for sect in self._parser.sections()}

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Logging section -----

    def log_level(self) -> str:
        return (self.get("logging", "level", "INFO") or "INFO").strip().upper()

    def log_file(self) -> Path | None:
        raw = (self.get("logging", "file", "") or "").strip()
        return Path(raw).expanduser() if raw else None

    @property
    def loaded_from(self) -> Path | None:
        """For diagnostics/About dialog."""
        return self._loaded_from
