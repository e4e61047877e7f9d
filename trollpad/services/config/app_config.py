from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from trollpad.domain.interfaces import IAppConfig
from trollpad.services.config.ini_config_service import IniConfigService

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def project_root() -> Path:
    """Bundle root under PyInstaller, otherwise the checkout holding the trollpad package."""
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return Path(meipass)
    # trollpad/services/config/app_config.py -> parents[3]
    return Path(__file__).resolve().parents[3]


def normalize_version(raw: str) -> str | None:
    m = _VERSION_RE.match(raw.strip())
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    IniConfigService plus version lookup.

    Version precedence:
      1) <project_root>/version file (e.g. v1.0.0)
      2) [app] version from the INI file
      3) "0.0.0"
    """

    ini: IniConfigService
    root: Path

    def get_version(self) -> str:
        try:
            v = normalize_version((self.root / "version").read_text(encoding="utf-8"))
        except OSError:
            v = None
        if v:
            return v

        raw = (self.ini.app_version() or "").strip()
        if raw:
            return normalize_version(raw) or raw
        return "0.0.0"

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    def log_level(self) -> str:
        return self.ini.log_level()

    def log_file(self) -> Path | None:
        return self.ini.log_file()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(*, explicit_ini: Path | None = None, root: Path | None = None) -> AppConfig:
    root = root or project_root()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root), root=root)
