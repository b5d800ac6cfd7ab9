"""Settings and logging setup for DragStage.

Settings are read from ``settings.json`` in the config directory and can be
overridden with ``DRAGSTAGE_*`` environment variables, e.g.
``DRAGSTAGE_WIDTH=1024`` or ``DRAGSTAGE_LOG_LEVEL=DEBUG``.
"""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "DRAGSTAGE_"


def get_config_dir() -> Path:
    """Get the application config directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "dragstage"


def get_settings_path() -> Path:
    return get_config_dir() / "settings.json"


@dataclass
class StageSettings:
    """Stage and application settings."""
    width: int = 800
    height: int = 600
    background: str = "#454545"
    default_color: str = "#FF0000"
    cancel_on_leave: bool = False
    show_keyboard: bool = False
    keyboard_octaves: int = 6
    log_level: str = "WARNING"

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, data: Optional[str]) -> "StageSettings":
        if not data:
            return cls()
        try:
            d = json.loads(data)
            # Filter to only known fields to handle schema evolution
            known = {f.name for f in fields(cls)}
            return cls(**{k: v for k, v in d.items() if k in known})
        except (json.JSONDecodeError, TypeError, AttributeError):
            return cls()

    def with_env(self, environ: Mapping[str, str]) -> "StageSettings":
        """Return a copy with ``DRAGSTAGE_<FIELD>`` overrides applied."""
        values = asdict(self)
        for f in fields(self):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            try:
                values[f.name] = _coerce(raw, type(values[f.name]))
            except ValueError:
                logger.warning("Ignoring invalid %s%s=%r",
                               ENV_PREFIX, f.name.upper(), raw)
        return StageSettings(**values)


def _coerce(raw: str, kind: type):
    if kind is bool:
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
        raise ValueError(raw)
    return kind(raw)


def load_settings(path: Optional[Path] = None,
                  environ: Optional[Mapping[str, str]] = None) -> StageSettings:
    """Load settings from disk, then apply environment overrides."""
    path = path or get_settings_path()
    environ = os.environ if environ is None else environ

    data = None
    if path.exists():
        data = path.read_text(encoding="utf-8", errors="replace")
    return StageSettings.from_json(data).with_env(environ)


def configure_logging(level: str = "WARNING"):
    """Send ``dragstage`` log records to stderr at ``level``."""
    root = logging.getLogger("dragstage")
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
