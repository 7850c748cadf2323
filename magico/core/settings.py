from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from magico.core.mixer import Color, clamp_ratio

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "defaults.yaml"
SETTINGS_ENV_VAR = "MAGICO_SETTINGS"


@dataclass(frozen=True)
class MixerSettings:
    title: str = "MagiCo"
    first_color: Color = Color(1.0, 0.0, 0.0)
    second_color: Color = Color(0.0, 0.0, 1.0)
    ratio: float = 0.5
    notice_duration_ms: int = 2000
    notice_text: str = "Copied to clipboard!"


def settings_path_from_env() -> Optional[Path]:
    """Settings file named by ``MAGICO_SETTINGS``, or None to use the bundled defaults."""
    override = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    return Path(override) if override else None


def load_settings(path: Optional[Path] = None) -> MixerSettings:
    """Load window settings from a YAML file (the bundled defaults if ``path`` is None).

    Keys left out of the file keep their :class:`MixerSettings` defaults.
    """
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{settings_path.name}: invalid YAML: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a mapping of settings")

    defaults = MixerSettings()
    values = {}

    title = raw.get("title", defaults.title)
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"{settings_path.name}: invalid 'title'")
    values["title"] = title.strip()

    for key in ("first_color", "second_color"):
        if key not in raw:
            values[key] = getattr(defaults, key)
            continue
        try:
            values[key] = Color.from_hex(raw[key])
        except ValueError as e:
            raise ValueError(f"{settings_path.name}: invalid '{key}': {e}") from e

    ratio = raw.get("ratio", defaults.ratio)
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
        raise ValueError(f"{settings_path.name}: 'ratio' must be a number")
    if not 0.0 <= ratio <= 1.0:
        logger.warning("%s: ratio %s outside [0, 1], clamping", settings_path.name, ratio)
    values["ratio"] = clamp_ratio(ratio)

    duration = raw.get("notice_duration_ms", defaults.notice_duration_ms)
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise ValueError(f"{settings_path.name}: 'notice_duration_ms' must be a positive integer")
    values["notice_duration_ms"] = duration

    notice_text = raw.get("notice_text", defaults.notice_text)
    if not isinstance(notice_text, str):
        raise ValueError(f"{settings_path.name}: 'notice_text' must be a string")
    values["notice_text"] = notice_text

    logger.debug("Loaded settings from %s", settings_path)
    return MixerSettings(**values)
