"""Loads YAML/JSON configuration files and the global runtime settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from fabric_claims.src.errors import ConfigError


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    try:
        with open(path_p, "r", encoding="utf-8") as f:
            if path_p.suffix in {".yaml", ".yml"}:
                data = yaml.safe_load(f)
            elif path_p.suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigError(f"Unsupported config format: {path_p.suffix or path_p.name}")
    except OSError as exc:
        raise ConfigError(f"Failed to read config {path_p}: {exc}") from exc
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to parse config {path_p}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path_p} must contain a mapping")
    return data


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the packaged default configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "meta_config.yaml"
    if path.exists():
        return load_config(path)
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
CELL_STATE: str = str(META_CONFIG.get("cell_state", "counting"))
_HEATMAP_CONF = META_CONFIG.get("heatmap", {}) or {}
HEATMAP_ENABLED: bool = bool(_HEATMAP_CONF.get("enabled", False))
HEATMAP_PATH: str = str(_HEATMAP_CONF.get("path", "heatmap.png"))
_REPORT_CONF = META_CONFIG.get("report", {}) or {}
REPORT_OVERLAP_FREE: bool = bool(_REPORT_CONF.get("overlap_free_claims", False))
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "WARNING"))


def set_cell_state(value: str) -> None:
    """Override the cell state used for new sheets."""
    global CELL_STATE
    CELL_STATE = value
    META_CONFIG["cell_state"] = value


def set_heatmap_enabled(value: bool) -> None:
    global HEATMAP_ENABLED
    HEATMAP_ENABLED = value
    META_CONFIG.setdefault("heatmap", {})["enabled"] = value


def set_heatmap_path(value: str) -> None:
    """Override the heatmap output path."""
    global HEATMAP_PATH
    HEATMAP_PATH = value
    META_CONFIG.setdefault("heatmap", {})["path"] = value


def set_report_overlap_free(value: bool) -> None:
    """Enable or disable the overlap-free claim line in the report."""
    global REPORT_OVERLAP_FREE
    REPORT_OVERLAP_FREE = value
    META_CONFIG.setdefault("report", {})["overlap_free_claims"] = value


def set_log_level(value: str) -> None:
    """Override the diagnostics level, rejecting names logging does not know."""
    global LOG_LEVEL
    value = str(value).upper()
    if not isinstance(logging.getLevelName(value), int):
        raise ConfigError(f"Unknown log level '{value}'")
    LOG_LEVEL = value
    META_CONFIG["log_level"] = value


def _section(overrides: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = overrides.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{key}' must be a mapping")
    return value


def apply_config(overrides: Dict[str, Any]) -> None:
    """Apply a user configuration mapping on top of the defaults."""
    unknown = set(overrides) - {"cell_state", "heatmap", "report", "log_level"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    if "cell_state" in overrides:
        set_cell_state(str(overrides["cell_state"]))
    heatmap = _section(overrides, "heatmap")
    if "enabled" in heatmap:
        set_heatmap_enabled(bool(heatmap["enabled"]))
    if "path" in heatmap:
        set_heatmap_path(str(heatmap["path"]))
    report = _section(overrides, "report")
    if "overlap_free_claims" in report:
        set_report_overlap_free(bool(report["overlap_free_claims"]))
    if "log_level" in overrides:
        set_log_level(str(overrides["log_level"]))


def runtime_config() -> Dict[str, Any]:
    """Return the effective settings."""
    return {
        "cell_state": CELL_STATE,
        "heatmap_enabled": HEATMAP_ENABLED,
        "heatmap_path": HEATMAP_PATH,
        "report_overlap_free_claims": REPORT_OVERLAP_FREE,
        "log_level": LOG_LEVEL,
    }
