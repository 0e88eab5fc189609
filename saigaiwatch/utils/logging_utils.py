"""Logging setup for Saigai Watch.

The handler layout lives in ``config/logging.yaml`` and is applied with
``logging.config.dictConfig``. Every fetch cycle gets an adapter that tags
its messages with the cycle generation, so interleaved sync/async cycles can
be told apart in the log.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

import yaml

_NAMESPACE = "saigaiwatch"
_DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "config" / "logging.yaml"
_FALLBACK_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _apply_overrides(
    cfg: Dict[str, Any], log_level: Optional[str], log_file: Optional[str]
) -> Dict[str, Any]:
    """Point file handlers at ``log_file`` and set every named logger to ``log_level``."""
    for handler in cfg.get("handlers", {}).values():
        if handler.get("class") != "logging.FileHandler":
            continue
        if log_file:
            handler["filename"] = log_file
        # FileHandler will not create missing directories itself
        Path(handler["filename"]).parent.mkdir(parents=True, exist_ok=True)

    if log_level:
        for logger_cfg in cfg.get("loggers", {}).values():
            logger_cfg["level"] = log_level.upper()
    return cfg


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Install the logging configuration.

    Args:
        config_path: YAML dictConfig file (defaults to config/logging.yaml).
        log_level: Level applied to the named loggers, e.g. "DEBUG".
        log_file: Replacement filename for file handlers.

    A missing YAML file is not an error: console logging via basicConfig is
    used instead.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG
    if not path.is_file():
        level_name = (log_level or "INFO").upper()
        logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=_FALLBACK_FORMAT)
        logging.getLogger(__name__).debug("No logging config at %s, using basicConfig", path)
        return

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    logging.config.dictConfig(_apply_overrides(cfg, log_level, log_file))


def get_logger(name: str) -> logging.Logger:
    """Return ``saigaiwatch.<name>``; names already in the namespace pass through."""
    if name == _NAMESPACE or name.startswith(_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_NAMESPACE}.{name}")


class CycleContextAdapter(logging.LoggerAdapter):
    """Prefixes messages with ``[cycle N]``.

    Example output:
        2024-01-15T12:05:00 [INFO] saigaiwatch.controller: [cycle 3] Rendered 12 record(s)
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        return f"[cycle {self.extra.get('generation', '?')}] {msg}", kwargs


def get_cycle_logger(name: str, generation: int) -> CycleContextAdapter:
    """Adapter over get_logger(name) bound to one cycle generation."""
    return CycleContextAdapter(get_logger(name), {"generation": generation})
