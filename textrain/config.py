# textrain/config.py
"""
Configuration for textrain.

Values come from, lowest to highest precedence:
  1. built-in defaults
  2. ~/.config/textrain/config.toml   (or the file named by TEXTRAIN_CONFIG)
  3. environment: TEXTRAIN_DOCS_DIR, TEXTRAIN_SEED, TEXTRAIN_LOG_FILE,
     TEXTRAIN_PALETTE (comma separated Rich color names)
  4. per-invocation CLI options, applied by the caller

Example config.toml:

    docs_dir = "~/texts"
    seed = 42
    palette = ["green", "bright_green", "white"]
    log_file = "~/.cache/textrain/textrain.log"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigError
from .rain.raster import DEFAULT_PALETTE

DEFAULT_CONFIG_PATH = Path("~/.config/textrain/config.toml")


@dataclass
class RainConfig:
    docs_dir: Optional[Path] = None
    seed: Optional[int] = None
    palette: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_PALETTE)
    log_file: Optional[Path] = None

    def apply_overrides(
        self,
        docs_dir: Optional[Path] = None,
        seed: Optional[int] = None,
        log_file: Optional[Path] = None,
    ) -> "RainConfig":
        if docs_dir is not None:
            self.docs_dir = _as_dir(docs_dir, "--docs-dir")
        if seed is not None:
            self.seed = seed
        if log_file is not None:
            self.log_file = Path(log_file).expanduser()
        return self


def _as_dir(value: Any, origin: str) -> Path:
    path = Path(str(value)).expanduser()
    if not path.is_dir():
        raise ConfigError(f"{origin}: documents directory not found: {path}")
    return path


def _as_seed(value: Any, origin: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{origin}: seed must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{origin}: seed must be an integer, got {value!r}") from None


def _as_palette(value: Any, origin: str) -> Tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"{origin}: palette must be a list of color names")
    colors = tuple(str(v).strip() for v in value if str(v).strip())
    if not colors:
        raise ConfigError(f"{origin}: palette must name at least one color")
    return colors


def _read_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def load_config(
    path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None
) -> RainConfig:
    env = os.environ if environ is None else environ
    if path is None:
        path = Path(env.get("TEXTRAIN_CONFIG") or DEFAULT_CONFIG_PATH)
    path = path.expanduser()

    cfg = RainConfig()
    data = _read_file(path)
    origin = str(path)

    if "docs_dir" in data:
        cfg.docs_dir = _as_dir(data["docs_dir"], origin)
    if "seed" in data:
        cfg.seed = _as_seed(data["seed"], origin)
    if "palette" in data:
        cfg.palette = _as_palette(data["palette"], origin)
    if "log_file" in data:
        cfg.log_file = Path(str(data["log_file"])).expanduser()

    if env.get("TEXTRAIN_DOCS_DIR"):
        cfg.docs_dir = _as_dir(env["TEXTRAIN_DOCS_DIR"], "TEXTRAIN_DOCS_DIR")
    if env.get("TEXTRAIN_SEED"):
        cfg.seed = _as_seed(env["TEXTRAIN_SEED"], "TEXTRAIN_SEED")
    if env.get("TEXTRAIN_PALETTE"):
        cfg.palette = _as_palette(env["TEXTRAIN_PALETTE"], "TEXTRAIN_PALETTE")
    if env.get("TEXTRAIN_LOG_FILE"):
        cfg.log_file = Path(env["TEXTRAIN_LOG_FILE"]).expanduser()

    return cfg
