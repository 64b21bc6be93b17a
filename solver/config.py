from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {
    "strict": True,        # exactly 9 rows of 9 tokens
    "placeholder": "_",    # glyph printed for unfilled cells
    "show_input": True,    # echo the parsed puzzle before solving
    "show_timing": True,   # print elapsed solve time before the solution
    "verify": True,        # reject clashing givens, re-check the solution
    "quiet": False,        # suppress log lines on stderr
    "output": "text",      # text | json
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def validate(cfg: Dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    if cfg["output"] not in ("text", "json"):
        raise ValueError(f"output must be 'text' or 'json', got {cfg['output']!r}")
    ph = cfg["placeholder"]
    if not isinstance(ph, str) or len(ph.split()) != 1 or ph != ph.strip() or ph.isdigit():
        raise ValueError(f"placeholder must be a single non-numeric token, got {ph!r}")

def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    validate(cfg)
    return cfg
