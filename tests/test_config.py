# tests/test_config.py
from pathlib import Path

import pytest

from solver.config import DEFAULTS, load_config, load_yaml, merge_overrides

ROOT = Path(__file__).resolve().parents[1]


def test_defaults():
    cfg = load_config()
    assert cfg == DEFAULTS
    assert cfg.strict is True and cfg.placeholder == "_"


def test_shipped_yaml_matches_defaults():
    assert dict(load_yaml(ROOT / "configs" / "default.yaml")) == DEFAULTS


def test_yaml_then_overrides(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("placeholder: '.'\nshow_timing: false\n", encoding="utf-8")
    cfg = load_config(p, show_timing=None, output="json")
    assert cfg.placeholder == "."
    assert cfg.show_timing is False  # None override leaves the file value
    assert cfg.output == "json"
    assert cfg.strict is True


def test_merge_overrides_skips_none():
    assert merge_overrides({"a": 1, "b": 2}, a=None, b=3) == {"a": 1, "b": 3}


@pytest.mark.parametrize("text", [
    "colour: red\n", "output: xml\n", "placeholder: '7'\n", "- 1\n", "output: [text\n",
])
def test_rejects_bad_config(tmp_path, text):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
