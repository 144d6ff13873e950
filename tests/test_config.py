"""
Test Config Loader
==================
Defaults, YAML sections, environment overrides and validation.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from config import Cfg, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("PARTNAMER_CONFIG", raising=False)
    monkeypatch.delenv("PARTNAMER_LOG_LEVEL", raising=False)
    # No configs/ directory in the working dir
    monkeypatch.chdir(tmp_path)


def _write(tmp_path, text):
    path = tmp_path / "naming.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_yaml_sections(tmp_path):
    print("\n=== TEST: YAML Config ===")

    path = _write(tmp_path, """
naming:
  fallback_keywords: 2
  extra_stopwords: [widget]
output:
  format: JSON
  show_template: true
logging:
  level: debug
""")
    cfg = load_config(path)
    print(f"  {cfg}")

    assert cfg.naming.fallback_keywords == 2
    assert cfg.naming.extra_stopwords == ["widget"]
    assert cfg.output.format == "json", "Format is case-insensitive"
    assert cfg.output.show_template is True
    assert cfg.output.show_aliases is False
    assert cfg.logging.level == "debug"
    assert cfg.source == path

    print("✅ PASSED")


def test_missing_keys_use_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "output:\n  show_aliases: true\n"))
    defaults = Cfg()

    assert cfg.naming == defaults.naming
    assert cfg.output.format == "human"
    assert cfg.output.show_aliases is True

    empty = load_config(_write(tmp_path, ""))
    assert empty.naming.fallback_keywords == 4


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_env_overrides(tmp_path, monkeypatch):
    path = _write(tmp_path, "logging:\n  level: error\n")

    monkeypatch.setenv("PARTNAMER_CONFIG", path)
    assert load_config().source == path

    monkeypatch.setenv("PARTNAMER_LOG_LEVEL", "DEBUG")
    assert load_config().logging.level == "debug"


def test_invalid_values(tmp_path):
    print("\n=== TEST: Invalid Config ===")

    bad = [
        "naming:\n  fallback_keywords: -1\n",
        "output:\n  format: xml\n",
        "logging:\n  level: loud\n",
        "- just\n- a list\n",
    ]
    for text in bad:
        with pytest.raises(ValueError):
            load_config(_write(tmp_path, text))
        print(f"  rejected: {text.strip()!r}")

    print("✅ PASSED")


if __name__ == "__main__":
    print("Run with: pytest tests/test_config.py")
