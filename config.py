"""
Config Loader
=============
Loads configuration from configs/config.yaml with support for:
- Naming settings (fallback keyword count, extra stopwords)
- Output settings (human / json, template and alias listing)
- Logging level

Environment overrides (a .env file is honored by the CLI):
- PARTNAMER_CONFIG      path of the YAML file
- PARTNAMER_LOG_LEVEL   silent | error | info | debug

No config file is not an error: the engine runs on defaults.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import List, Optional

OUTPUT_FORMATS = ("human", "json")
LOG_LEVELS = ("silent", "error", "info", "debug")


@dataclass
class NamingConf:
    """Name generation settings"""
    fallback_keywords: int = 4                                       # family words in a fallback name
    extra_stopwords: List[str] = field(default_factory=list)


@dataclass
class OutputConf:
    """CLI output settings"""
    format: str = "human"  # "human" or "json"
    show_template: bool = False
    show_aliases: bool = False


@dataclass
class LoggingConf:
    """Logging settings"""
    level: str = "info"


@dataclass
class Cfg:
    """Main configuration container"""
    naming: NamingConf = field(default_factory=NamingConf)
    output: OutputConf = field(default_factory=OutputConf)
    logging: LoggingConf = field(default_factory=LoggingConf)
    source: Optional[str] = None   # file the config was read from, None = defaults


def _find_config() -> Optional[str]:
    """
    Searches for config in multiple locations:
    1. configs/config.yaml (relative to working dir)
    2. config.yaml (relative to working dir)
    3. configs/config.yaml (relative to this file)
    """
    config_paths = [
        "configs/config.yaml",
        "config.yaml",
        os.path.join(os.path.dirname(__file__), "configs/config.yaml"),
    ]
    for path in config_paths:
        if os.path.exists(path):
            return path
    return None


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Loads configuration from YAML file.

    Args:
        path: Explicit config file. Falls back to $PARTNAMER_CONFIG, then
              the search locations.

    Raises:
        FileNotFoundError: if an explicitly given file does not exist
        ValueError: if a setting has an invalid value
    """
    config_path = path or os.getenv("PARTNAMER_CONFIG")
    if config_path:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = _find_config()

    y = {}
    if config_path:
        with open(config_path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f) or {}
        if not isinstance(y, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

    # Parse sections
    naming = y.get("naming") or {}
    output = y.get("output") or {}
    logging_section = y.get("logging") or {}

    cfg = Cfg(
        naming=NamingConf(
            fallback_keywords=int(naming.get("fallback_keywords", 4)),
            extra_stopwords=[str(w) for w in naming.get("extra_stopwords", []) or []],
        ),
        output=OutputConf(
            format=str(output.get("format", "human")).lower(),
            show_template=bool(output.get("show_template", False)),
            show_aliases=bool(output.get("show_aliases", False)),
        ),
        logging=LoggingConf(
            level=str(os.getenv("PARTNAMER_LOG_LEVEL") or logging_section.get("level", "info")).lower(),
        ),
        source=config_path,
    )

    if cfg.naming.fallback_keywords < 0:
        raise ValueError(f"naming.fallback_keywords must be >= 0, got {cfg.naming.fallback_keywords}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of {OUTPUT_FORMATS}, got '{cfg.output.format}'")
    if cfg.logging.level not in LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got '{cfg.logging.level}'")
    return cfg


def print_config_summary(cfg: Cfg):
    """Prints a summary of loaded configuration"""
    print("\n" + "=" * 60)
    print("📋 Configuration Summary")
    print("=" * 60)
    print(f"  Config file:      {cfg.source or '(defaults)'}")
    print(f"  Fallback words:   {cfg.naming.fallback_keywords}")
    print(f"  Extra stopwords:  {cfg.naming.extra_stopwords}")
    print("-" * 60)
    print(f"  Output format:    {cfg.output.format.upper()}")
    print(f"  Show template:    {cfg.output.show_template}")
    print(f"  Show aliases:     {cfg.output.show_aliases}")
    print(f"  Log level:        {cfg.logging.level.upper()}")
    print("=" * 60 + "\n")
