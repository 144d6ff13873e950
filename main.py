"""
Part Namer CLI
==============
Generates short technical names for vendor product records stored in
local JSON or YAML files (vendor product-detail shape or flat shape).

Usage:
    python main.py name FILE [FILE ...] [--output human|json]
    python main.py analyze FILE [--output human|json] [--show-template] [--show-aliases] [--all]

Common options:
    --config PATH       YAML config (default: configs/config.yaml, $PARTNAMER_CONFIG)
    --log-level LEVEL   silent | error | info | debug
    --show-config       print the configuration summary first

Exit status: 0 on success, 1 when a file or config cannot be read.
"""

import argparse
import json
import os
import sys
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

from config import Cfg, load_config, print_config_summary
from models import PartSpec, RecordFormatError
from naming import NamingOptions, analyze, format_human, format_json, generate
from utils_logging import log_debug, log_error, log_info, set_log_level
from utils_text import STOPWORDS

load_dotenv()


# ==============================================================================
# INPUT
# ==============================================================================

def load_part_file(path: str) -> List[PartSpec]:
    """
    Reads one or more product records from a JSON or YAML file.

    The file may hold a single record, a list of records, or an object
    with a "products" list.

    Raises:
        FileNotFoundError: if the file does not exist
        RecordFormatError: if the content is not product data
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        if os.path.splitext(path)[1].lower() in (".yaml", ".yml"):
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecordFormatError(f"{path}: cannot parse file: {e}")

    if isinstance(data, dict) and isinstance(data.get("products"), list):
        data = data["products"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not data:
        raise RecordFormatError(f"{path}: expected a product record or a list of records")

    parts = []
    for index, item in enumerate(data):
        try:
            parts.append(PartSpec.from_dict(item))
        except RecordFormatError as e:
            raise RecordFormatError(f"{path} [record {index}]: {e}")
    log_debug(f"Loaded {len(parts)} record(s) from {path}")
    return parts


def naming_options(cfg: Cfg) -> NamingOptions:
    stopwords = frozenset(STOPWORDS | {w.casefold() for w in cfg.naming.extra_stopwords})
    return NamingOptions(fallback_keywords=cfg.naming.fallback_keywords, stopwords=stopwords)


# ==============================================================================
# COMMANDS
# ==============================================================================

def cmd_name(args: argparse.Namespace, cfg: Cfg) -> int:
    options = naming_options(cfg)
    output = args.output or cfg.output.format

    results = []
    for path in args.files:
        for part in load_part_file(path):
            generated = generate(part.hint, part.record, options)
            results.append({
                "part_number": part.part_number,
                "name": generated.name,
                "template": generated.detection.tag,
                "is_fallback": generated.is_fallback,
            })

    if output == "json":
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        for result in results:
            print(result["name"])

    fallbacks = sum(1 for r in results if r["is_fallback"])
    if fallbacks:
        log_info(f"⚠️ {fallbacks} of {len(results)} record(s) used fallback naming")
    return 0


def cmd_analyze(args: argparse.Namespace, cfg: Cfg) -> int:
    options = naming_options(cfg)
    output = args.output or cfg.output.format
    show_template = args.show_template or cfg.output.show_template
    show_aliases = args.show_aliases or cfg.output.show_aliases

    parts = load_part_file(args.file)
    if not args.all:
        parts = parts[:1]
    reports = [analyze(part.hint, part.record, options) for part in parts]

    if output == "json":
        if args.all:
            print(json.dumps([r.to_dict() for r in reports], indent=2, ensure_ascii=False))
        else:
            print(format_json(reports[0]))
    else:
        for report in reports:
            print(format_human(report, show_template=show_template, show_aliases=show_aliases))
    return 0


# ==============================================================================
# ENTRY POINT
# ==============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="partnamer",
        description="Generate short technical names for hardware part records",
    )
    parser.add_argument("--config", default=None, help="Path to config YAML")
    parser.add_argument("--log-level", default=None, choices=["silent", "error", "info", "debug"])
    parser.add_argument("--show-config", action="store_true", help="Print configuration summary")

    sub = parser.add_subparsers(dest="command", required=True)

    p_name = sub.add_parser("name", help="Print the generated name of every record")
    p_name.add_argument("files", nargs="+", help="JSON or YAML product files")
    p_name.add_argument("--output", choices=["human", "json"], default=None)
    p_name.set_defaults(handler=cmd_name)

    p_analyze = sub.add_parser("analyze", help="Explain how a name is built")
    p_analyze.add_argument("file", help="JSON or YAML product file")
    p_analyze.add_argument("--output", choices=["human", "json"], default=None)
    p_analyze.add_argument("--show-template", action="store_true", help="List the template fields")
    p_analyze.add_argument("--show-aliases", action="store_true", help="List vendor aliases per field")
    p_analyze.add_argument("--all", action="store_true", help="Analyze every record in the file")
    p_analyze.set_defaults(handler=cmd_analyze)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
        set_log_level(args.log_level or cfg.logging.level)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log_error(f"Config error: {e}")
        return 1

    if args.show_config:
        print_config_summary(cfg)

    try:
        return args.handler(args, cfg)
    except FileNotFoundError as e:
        log_error(f"File not found: {e.filename or e}")
        return 1
    except RecordFormatError as e:
        log_error(f"Invalid product record: {e}")
        return 1


if __name__ == "__main__":
    # UTF-8 output for Windows consoles
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding='utf-8')
    sys.exit(main())
