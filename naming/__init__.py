"""
Naming Package - Part-Name Generation Engine
=============================================
Vendor specification record in, short technical identifier out:

    record -> detect -> template -> resolve/interpret -> abbreviate -> join

    generate_name(CategoryHint("Screws", "Button Head Socket Screw"), record)
    -> "BHS-SS316-8x32-0.25-HEX"

All tables and templates are read-only module data; every function is
safe to call from any thread.
"""

from naming.detector import detect, RULES, DetectionRule
from naming.generator import generate, generate_name, NamingOptions, DEFAULT_OPTIONS
from naming.analyzer import analyze, AnalysisReport, format_human, format_json
from naming.templates import TEMPLATES, get_template

__all__ = [
    'detect',
    'RULES',
    'DetectionRule',
    'generate',
    'generate_name',
    'NamingOptions',
    'DEFAULT_OPTIONS',
    'analyze',
    'AnalysisReport',
    'format_human',
    'format_json',
    'TEMPLATES',
    'get_template',
]
