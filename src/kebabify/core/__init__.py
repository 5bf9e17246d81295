"""
Pure text transformations: case conversion and import rewriting.
"""

from kebabify.core.case import CaseFamily, classify_case, convert_case, to_kebab
from kebabify.core.imports import update_imports, rewrite_specifier

__all__ = [
    "CaseFamily",
    "classify_case",
    "convert_case",
    "to_kebab",
    "update_imports",
    "rewrite_specifier",
]
