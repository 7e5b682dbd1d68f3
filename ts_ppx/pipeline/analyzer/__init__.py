"""
Analyzer - directive scanning and import resolution.
"""

from __future__ import annotations

from .directive_scanner import AnnotatedStatement, DirectiveScanner
from .reference_resolver import ImportBindingResolver

__all__ = [
    "AnnotatedStatement",
    "DirectiveScanner",
    "ImportBindingResolver",
]
