"""
Summary: Public surface of the pattern resolution feature.
Why: Let callers import resolver types without touching layer internals.
"""

from __future__ import annotations

from .domain.models import ResolutionResult, ResolvedFile
from .domain.pattern import PatternKind, classify, compile_pattern, compile_segment
from .usecases.resolver import PatternResolver

__all__ = [
    "PatternKind",
    "PatternResolver",
    "ResolutionResult",
    "ResolvedFile",
    "classify",
    "compile_pattern",
    "compile_segment",
]
