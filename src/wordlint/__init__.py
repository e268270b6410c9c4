"""
wordlint finds words repeated within a configurable distance in plain text.
"""

from __future__ import annotations

from .config import WordlintConfig, config_from_dict, config_from_yaml, load_config
from .errors import LengthMismatchError, PositionTypeMismatchError, WordlintError
from .matching import distance, find_duplicates
from .models import Document, PositionMode, Word, WordPair
from .pipeline import analyze_document, analyze_documents
from .words import (
    apply_blacklist,
    apply_whitelist,
    build_words,
    filter_min_length,
    lowercase,
    strip_punctuation,
)

__all__ = [
    "WordlintConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "LengthMismatchError",
    "PositionTypeMismatchError",
    "WordlintError",
    "Document",
    "PositionMode",
    "Word",
    "WordPair",
    "build_words",
    "filter_min_length",
    "strip_punctuation",
    "lowercase",
    "apply_blacklist",
    "apply_whitelist",
    "find_duplicates",
    "distance",
    "analyze_document",
    "analyze_documents",
]

__version__ = "0.1.0"
