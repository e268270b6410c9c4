from __future__ import annotations

import logging
from typing import Dict, List

from .config import WordlintConfig
from .matching import find_duplicates
from .models import AnalysisResult, Document, Word
from .pairs import build_word_pairs
from .words import (
    apply_blacklist,
    apply_whitelist,
    build_words,
    filter_min_length,
    lowercase,
    strip_punctuation,
)

LOGGER = logging.getLogger(__name__)


def prepare_words(words: List[Word], config: WordlintConfig) -> List[Word]:
    """Apply the configured normalizers and filters in their fixed order."""
    if config.strip_punctuation:
        words = strip_punctuation(words)
    if config.lowercase:
        words = lowercase(words)
    if config.blacklist:
        words = apply_blacklist(words, config.blacklist)
    if config.whitelist:
        words = apply_whitelist(words, config.whitelist)
    return filter_min_length(words, config.match_length)


def analyze_document(doc: Document, config: WordlintConfig) -> AnalysisResult:
    """Find repeated words in a single document."""
    mode = config.position_mode
    words = build_words(doc.text, mode)
    candidates = prepare_words(words, config)
    matches = find_duplicates(candidates)
    pairs = build_word_pairs(matches, config.resolved_max_distance())
    LOGGER.debug(
        "%s: %d words, %d candidates, %d matches, %d pairs",
        doc.doc_id,
        len(words),
        len(candidates),
        len(matches),
        len(pairs),
    )
    return AnalysisResult(
        doc_id=doc.doc_id,
        mode=mode,
        word_count=len(words),
        matches=matches,
        pairs=pairs,
    )


def analyze_documents(
    documents: List[Document], config: WordlintConfig
) -> Dict[str, AnalysisResult]:
    """Analyze every document and return results keyed by document id."""
    results: Dict[str, AnalysisResult] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document, config)
    LOGGER.info(
        "Analyzed %d document(s), %d repeated pair(s)",
        len(results),
        sum(len(result.pairs) for result in results.values()),
    )
    return results
