from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import OUTPUT_FORMATS, WordlintConfig, load_config, load_word_list
from .models import AnalysisResult, Document, PositionMode, Word, WordPair
from .pipeline import analyze_documents

app = typer.Typer(
    help="Find repeated words within a configurable distance.", no_args_is_help=True
)

# File types expanded from a directory input.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".rst", ".tex"}

DISTANCE_UNITS = {
    PositionMode.WORD: "words",
    PositionMode.LINE: "lines",
    PositionMode.PERCENTAGE: "% of document",
}


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-t",
        help="Distance measure: 'word', 'line' or 'percentage'.",
    ),
    match_length: int | None = typer.Option(
        None,
        "--match-length",
        "-m",
        help="Only check words longer than this many characters.",
    ),
    max_distance: float | None = typer.Option(
        None,
        "--max-distance",
        "-d",
        help="Report repetitions at most this far apart (unit depends on mode).",
    ),
    strip_punctuation: bool | None = typer.Option(
        None,
        "--strip-punctuation/--keep-punctuation",
        help="Ignore punctuation when comparing words.",
    ),
    lowercase: bool | None = typer.Option(
        None,
        "--lowercase/--keep-case",
        help="Ignore capitalization when comparing words.",
    ),
    blacklist: Path | None = typer.Option(
        None, exists=True, dir_okay=False, help="File of words to ignore."
    ),
    whitelist: Path | None = typer.Option(
        None, exists=True, dir_okay=False, help="File of the only words to check."
    ),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'lint', 'human' or 'json'."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    """Report repeated words in the input file(s); exits 1 when any are found."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
        )
    cfg = load_config(config)
    _apply_check_overrides(
        cfg,
        mode,
        match_length,
        max_distance,
        strip_punctuation,
        lowercase,
        blacklist,
        whitelist,
        output_format,
    )
    if cfg.output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown output format '{cfg.output_format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}."
        )
    documents = _load_documents(input_path)
    results = analyze_documents(documents, cfg)

    if cfg.output_format == "json":
        typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))
    else:
        render = _lint_line if cfg.output_format == "lint" else _human_line
        for doc_id, result in sorted(results.items()):
            for pair in result.pairs:
                typer.echo(render(doc_id, result.mode, pair))

    if any(result.pairs for result in results.values()):
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WordlintConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_check_overrides(
    config: WordlintConfig,
    mode: str | None,
    match_length: int | None,
    max_distance: float | None,
    strip_punctuation: bool | None,
    lowercase: bool | None,
    blacklist: Path | None,
    whitelist: Path | None,
    output_format: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if mode:
        config.mode = mode
    if match_length is not None:
        config.match_length = match_length
    if max_distance is not None:
        config.max_distance = max_distance
    if strip_punctuation is not None:
        config.strip_punctuation = strip_punctuation
    if lowercase is not None:
        config.lowercase = lowercase
    # List files extend whatever the config file already lists.
    if blacklist:
        config.blacklist = [*config.blacklist, *_read_word_list(blacklist)]
    if whitelist:
        config.whitelist = [*config.whitelist, *_read_word_list(whitelist)]
    if output_format:
        config.output_format = output_format.lower()


def _read_word_list(path: Path) -> List[str]:
    try:
        return load_word_list(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read word list {path}: {exc}") from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, str(file.relative_to(input_path))) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text") from exc
    return Document(doc_id=doc_id, text=text)


def _format_distance(value: float) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _lint_line(doc_id: str, mode: PositionMode, pair: WordPair) -> str:
    """Render a pair as ``file:line:column:line:column:distance:lemma``."""
    return ":".join(
        [
            doc_id,
            str(pair.first.line),
            str(pair.first.column),
            str(pair.second.line),
            str(pair.second.column),
            _format_distance(pair.distance),
            pair.lemma,
        ]
    )


def _human_line(doc_id: str, mode: PositionMode, pair: WordPair) -> str:
    return (
        f"{doc_id}: '{pair.lemma}' at line {pair.first.line}, column "
        f"{pair.first.column} repeats at line {pair.second.line}, column "
        f"{pair.second.column} ({_format_distance(pair.distance)} "
        f"{DISTANCE_UNITS[mode]} apart)"
    )


class WordPayload(TypedDict):
    line: int
    column: int
    position: float


class PairPayload(TypedDict):
    lemma: str
    first: WordPayload
    second: WordPayload
    distance: float


class DocumentSummary(TypedDict):
    doc_id: str
    mode: str
    word_count: int
    pairs: List[PairPayload]


def _build_summary(results: Dict[str, AnalysisResult]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, result in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "mode": result.mode.value,
                "word_count": result.word_count,
                "pairs": [_pair_dict(pair) for pair in result.pairs],
            }
        )
    return summary


def _pair_dict(pair: WordPair) -> PairPayload:
    return {
        "lemma": pair.lemma,
        "first": _word_dict(pair.first),
        "second": _word_dict(pair.second),
        "distance": pair.distance,
    }


def _word_dict(word: Word) -> WordPayload:
    return {"line": word.line, "column": word.column, "position": word.position}


if __name__ == "__main__":
    main()
