from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .models import PositionMode

DEFAULT_MAX_DISTANCES = {
    PositionMode.WORD: 250,
    PositionMode.LINE: 50,
    PositionMode.PERCENTAGE: 10.0,
}

OUTPUT_FORMATS = ("lint", "human", "json")


@dataclass(slots=True)
class WordlintConfig:
    """Configuration options for a repeated-word check."""

    mode: str = "word"
    match_length: int = 5
    max_distance: float | None = None
    strip_punctuation: bool = False
    lowercase: bool = False
    blacklist: List[str] = field(default_factory=list)
    whitelist: List[str] = field(default_factory=list)
    output_format: str = "lint"

    @property
    def position_mode(self) -> PositionMode:
        return PositionMode.from_name(self.mode)

    def resolved_max_distance(self) -> float:
        """Return the configured distance limit or the default for the mode."""
        if self.max_distance is not None:
            return self.max_distance
        return default_max_distance(self.position_mode)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def default_max_distance(mode: PositionMode | str | None) -> float:
    return DEFAULT_MAX_DISTANCES[PositionMode.from_name(mode)]


def config_from_dict(data: Mapping[str, Any] | None) -> WordlintConfig:
    """Build a WordlintConfig from a dictionary-like input."""
    if data is None:
        return WordlintConfig()
    allowed = {field.name for field in fields(WordlintConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for list_key in ("blacklist", "whitelist"):
        if list_key in kwargs:
            value = kwargs[list_key] or []
            if isinstance(value, str):
                value = [value]
            kwargs[list_key] = [str(entry) for entry in value]
    if isinstance(kwargs.get("output_format"), str):
        kwargs["output_format"] = kwargs["output_format"].lower().strip()
    return WordlintConfig(**kwargs)


def config_from_yaml(path: str | Path) -> WordlintConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WordlintConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WordlintConfig()
    return config_from_yaml(path)


def load_word_list(path: str | Path) -> List[str]:
    """Read a blacklist or whitelist file, one entry per whitespace-separated token."""
    return Path(path).read_text(encoding="utf-8").split()
