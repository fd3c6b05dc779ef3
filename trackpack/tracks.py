"""
trackpack.tracks - Track specification parsing.

Users type a JSON list such as::

    [{'rownum': 1, 'typeName': 'english'}, {'rownum': 2, 'typeName': 'commentary'}]

Single quotes are accepted in place of double quotes. Each record names an
audio track by its ordinal (source stream = ordinal + 1) and the label used
as its output file name.
"""

from __future__ import annotations

from collections import Counter

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

from trackpack.exceptions import TrackSpecError


class TrackSpec(BaseModel):
    """One named audio track to extract."""

    ordinal: int = Field(strict=True, validation_alias=AliasChoices("rownum", "ordinal"))
    label: str = Field(strict=True, validation_alias=AliasChoices("typeName", "label"))

    @property
    def stream_index(self) -> int:
        """Source stream holding this track (0 is video, 1 the default audio)."""
        return self.ordinal + 1


_TRACK_LIST = TypeAdapter(list[TrackSpec])


def normalize_quotes(text: str) -> str:
    """Strip whitespace and turn single-quoted strings into JSON strings."""
    return text.strip().replace("'", '"')


def parse_track_specs(text: str) -> list[TrackSpec]:
    """Parse user-typed track specification text.

    Args:
        text: A JSON array of ``{rownum, typeName}`` objects, single quotes allowed

    Returns:
        Track specs sorted by ordinal; equal ordinals keep their input order

    Raises:
        TrackSpecError: If the text is not a JSON array of valid records
    """
    normalized = normalize_quotes(text)
    try:
        tracks = _TRACK_LIST.validate_json(normalized)
    except ValidationError as e:
        raise TrackSpecError(_describe(e)) from e

    return sorted(tracks, key=lambda track: track.ordinal)


def duplicate_labels(labels: list[str]) -> list[str]:
    """Return labels used more than once, in first-seen order."""
    counts = Counter(labels)
    return [label for label, count in counts.items() if count > 1]


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if first["type"] == "json_invalid":
        return f"Track specification is not valid JSON: {first['msg']}"
    if location:
        return f"Invalid track specification at {location}: {first['msg']}"
    return f"Invalid track specification: {first['msg']}"
