"""PGN tag-pair section: parsing and an ordered tag store."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from pgnview.core.notation.errors import MalformedTagError
from pgnview.core.notation.models import Tag

_LOGGER = logging.getLogger(__name__)

TAG_NAMES: tuple[str, ...] = (
    # Seven tag roster
    "Event",
    "Site",
    "Date",
    "Round",
    "White",
    "Black",
    "Result",
    # Players
    "WhiteTitle",
    "BlackTitle",
    "WhiteElo",
    "BlackElo",
    "WhiteUSCF",
    "BlackUSCF",
    "WhiteNA",
    "BlackNA",
    "WhiteType",
    "BlackType",
    # Event
    "EventDate",
    "EventSponsor",
    "Section",
    "Stage",
    "Board",
    # Opening
    "Opening",
    "Variation",
    "SubVariation",
    "ECO",
    "NIC",
    # Time and misc
    "Time",
    "UTCTime",
    "UTCDate",
    "TimeControl",
    "SetUp",
    "FEN",
    "Termination",
    "Annotator",
    "Mode",
    "PlyCount",
)
_TAG_NAME_SET = frozenset(TAG_NAMES)
_ESCAPE_RE = re.compile(r"\\(.)")


def is_known_tag(name: str) -> bool:
    """Return ``True`` if *name* belongs to the recognized tag vocabulary."""
    return name in _TAG_NAME_SET


def _scan_tag_section(text: str) -> tuple[list[str], int]:
    """Collect bracketed segments from the start of *text*.

    Returns the raw segment bodies (without ``[``/``]``) and the offset just
    past the last segment. A leading byte-order mark is skipped.
    """
    segments: list[str] = []
    idx = 1 if text.startswith("\ufeff") else 0
    total = len(text)

    while True:
        while idx < total and text[idx].isspace():
            idx += 1
        if idx >= total or text[idx] != "[":
            break

        close = text.find("]", idx + 1)
        quote = text.find('"', idx + 1)
        if 0 <= quote and (close < 0 or quote < close):
            # A quoted value may itself contain "]" and escaped quotes.
            value_end = quote + 1
            while value_end < total and text[value_end] != '"':
                value_end += 2 if text[value_end] == "\\" else 1
            if value_end < total:
                close = text.find("]", value_end + 1)
        if close < 0:
            segments.append(text[idx + 1 :])
            idx = total
            break
        segments.append(text[idx + 1 : close])
        idx = close + 1

    return segments, idx


def tag_section_end(text: str) -> int:
    """Return the offset where the tag-pair section of *text* ends."""
    _segments, end = _scan_tag_section(text)
    return end


def parse_tag_segment(segment: str) -> Tag:
    """Parse the body of one ``[Name "Value"]`` segment."""
    name, sep, raw_value = segment.partition(' "')
    name = name.strip()
    if not sep or not name:
        raise MalformedTagError(segment)
    raw_value = raw_value.rstrip()
    if raw_value.endswith('"'):
        raw_value = raw_value[:-1]
    value = _ESCAPE_RE.sub(r"\1", raw_value)
    return Tag(name=name, value=value)


def parse_tags(text: str) -> list[Tag]:
    """Parse the tag section of *text*; malformed segments are skipped."""
    segments, _end = _scan_tag_section(text)
    store = TagStore()
    for segment in segments:
        try:
            tag = parse_tag_segment(segment)
        except MalformedTagError as exc:
            _LOGGER.warning("%s; segment skipped", exc)
            continue
        store.put(tag.name, tag.value)
    return list(store)


class TagStore:
    """Ordered tag pairs with unique names.

    Tags read from text keep unknown names so they round-trip; :meth:`set`
    only accepts names from :data:`TAG_NAMES`.
    """

    __slots__ = ("_values",)

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._values: dict[str, str] = {}
        for tag in tags:
            self.put(tag.name, tag.value)

    @classmethod
    def from_text(cls, text: str) -> TagStore:
        return cls(parse_tags(text))

    def get(self, name: str) -> str:
        """Return the value of tag *name*, or ``""`` when absent."""
        return self._values.get(name, "")

    def set(self, name: str, value: str) -> bool:
        """Update or append a recognized tag. Returns ``False`` if ignored."""
        if not is_known_tag(name):
            return False
        self.put(name, value)
        return True

    def put(self, name: str, value: str) -> None:
        """Update or append *name* without vocabulary checks."""
        self._values[name] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def __iter__(self) -> Iterator[Tag]:
        for name, value in self._values.items():
            yield Tag(name=name, value=value)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"TagStore({list(self)!r})"
