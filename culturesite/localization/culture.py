"""
culturesite/localization/culture.py

Language tags and the (culture, ui_culture) pair a request resolves to.
"""
import re
from dataclasses import dataclass
from typing import Optional

# <language>[-<script>][-<region>], e.g. "de", "fr-FR", "sr-Latn-RS", "es-419"
_TAG_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,8})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)

TAG_PATTERN = _TAG_RE.pattern


def normalize_tag(tag: str) -> str:
    """
    Canonical spelling of a language tag: lowercase language,
    titlecase script, uppercase region ("FR-fr" -> "fr-FR").
    Accepts "_" as a separator too ("pt_BR").
    Raises ValueError for anything that is not a language tag.
    """
    cleaned = (tag or "").strip().replace("_", "-")
    match = _TAG_RE.match(cleaned)
    if match is None:
        raise ValueError(f"Not a language tag: {tag!r}")

    parts = [match.group("language").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    return "-".join(parts)


def parent_tag(tag: str):
    """'sr-Latn-RS' -> 'sr-Latn' -> 'sr' -> None."""
    if "-" not in tag:
        return None
    return tag.rsplit("-", 1)[0]


def to_babel_locale(tag: str) -> str:
    """Babel spells locales with underscores ('fr_FR')."""
    return tag.replace("-", "_")


@dataclass(frozen=True)
class RequestCulture:
    culture: str
    ui_culture: Optional[str] = None

    def __post_init__(self):
        # A single tag sets both halves.
        if self.ui_culture is None:
            object.__setattr__(self, "ui_culture", self.culture)

    @classmethod
    def from_tag(cls, tag: str) -> "RequestCulture":
        return cls(tag, tag)
