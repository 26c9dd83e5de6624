from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime
from bs4 import BeautifulSoup
from markupsafe import Markup
from errors import DecodeError

EXCERPT_LENGTH = 200

# The backend emits RFC 3339 with 1 to 9 fraction digits (trailing zeros dropped);
# fromisoformat wants exactly 6 on older interpreters.
_FRACTION = re.compile(r"(\.\d{1,6})\d*")
# Separator inserted between text nodes lands before punctuation after inline tags.
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,;:!?)])")


def _parse_timestamp(value, field: str) -> datetime:
    if not isinstance(value, str):
        raise DecodeError(f"{field}: expected timestamp string, got {type(value).__name__}")
    text = _FRACTION.sub(lambda m: m.group(1).ljust(7, "0"), value.strip())
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodeError(f"{field}: {e}") from e


def _require(data: dict, field: str, kind: type):
    if field not in data:
        raise DecodeError(f"missing field {field!r}")
    value = data[field]
    # bool is an int subclass; an id of true is still garbage.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DecodeError(f"{field}: expected {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class BlogPost:
    id: int
    owner_username: str
    title: str
    content: Markup
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_json(cls, data) -> "BlogPost":
        if not isinstance(data, dict):
            raise DecodeError(f"expected blog object, got {type(data).__name__}")
        return cls(
            id=_require(data, "id", int),
            owner_username=_require(data, "owner_username", str),
            title=_require(data, "title", str),
            # Backend-sanitized markup, rendered as-is.
            content=Markup(_require(data, "content", str)),
            created_at=_parse_timestamp(data.get("created_at"), "created_at"),
            updated_at=_parse_timestamp(data.get("updated_at"), "updated_at"),
        )

    @property
    def excerpt(self) -> str:
        """Plain-text preview of the post for listing pages."""
        text = BeautifulSoup(str(self.content), "html.parser").get_text(" ", strip=True)
        text = _SPACE_BEFORE_PUNCT.sub(r"\1", " ".join(text.split()))
        if len(text) <= EXCERPT_LENGTH:
            return text
        return text[:EXCERPT_LENGTH].rsplit(" ", 1)[0] + "…"


def blogs_from_json(data) -> list[BlogPost]:
    if not isinstance(data, list):
        raise DecodeError(f"expected list of blogs, got {type(data).__name__}")
    return [BlogPost.from_json(item) for item in data]


@dataclass(frozen=True)
class RegistrationRequest:
    username: str
    password: str
    token: str


@dataclass(frozen=True)
class RiskAssessment:
    valid: bool
    action: str
    score: float
