"""Domain model for translated events.

``EventDetails`` is the plain-Python representation of an event that flows
through the translation pipeline and into the event store.  The HTTP layer
has its own pydantic models (``api/models.py``) that convert to and from
this dataclass at the boundary, so the core never imports FastAPI or
pydantic.

JSON field names
----------------
The wire format uses camelCase for two fields; ``from_dict`` and
``to_dict`` translate between the two spellings:

    ============================  ======================
    Attribute                     JSON key
    ============================  ======================
    ``link_names``                ``linkNames``
    ``sponsored_message``         ``sponsoredMessage``
    ============================  ======================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from event_translator.errors import EventValidationError


@dataclass(frozen=True)
class EventDetails:
    """A single event and, once translated, its per-language texts.

    Attributes:
        name:              Unique identifier of the event.
        location:          Where the event takes place.
        details:           Free-text description.
        link_names:        Label → URL.  Only the URLs end up in the
                           composed text, in mapping order.
        sponsored_message: Optional trailing sponsor text.
        languages:         Ordered target language codes.
        keywords:          Ordered substrings that must survive translation
                           verbatim.
        translations:      Language → translated text.  Empty until the
                           pipeline has run.
    """

    name: str
    location: str
    details: str
    link_names: dict[str, str] = field(default_factory=dict)
    sponsored_message: str = ""
    languages: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    translations: dict[str, str] = field(default_factory=dict)

    def with_translations(self, translations: dict[str, str]) -> EventDetails:
        """Return a copy of this event carrying *translations*."""
        return replace(self, translations=dict(translations))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventDetails:
        """Build an event from its JSON representation.

        Missing or null optional fields fall back to empty values.  Values
        are never coerced: a field of the wrong JSON type raises
        ``EventValidationError``.  Emptiness rules live in
        :func:`validate_event`.
        """
        return cls(
            name=_text(data, "name"),
            location=_text(data, "location"),
            details=_text(data, "details"),
            link_names=_text_mapping(data, "linkNames"),
            sponsored_message=_text(data, "sponsoredMessage"),
            languages=_text_list(data, "languages"),
            keywords=_text_list(data, "keywords"),
            translations=_text_mapping(data, "translations"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON shape returned by the HTTP API."""
        return {
            "name": self.name,
            "location": self.location,
            "details": self.details,
            "linkNames": dict(self.link_names),
            "sponsoredMessage": self.sponsored_message,
            "languages": list(self.languages),
            "keywords": list(self.keywords),
            "translations": dict(self.translations),
        }


# ── JSON field readers ────────────────────────────────────────────────────────


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise EventValidationError(f"'{key}' must be a string")
    return value


def _text_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise EventValidationError(f"'{key}' must be a list of strings")
    return list(value)


def _text_mapping(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(item, str) for item in value.values()):
        raise EventValidationError(f"'{key}' must be an object of strings")
    return dict(value)


def validate_event(event: EventDetails) -> None:
    """Check the preconditions the translation pipeline relies on.

    Raises:
        EventValidationError: On the first violated rule.  Empty keywords
            are rejected here because replacing every occurrence of the
            empty string has no meaningful result.
    """
    for attr in ("name", "location", "details"):
        if not getattr(event, attr):
            raise EventValidationError(f"'{attr}' is required")

    for label, url in event.link_names.items():
        if not label:
            raise EventValidationError("link labels must not be empty")
        if not url:
            raise EventValidationError(f"link '{label}' has an empty URL")

    if not event.languages:
        raise EventValidationError("'languages' must contain at least one entry")
    if any(not lang for lang in event.languages):
        raise EventValidationError("'languages' entries must not be empty")

    if any(not kw for kw in event.keywords):
        raise EventValidationError("'keywords' entries must not be empty")
