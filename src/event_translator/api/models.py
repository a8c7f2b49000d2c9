"""
Pydantic models for API requests and responses.

These models define the JSON wire format of the events API and perform the
structural validation that must pass before the translation pipeline runs:

- name, location and details are required and non-empty
- every link label and URL is non-empty
- languages is required, non-empty, and every entry is non-empty
- keyword entries, if any, are non-empty

Two fields use camelCase on the wire (``linkNames``, ``sponsoredMessage``);
the models accept either spelling on input and always emit camelCase.

Models convert to and from the core ``EventDetails`` dataclass so nothing
below the HTTP layer depends on pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from event_translator.errors import EventValidationError
from event_translator.models import EventDetails


def describe_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic's error list into a single readable line."""
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        msg = error.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages) or "invalid request body"


# ============================================================================
# REQUEST MODELS (Client → Server)
# ============================================================================


class EventRequest(BaseModel):
    """
    Body of ``POST /event``.

    Attributes:
        name: Unique event name (the lookup key for ``GET /event?type=``)
        location: Where the event takes place
        details: Free-text description
        link_names: Label → URL; URLs are appended to the composed text
        sponsored_message: Optional trailing sponsor text
        languages: Target language codes (e.g. "fr", "de")
        keywords: Substrings to keep verbatim in every translation
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    details: str = Field(min_length=1)
    link_names: dict[str, str] = Field(default_factory=dict, alias="linkNames")
    sponsored_message: str = Field(default="", alias="sponsoredMessage")
    languages: list[str] = Field(min_length=1)
    keywords: list[str] = Field(default_factory=list)

    @field_validator("link_names", mode="before")
    @classmethod
    def _none_links_to_empty(cls, value):
        return {} if value is None else value

    @field_validator("keywords", mode="before")
    @classmethod
    def _none_keywords_to_empty(cls, value):
        return [] if value is None else value

    @field_validator("sponsored_message", mode="before")
    @classmethod
    def _none_sponsor_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("link_names")
    @classmethod
    def _links_not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        for label, url in value.items():
            if not label:
                raise ValueError("link labels must not be empty")
            if not url:
                raise ValueError(f"link '{label}' has an empty URL")
        return value

    @field_validator("languages")
    @classmethod
    def _languages_not_empty(cls, value: list[str]) -> list[str]:
        if any(not lang for lang in value):
            raise ValueError("language entries must not be empty")
        return value

    @field_validator("keywords")
    @classmethod
    def _keywords_not_empty(cls, value: list[str]) -> list[str]:
        if any(not kw for kw in value):
            raise ValueError("keyword entries must not be empty")
        return value

    def to_event(self) -> EventDetails:
        """Convert to the core dataclass (translations left empty)."""
        return EventDetails(
            name=self.name,
            location=self.location,
            details=self.details,
            link_names=dict(self.link_names),
            sponsored_message=self.sponsored_message,
            languages=list(self.languages),
            keywords=list(self.keywords),
        )


def parse_event(data: object) -> EventDetails:
    """
    Validate a decoded JSON body with ``EventRequest`` outside a request.

    Used by the CLI so event files get the same checks as ``POST /event``.

    Raises:
        EventValidationError: If any field is missing, empty or of the wrong type.
    """
    try:
        request = EventRequest.model_validate(data)
    except ValidationError as exc:
        raise EventValidationError(describe_validation_errors(exc.errors())) from exc
    return request.to_event()


# ============================================================================
# RESPONSE MODELS (Server → Client)
# ============================================================================


class EventResponse(BaseModel):
    """
    A stored event as returned by ``POST /event`` and ``GET /event``.

    Attributes:
        translations: Language → translated text, one entry per requested
            language
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str
    details: str
    link_names: dict[str, str] = Field(default_factory=dict, alias="linkNames")
    sponsored_message: str = Field(default="", alias="sponsoredMessage")
    languages: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    translations: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_event(cls, event: EventDetails) -> "EventResponse":
        return cls.model_validate(event.to_dict())


class ErrorResponse(BaseModel):
    """Error body for 400, 404 and 500 responses."""

    error: str


class MessageResponse(BaseModel):
    """Informational body, used for the 409 conflict response."""

    message: str
