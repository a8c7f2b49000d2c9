"""Source-text composition.

:func:`compose_event_text` flattens an event's structured fields into the
single string that gets shielded and translated.  The layout is fixed::

    "<name> Location: <location> Details: <details> <url> <url> ... <sponsor>"

Every segment before the sponsor message is followed by one space, so an
event without a sponsor message ends in a trailing space.

Link order
----------
URLs are emitted in the iteration order of ``event.link_names``.  For
events parsed from JSON that is the order of the keys in the request body,
so the same request always composes the same text.  The order is *not*
normalised (e.g. sorted by label): two requests listing the same links in
a different order compose, and therefore translate, different texts.
"""

from __future__ import annotations

from event_translator.models import EventDetails

LOCATION_LABEL = "Location: "
DETAILS_LABEL = "Details: "


def compose_event_text(event: EventDetails) -> str:
    """Build the canonical source text for *event*.

    No validation is performed; callers pass already-validated events.
    """
    parts = [
        f"{event.name} ",
        f"{LOCATION_LABEL}{event.location} ",
        f"{DETAILS_LABEL}{event.details} ",
    ]
    parts.extend(f"{url} " for url in event.link_names.values())
    parts.append(event.sponsored_message)
    return "".join(parts)
