"""Keyword-protected translation pipeline.

Takes an event, composes one source text from its fields, and translates
that text into each requested language while keeping caller-supplied
keywords (brand names, proper nouns) verbatim.

Package structure
-----------------
composer.py     compose_event_text: fixed-layout source text from event
                fields.
shield.py       shield_keywords, unshield_keywords: reversible keyword to
                placeholder substitution.
translator.py   Translator, MicrosoftTranslator: translation capability
                protocol and its HTTP backend.
service.py      translate_protected, EventTranslationService: the pipeline
                and the service the API and CLI call.

Typical call flow (inside POST /event)
--------------------------------------
1. the route validates the body and builds an ``EventDetails``
2. ``service.create_event(event, store)``
3. composer builds the source text
4. shield swaps keywords for placeholders
5. translator is called once per language
6. placeholders are swapped back and the event is stored
"""

from event_translator.translation.service import EventTranslationService, translate_protected

__all__ = ["EventTranslationService", "translate_protected"]
