"""Event Translator: keyword-protected event translation service.

Accepts an event description (name, location, details, links, sponsor
message), composes a single source text from it, and translates that text
into every requested language while keeping caller-supplied keywords
verbatim.  Translated events are kept in memory, keyed by event name.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``;
``api/server.py`` and ``api/routes/health.py`` import it from here.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# If the package is imported without being installed we fall back to
# "0.0.0-dev" so the application can still start.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("event-translator")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
