from __future__ import annotations


class KursScrapeError(RuntimeError):
    """Raised when an exchange-rate page no longer has the expected layout."""
