# scraper/errors.py


class ValidationError(ValueError):
    """The inbound request did not carry a usable http(s) URL."""


class ScrapeFailed(RuntimeError):
    """Rendering or text extraction failed; the message carries the cause."""
