# scraper/models.py
from dataclasses import dataclass

from scraper.errors import ValidationError

INVALID_URL_MESSAGE = "a valid url starting with http or https is required"


@dataclass(frozen=True)
class ScrapeRequest:
    url: str

    @classmethod
    def from_payload(cls, payload: dict) -> "ScrapeRequest":
        """
        Build a request from a decoded JSON body.
        Raises ValidationError when `url` is missing, not a string, or not http(s).
        """
        url = payload.get("url")
        if not url or not isinstance(url, str) or not url.startswith("http"):
            raise ValidationError(INVALID_URL_MESSAGE)
        return cls(url=url)
