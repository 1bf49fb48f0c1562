"""URL validation gate.

Decides whether a candidate string may be stored as a URL summary's ``url``.
The check is purely syntactic: nothing here ever touches the network.

Rules, applied in order (first failure wins):

1. the string must parse as an absolute URL, otherwise
   :class:`InvalidUrlError`;
2. its scheme, as written, must be ``https``, otherwise
   :class:`SchemeNotAllowedError`.

An accepted string is returned exactly as given.  The same predicate backs
the interactive ``/validate`` endpoint, the service layer and the repository.
"""

from __future__ import annotations

from pydantic import AnyUrl, TypeAdapter, ValidationError

ALLOWED_PREFIX = "https://"

# The URL parser drops these anywhere in the input, so the stored string
# would differ from the one that was checked.
_STRIPPED_CHARS = "\t\r\n"

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class UrlValidationError(ValueError):
    """Base class for rejected URL input.

    ``code`` is the stable machine-readable reason reported to callers.
    """

    code: str = "InvalidUrl"

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class InvalidUrlError(UrlValidationError):
    code = "InvalidUrl"


class SchemeNotAllowedError(UrlValidationError):
    code = "SchemeNotAllowed"


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute ``https`` URL.

    Raises:
        InvalidUrlError: *url* is not a syntactically valid absolute URL.
        SchemeNotAllowedError: *url* is valid but not ``https``.
    """
    if not isinstance(url, str) or not url or url != url.strip():
        raise InvalidUrlError(url, "Invalid URL")
    if any(c in url for c in _STRIPPED_CHARS):
        raise InvalidUrlError(url, "Invalid URL: contains tab or newline characters")
    try:
        _url_adapter.validate_python(url)
    except ValidationError as exc:
        reason = exc.errors()[0].get("msg", "Invalid URL")
        raise InvalidUrlError(url, f"Invalid URL: {reason}") from exc

    if not url.startswith(ALLOWED_PREFIX):
        raise SchemeNotAllowedError(
            url, "Only HTTPS URLs are allowed: the URL must start with https://"
        )
    return url


def check_url(url: str) -> UrlValidationError | None:
    """Non-raising form of :func:`validate_url`.

    Returns the rejection, or ``None`` when *url* is acceptable.
    """
    try:
        validate_url(url)
    except UrlValidationError as exc:
        return exc
    return None
