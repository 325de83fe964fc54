"""nuri.errors
Exceptions raised when a URI-reference or one of its components does not conform to RFC 3986.
"""

from typing import Self


class URIError(ValueError):
    """Base class for every rejection. Subclasses ValueError so callers can keep catching that."""

    component: str = "URI"
    reason: str = "invalid"

    def __init__(self: Self, value: str = "", message: str | None = None) -> None:
        self.value: str = value
        if message is None:
            message = f"{self.reason} {self.component}: {value!r}"
        super().__init__(message)


class InvalidScheme(URIError):
    component = "scheme"


class InvalidUserInformation(URIError):
    component = "user information"


class MissingHostForUserInformation(URIError):
    component = "host"

    def __init__(self: Self, value: str = "") -> None:
        super().__init__(value, f"user information {value!r} set without a host")


class InvalidHost(URIError):
    component = "host"


class InvalidPort(URIError):
    component = "port"


class MissingHostForPort(URIError):
    component = "host"

    def __init__(self: Self, value: str = "") -> None:
        super().__init__(value, f"port {value!r} set without a host")


class InvalidPath(URIError):
    component = "path"


class InvalidQuery(URIError):
    component = "query"


class InvalidFragment(URIError):
    component = "fragment"


class UnparsableURI(URIError):
    """The splitter could not decompose the input at all."""

    reason = "unparsable"
