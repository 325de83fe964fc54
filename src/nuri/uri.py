"""nuri.uri
The URI value: seven validated components and what can be derived from them.
"""

import copy
import dataclasses

from typing import Self

from . import grammar
from .codec import unquote
from .split import Components, split_reference
from .validate import validate_components


@dataclasses.dataclass(frozen=True, eq=False)
class URI:
    """A validated URI-reference. Construct with URI.parse or URI.from_components; URI() is the empty reference.
    The raw_* fields hold components exactly as they appear in the reference (percent-encodings intact),
    with an empty string meaning the component is absent.
    Every construction validates; there is no way to change one component of an existing URI.
    """

    raw_scheme: str = ""
    raw_userinfo: str = ""
    raw_host: str = ""
    raw_port: str = ""
    raw_path: str = ""
    raw_query: str = ""
    raw_fragment: str = ""
    explicit_authority: bool = False

    def __post_init__(self: Self) -> None:
        validated: Components = validate_components(
            Components(
                self.raw_scheme,
                self.raw_userinfo,
                self.raw_host,
                self.raw_port,
                self.raw_path,
                self.raw_query,
                self.raw_fragment,
            ),
            authority=self.explicit_authority,
        )
        object.__setattr__(self, "raw_host", validated.host)

    @classmethod
    def parse(cls: type[Self], data: str) -> Self:
        """Parse a URI-reference, e.g. "https://user@example.com:8080/a?q#f" or "../a/b".
        Raises a nuri.errors.URIError subclass naming the first invalid component.
        """
        components: Components
        authority: bool
        components, authority = split_reference(data)
        return cls(*components, explicit_authority=authority)

    @classmethod
    def from_components(
        cls: type[Self],
        scheme: str = "",
        userinfo: str = "",
        host: str = "",
        port: str = "",
        path: str = "",
        query: str = "",
        fragment: str = "",
        *,
        authority: bool = False,
    ) -> Self:
        """Build a URI from already-split components.
        A delimiter that is not itself legal in its component may be left attached:
        "http:", "user@", ":8080" and "#top" are accepted. (A leading "?" is legal query text, so it is kept.)
        A bare ":" is not a port and is rejected.
        authority=True marks an authority that is present but empty, as in "file:///etc".
        """
        return cls(
            raw_scheme=scheme.removesuffix(":"),
            raw_userinfo=userinfo.removesuffix("@"),
            raw_host=host,
            raw_port=port[1:] if port.startswith(":") and len(port) > 1 else port,
            raw_path=path,
            raw_query=query,
            raw_fragment=fragment.removeprefix("#"),
            explicit_authority=authority,
        )

    def copy(self: Self) -> Self:
        return copy.copy(self)

    @property
    def scheme(self: Self) -> str:
        return self.raw_scheme

    @property
    def canonical_scheme(self: Self) -> str:
        """Schemes are case-insensitive; this is the lowercase form used for comparison."""
        return self.raw_scheme.lower()

    @property
    def userinfo(self: Self) -> str:
        return unquote(self.raw_userinfo)

    def raw_user_information(self: Self, include_password: bool = True) -> str:
        if include_password:
            return self.raw_userinfo
        return self.raw_userinfo.partition(":")[0]

    @property
    def username(self: Self) -> str:
        return unquote(self.raw_user_information(include_password=False))

    @property
    def password(self: Self) -> str | None:
        _, colon, password = self.raw_userinfo.partition(":")
        if len(colon) == 0:
            return None
        return unquote(password)

    @property
    def host(self: Self) -> str:
        return unquote(self.raw_host)

    @property
    def host_kind(self: Self) -> grammar.HostKind | None:
        if len(self.raw_host) == 0:
            return None
        return grammar.host_kind(self.raw_host)

    @property
    def port(self: Self) -> str:
        return self.raw_port

    @property
    def port_number(self: Self) -> int | None:
        if len(self.raw_port) > 0:
            return int(self.raw_port, base=10)
        return None

    @property
    def path(self: Self) -> str:
        return unquote(self.raw_path)

    @property
    def path_kind(self: Self) -> grammar.PathKind:
        return grammar.path_kind(self.raw_path, scheme=len(self.raw_scheme) > 0, authority=self.has_authority)

    @property
    def query(self: Self) -> str:
        return unquote(self.raw_query)

    @property
    def fragment(self: Self) -> str:
        return unquote(self.raw_fragment)

    @property
    def has_authority(self: Self) -> bool:
        return self.explicit_authority or len(self.raw_host) > 0

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        if not self.has_authority:
            return None
        result: str = ""
        if len(self.raw_userinfo) > 0:
            result += f"{self.raw_userinfo}@"
        result += self.raw_host
        if len(self.raw_port) > 0:
            result += f":{self.raw_port}"
        return result

    @property
    def is_absolute(self: Self) -> bool:
        # A fragment makes a reference neither absolute nor relative.
        return len(self.raw_scheme) > 0 and len(self.raw_fragment) == 0

    @property
    def is_relative(self: Self) -> bool:
        return len(self.raw_scheme) == 0 and len(self.raw_fragment) == 0

    def serialize(self: Self) -> str:
        """Component recomposition from RFC 3986 section 5.3"""
        result: str = ""
        if len(self.raw_scheme) > 0:
            result += f"{self.raw_scheme}:"
        if self.authority is not None:
            result += f"//{self.authority}"
        result += self.raw_path
        if len(self.raw_query) > 0:
            result += f"?{self.raw_query}"
        if len(self.raw_fragment) > 0:
            result += f"#{self.raw_fragment}"
        return result

    __str__ = serialize

    def _key(self: Self) -> tuple[str | bool, ...]:
        return (
            self.canonical_scheme,
            self.raw_userinfo,
            self.raw_host,
            self.raw_port,
            self.raw_path,
            self.raw_query,
            self.raw_fragment,
            self.has_authority,
        )

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self: Self) -> int:
        return hash(self._key())


def parse(data: str) -> URI:
    """RFC 3986 URI-reference parser. Same as URI.parse."""
    return URI.parse(data)
