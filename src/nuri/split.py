"""nuri.split
Decompose a URI-reference into its seven raw components without judging their grammar.
"""

import logging
import re

from typing import NamedTuple

from .errors import UnparsableURI

logger = logging.getLogger(__name__)


class Components(NamedTuple):
    """The seven raw substrings of a URI-reference, delimiters removed. An empty string means absent."""

    scheme: str = ""
    userinfo: str = ""
    host: str = ""
    port: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""


# RFC 3986 appendix B, with named groups.
_REFERENCE_PAT: re.Pattern[str] = re.compile(
    r"""\A
    (?:(?P<scheme>[^:/?\#]+):)?
    (?://(?P<authority>[^/?\#]*))?
    (?P<path>[^?\#]*)
    (?:\?(?P<query>[^\#]*))?
    (?:\#(?P<fragment>.*))?
    \Z""",
    re.VERBOSE | re.DOTALL,
)


def split_authority(authority: str) -> tuple[str, str, str]:
    """userinfo@host:port -> (userinfo, host, port)
    Splits on the last "@", then on the last ":" that is not inside an IP-literal.
    """
    userinfo, _, hostport = authority.rpartition("@")
    colon: int = hostport.rfind(":")
    if colon == -1 or colon < hostport.rfind("]"):
        return userinfo, hostport, ""
    return userinfo, hostport[:colon], hostport[colon + 1 :]


def split_reference(data: str) -> tuple[Components, bool]:
    """Like split, but also reports whether an authority ("//") was present, even an empty one."""
    m: re.Match[str] | None = _REFERENCE_PAT.match(data)
    if m is None:
        raise UnparsableURI(data)

    authority: str | None = m["authority"]
    userinfo: str
    host: str
    port: str
    userinfo, host, port = split_authority(authority) if authority is not None else ("", "", "")

    components: Components = Components(
        scheme=m["scheme"] or "",
        userinfo=userinfo,
        host=host,
        port=port,
        path=m["path"],
        query=m["query"] or "",
        fragment=m["fragment"] or "",
    )
    logger.debug("split %r into %r", data, components)
    return components, authority is not None


def split(data: str) -> Components:
    """Always succeeds for str input; grammar is checked by nuri.validate."""
    return split_reference(data)[0]
