"""nuri.grammar
The generic syntax of RFC 3986, built bottom-up from composable rule objects.
Each rule compiles down to a regular expression the first time it is matched.
"""

import dataclasses
import enum
import functools
import re

from typing import Callable, Self

MAX_PORT: int = 65535


@dataclasses.dataclass(frozen=True)
class Rule:
    """A grammar production.
    Build bigger rules with `|`, `+`, repeat(), optional() and where().
    The pattern of every Rule is a single regex atom or sequence, so it can be concatenated without extra grouping.
    """

    pattern: str
    constraint: Callable[[str], bool] | None = dataclasses.field(default=None, compare=False)

    @functools.cached_property
    def compiled(self: Self) -> re.Pattern[str]:
        return re.compile(self.pattern)

    def fullmatch(self: Self, data: str) -> bool:
        """True when all of data is produced by this rule.
        The constraint, if any, only applies here; rules composed from this one do not inherit it.
        """
        if self.compiled.fullmatch(data) is None:
            return False
        return self.constraint is None or self.constraint(data)

    def __or__(self: Self, other: "Rule | str") -> "Rule":
        return any_of(self, other)

    def __ror__(self: Self, other: str) -> "Rule":
        return any_of(other, self)

    def __add__(self: Self, other: "Rule | str") -> "Rule":
        return Rule(self.pattern + _as_rule(other).pattern)

    def __radd__(self: Self, other: str) -> "Rule":
        return Rule(_as_rule(other).pattern + self.pattern)

    def repeat(self: Self, minimum: int = 0, maximum: int | None = None) -> "Rule":
        """ABNF `<minimum>*<maximum>rule`"""
        quantifier: str
        if maximum is None:
            quantifier = {0: "*", 1: "+"}.get(minimum, f"{{{minimum},}}")
        elif minimum == maximum:
            quantifier = f"{{{minimum}}}"
        else:
            quantifier = f"{{{minimum},{maximum}}}"
        return Rule(f"(?:{self.pattern}){quantifier}")

    def optional(self: Self) -> "Rule":
        """ABNF `[ rule ]`"""
        return Rule(f"(?:{self.pattern})?")

    def where(self: Self, predicate: Callable[[str], bool]) -> "Rule":
        return dataclasses.replace(self, constraint=predicate)


def literal(text: str) -> Rule:
    return Rule(re.escape(text))


def one_of(chars: str) -> Rule:
    return Rule("[" + "".join(map(re.escape, chars)) + "]")


def any_of(*rules: Rule | str) -> Rule:
    """ABNF alternation"""
    return Rule("(?:" + "|".join(_as_rule(r).pattern for r in rules) + ")")


def _as_rule(value: Rule | str) -> Rule:
    if isinstance(value, Rule):
        return value
    return literal(value)


# ALPHA = %x41-5A / %x61-7A
ALPHA: Rule = Rule(r"[A-Za-z]")

# DIGIT = %x30-39
DIGIT: Rule = Rule(r"[0-9]")

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
HEXDIG: Rule = DIGIT | Rule(r"[A-Fa-f]")

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED: Rule = ALPHA | DIGIT | one_of("-._~")

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS: Rule = one_of("!$&'()*+,;=")

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
GEN_DELIMS: Rule = one_of(":/?#[]@")

# reserved = gen-delims / sub-delims
RESERVED: Rule = GEN_DELIMS | SUB_DELIMS

# pct-encoded = "%" HEXDIG HEXDIG
PCT_ENCODED: Rule = literal("%") + HEXDIG + HEXDIG

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
PCHAR: Rule = UNRESERVED | PCT_ENCODED | SUB_DELIMS | one_of(":@")

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME: Rule = ALPHA + (ALPHA | DIGIT | one_of("+-.")).repeat()

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO: Rule = (UNRESERVED | PCT_ENCODED | SUB_DELIMS | ":").repeat()

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME: Rule = (UNRESERVED | PCT_ENCODED | SUB_DELIMS).repeat()

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
DEC_OCTET: Rule = any_of(
    DIGIT,
    Rule(r"[1-9]") + DIGIT,
    "1" + DIGIT.repeat(2, 2),
    "2" + Rule(r"[0-4]") + DIGIT,
    "25" + Rule(r"[0-5]"),
)

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4ADDRESS: Rule = DEC_OCTET + "." + DEC_OCTET + "." + DEC_OCTET + "." + DEC_OCTET

# h16 = 1*4HEXDIG
H16: Rule = HEXDIG.repeat(1, 4)

# ls32 = ( h16 ":" h16 ) / IPv4address
LS32: Rule = (H16 + ":" + H16) | IPV4ADDRESS

_H16_COLON: Rule = H16 + ":"

# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"
IPV6ADDRESS: Rule = any_of(
                                                       _H16_COLON.repeat(6, 6) + LS32,
                                                 "::" + _H16_COLON.repeat(5, 5) + LS32,
                                H16.optional() + "::" + _H16_COLON.repeat(4, 4) + LS32,
    (_H16_COLON.repeat(0, 1) + H16).optional() + "::" + _H16_COLON.repeat(3, 3) + LS32,
    (_H16_COLON.repeat(0, 2) + H16).optional() + "::" + _H16_COLON.repeat(2, 2) + LS32,
    (_H16_COLON.repeat(0, 3) + H16).optional() + "::" + _H16_COLON + LS32,
    (_H16_COLON.repeat(0, 4) + H16).optional() + "::" + LS32,
    (_H16_COLON.repeat(0, 5) + H16).optional() + "::" + H16,
    (_H16_COLON.repeat(0, 6) + H16).optional() + "::",
)

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
# (ABNF string literals are case-insensitive, so "V" is accepted too)
IPVFUTURE: Rule = one_of("vV") + HEXDIG.repeat(1) + "." + (UNRESERVED | SUB_DELIMS | ":").repeat(1)

# IP-literal = "[" ( IPv6address / IPvFuture ) "]"
IP_LITERAL: Rule = "[" + (IPV6ADDRESS | IPVFUTURE) + "]"

_DOTTED_DECIMAL: Rule = DIGIT.repeat(1) + ("." + DIGIT.repeat(1)).repeat(3, 3)


def _unambiguous_host(host: str) -> bool:
    # reg-name would otherwise accept malformed IPv4 addresses.
    if _DOTTED_DECIMAL.fullmatch(host):
        return IPV4ADDRESS.fullmatch(host)
    return True


# host = IP-literal / IPv4address / reg-name
HOST: Rule = (IP_LITERAL | IPV4ADDRESS | REG_NAME).where(_unambiguous_host)


def _in_port_range(digits: str) -> bool:
    significant: str = digits.lstrip("0")
    return len(significant) <= len(str(MAX_PORT)) and 1 <= int(significant or "0") <= MAX_PORT


# port = *DIGIT
# Only 1-65535 name a port. An empty port is handled by the caller as "no port".
PORT: Rule = DIGIT.repeat(1).where(_in_port_range)

# segment = *pchar
SEGMENT: Rule = PCHAR.repeat()

# segment-nz = 1*pchar
SEGMENT_NZ: Rule = PCHAR.repeat(1)

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
SEGMENT_NZ_NC: Rule = (UNRESERVED | PCT_ENCODED | SUB_DELIMS | "@").repeat(1)

# path-abempty = *( "/" segment )
PATH_ABEMPTY: Rule = ("/" + SEGMENT).repeat()

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
PATH_ABSOLUTE: Rule = "/" + (SEGMENT_NZ + ("/" + SEGMENT).repeat()).optional()

# path-noscheme = segment-nz-nc *( "/" segment )
PATH_NOSCHEME: Rule = SEGMENT_NZ_NC + ("/" + SEGMENT).repeat()

# path-rootless = segment-nz *( "/" segment )
PATH_ROOTLESS: Rule = SEGMENT_NZ + ("/" + SEGMENT).repeat()

# path-empty = 0<pchar>
PATH_EMPTY: Rule = Rule("")

# query = *( pchar / "/" / "?" )
QUERY: Rule = (PCHAR | one_of("/?")).repeat()

# fragment = *( pchar / "/" / "?" )
FRAGMENT: Rule = (PCHAR | one_of("/?")).repeat()


class PathKind(enum.Enum):
    ABEMPTY = "path-abempty"
    ABSOLUTE = "path-absolute"
    NOSCHEME = "path-noscheme"
    ROOTLESS = "path-rootless"
    EMPTY = "path-empty"

    @property
    def rule(self: Self) -> Rule:
        return _PATH_RULES[self]


_PATH_RULES: dict[PathKind, Rule] = {
    PathKind.ABEMPTY: PATH_ABEMPTY,
    PathKind.ABSOLUTE: PATH_ABSOLUTE,
    PathKind.NOSCHEME: PATH_NOSCHEME,
    PathKind.ROOTLESS: PATH_ROOTLESS,
    PathKind.EMPTY: PATH_EMPTY,
}


def path_kind(path: str, *, scheme: bool, authority: bool) -> PathKind:
    """Pick the one path production that applies, given what precedes the path.
    hier-part and relative-part from RFC 3986 section 3 and 4.2.
    """
    if authority:
        return PathKind.ABEMPTY
    if len(path) == 0:
        return PathKind.EMPTY
    if path.startswith("/"):
        return PathKind.ABSOLUTE
    if scheme:
        return PathKind.ROOTLESS
    return PathKind.NOSCHEME


class HostKind(enum.Enum):
    IPV6 = "IPv6address"
    IPVFUTURE = "IPvFuture"
    IPV4 = "IPv4address"
    REG_NAME = "reg-name"


def host_kind(host: str) -> HostKind | None:
    """Which of the host alternatives produced host, or None if none did."""
    if not HOST.fullmatch(host):
        return None
    if host.startswith("["):
        return HostKind.IPV6 if IPV6ADDRESS.fullmatch(host[1:-1]) else HostKind.IPVFUTURE
    if IPV4ADDRESS.fullmatch(host):
        return HostKind.IPV4
    return HostKind.REG_NAME
