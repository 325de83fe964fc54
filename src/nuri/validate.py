"""nuri.validate
One validator per URI component, plus the ordered pass that checks all seven together.
"""

import logging

from . import grammar
from .codec import encode_non_ascii
from .errors import (
    InvalidFragment,
    InvalidHost,
    InvalidPath,
    InvalidPort,
    InvalidQuery,
    InvalidScheme,
    InvalidUserInformation,
    MissingHostForPort,
    MissingHostForUserInformation,
    URIError,
)
from .split import Components

logger = logging.getLogger(__name__)


def _reject(error: URIError) -> URIError:
    logger.debug("rejected %s: %s", error.component, error)
    return error


def _check(data: str, rule: grammar.Rule, error: type[URIError]) -> str:
    if len(data) > 0 and not rule.fullmatch(data):
        raise _reject(error(data))
    return data


def validate_scheme(data: str) -> str:
    return _check(data, grammar.SCHEME, InvalidScheme)


def validate_userinfo(data: str) -> str:
    """Checks the raw, still percent-encoded form."""
    return _check(data, grammar.USERINFO, InvalidUserInformation)


def validate_port(data: str) -> str:
    return _check(data, grammar.PORT, InvalidPort)


def validate_query(data: str) -> str:
    return _check(data, grammar.QUERY, InvalidQuery)


def validate_fragment(data: str) -> str:
    return _check(data, grammar.FRAGMENT, InvalidFragment)


def validate_host(data: str) -> str:
    """Returns the host with any non-ASCII characters percent-encoded."""
    try:
        encoded: str = encode_non_ascii(data)
    except UnicodeEncodeError as error:
        # lone surrogates, e.g. from os.fsdecode
        raise _reject(InvalidHost(data)) from error
    if len(encoded) > 0 and not grammar.HOST.fullmatch(encoded):
        raise _reject(InvalidHost(data))
    return encoded


def validate_path(data: str, *, scheme: bool = False, authority: bool = False) -> str:
    """Checks data against the single path production that applies in context."""
    kind: grammar.PathKind = grammar.path_kind(data, scheme=scheme, authority=authority)
    if not kind.rule.fullmatch(data):
        raise _reject(InvalidPath(data, f"invalid path: {data!r} is not a valid {kind.value}"))
    return data


def validate_components(components: Components, *, authority: bool = False) -> Components:
    """Validate all seven components in order: scheme, userinfo, host, port, path, query, fragment.
    The first invalid component raises; nothing after it is looked at.
    authority says an authority was present ("//") even if it turned out empty.
    Returns the components as they should be stored (the host may gain percent-encodings).
    """
    has_authority: bool = authority

    scheme: str = validate_scheme(components.scheme)

    userinfo: str = validate_userinfo(components.userinfo)
    if len(userinfo) > 0:
        has_authority = True

    host: str = validate_host(components.host)
    if len(host) == 0:
        if len(userinfo) > 0:
            raise _reject(MissingHostForUserInformation(userinfo))
    else:
        has_authority = True

    # No default port is filled in when this is empty.
    port: str = validate_port(components.port)
    if len(port) > 0 and len(host) == 0:
        raise _reject(MissingHostForPort(port))

    path: str = validate_path(components.path, scheme=len(scheme) > 0, authority=has_authority)
    query: str = validate_query(components.query)
    fragment: str = validate_fragment(components.fragment)

    return Components(scheme, userinfo, host, port, path, query, fragment)
