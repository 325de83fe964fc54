__version__ = "0.1"

from .codec import decode, encode, quote, unquote
from .errors import InvalidFragment, InvalidHost, InvalidPath, InvalidPort, InvalidQuery, InvalidScheme, InvalidUserInformation, MissingHostForPort, MissingHostForUserInformation, UnparsableURI, URIError
from .grammar import HostKind, PathKind
from .split import Components, split
from .uri import URI, parse
