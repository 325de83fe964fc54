import pytest

from nuri import codec

UNRESERVED = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"


def test_encode_leaves_unreserved_alone():
    assert codec.encode(UNRESERVED) == UNRESERVED.decode("ascii")


def test_encode_everything_else_as_uppercase_triplets():
    for octet in range(256):
        if octet in UNRESERVED:
            continue
        assert codec.encode(bytes([octet])) == f"%{octet:02X}"
    assert codec.encode(b"a b/\xff") == "a%20b%2F%FF"
    assert codec.encode(b"") == ""


def test_decode_inverts_encode():
    data = bytes(range(256)) * 2
    assert codec.decode(codec.encode(data)) == data


@pytest.mark.parametrize(
    "data,expected",
    [
        ("%41%42", b"AB"),
        ("a%2fb", b"a/b"),
        ("a%2Fb", b"a/b"),
        ("plain", b"plain"),
        ("", b""),
        ("é", "é".encode("utf-8")),
    ],
)
def test_decode(data, expected):
    assert codec.decode(data) == expected


@pytest.mark.parametrize(
    "data,expected",
    [
        ("100%", b"100"),
        ("%", b""),
        ("%4", b"4"),
        ("a%4", b"a4"),
        ("%zz", b"zz"),
        ("%%41", b"A"),
        ("50%off", b"50off"),
    ],
)
def test_decode_drops_stray_percent(data, expected):
    assert codec.decode(data) == expected


def test_quote_and_unquote():
    assert codec.quote("a b/ü") == "a%20b%2F%C3%BC"
    assert codec.unquote("%C3%BC") == "ü"
    assert codec.unquote("%FC", encoding="latin-1") == "ü"
    assert codec.unquote("%FF") == "\ufffd"
    with pytest.raises(UnicodeDecodeError):
        codec.unquote("%FF", errors="strict")


def test_encode_non_ascii():
    assert codec.encode_non_ascii("bücher.de") == "b%C3%BCcher.de"
    assert codec.encode_non_ascii("a b%") == "a b%"


def test_decode_passes_lone_surrogates_through():
    assert codec.decode("a\udcfc") == b"a" + "\udcfc".encode("utf-8", "surrogatepass")
    assert codec.decode("%41\udcfc%42") == b"A\xed\xb3\xbcB"


def test_quote_keeps_only_unreserved():
    assert codec.quote("a/b:c?d=e~f") == "a%2Fb%3Ac%3Fd%3De~f"
    assert "unreserved" in codec.quote.__doc__
