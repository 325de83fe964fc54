import logging

import pytest

from nuri import errors
from nuri.split import Components
from nuri.validate import (
    validate_components,
    validate_fragment,
    validate_host,
    validate_path,
    validate_port,
    validate_query,
    validate_scheme,
    validate_userinfo,
)


@pytest.mark.parametrize(
    "validator",
    [validate_scheme, validate_userinfo, validate_host, validate_port, validate_path, validate_query, validate_fragment],
)
def test_empty_is_always_accepted(validator):
    assert validator("") == ""


@pytest.mark.parametrize(
    "validator,data,error",
    [
        (validate_scheme, "1http", errors.InvalidScheme),
        (validate_userinfo, "a b", errors.InvalidUserInformation),
        (validate_host, "999.1.1.1", errors.InvalidHost),
        (validate_port, "0", errors.InvalidPort),
        (validate_path, "a b", errors.InvalidPath),
        (validate_query, "a#b", errors.InvalidQuery),
        (validate_fragment, "a#b", errors.InvalidFragment),
    ],
)
def test_rejection_is_typed(validator, data, error):
    with pytest.raises(error) as info:
        validator(data)
    assert info.value.value == data
    assert error.component in str(info.value)
    assert isinstance(info.value, ValueError)


def test_validate_host_encodes_non_ascii():
    assert validate_host("bücher.de") == "b%C3%BCcher.de"
    assert validate_host("[::1]") == "[::1]"


def test_validate_path_uses_context():
    with pytest.raises(errors.InvalidPath, match="path-noscheme"):
        validate_path("a:b")
    assert validate_path("a:b", scheme=True) == "a:b"
    with pytest.raises(errors.InvalidPath, match="path-abempty"):
        validate_path("a", authority=True)
    with pytest.raises(errors.InvalidPath, match="path-absolute"):
        validate_path("//a")
    assert validate_path("//a", authority=True) == "//a"


def test_validate_components_returns_stored_form():
    assert validate_components(Components("http", "u", "bücher.de", "80", "/", "q", "f")) == Components(
        "http", "u", "b%C3%BCcher.de", "80", "/", "q", "f"
    )


@pytest.mark.parametrize(
    "components,error",
    [
        (Components(scheme="1x", host="999.1.1.1"), errors.InvalidScheme),
        (Components(userinfo="a b", host="999.1.1.1"), errors.InvalidUserInformation),
        (Components(userinfo="u"), errors.MissingHostForUserInformation),
        (Components(userinfo="u", host="999.1.1.1"), errors.InvalidHost),
        (Components(port="80"), errors.MissingHostForPort),
        (Components(port="0"), errors.InvalidPort),
        (Components(host="h", port="65536"), errors.InvalidPort),
        (Components(host="h", port="1", path="a"), errors.InvalidPath),
        (Components(path="a b", query="a b"), errors.InvalidPath),
        (Components(query="a b", fragment="a b"), errors.InvalidQuery),
        (Components(fragment="a b"), errors.InvalidFragment),
    ],
)
def test_validate_components_fails_on_first_invalid(components, error):
    with pytest.raises(error):
        validate_components(components)


def test_validate_components_empty_authority():
    assert validate_components(Components(path="//a"), authority=True) == Components(path="//a")
    with pytest.raises(errors.MissingHostForPort):
        validate_components(Components(port="80"), authority=True)


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="nuri.validate"):
        with pytest.raises(errors.InvalidPort):
            validate_port("65536")
    assert "rejected port" in caplog.text


def test_validate_host_rejects_lone_surrogates():
    with pytest.raises(errors.InvalidHost) as info:
        validate_host("b\udcfccher.de")
    assert isinstance(info.value.__cause__, UnicodeEncodeError)


@pytest.mark.parametrize(
    "validator", [validate_scheme, validate_userinfo, validate_port, validate_query, validate_fragment]
)
def test_validators_are_named(validator):
    assert validator.__name__.startswith("validate_")
