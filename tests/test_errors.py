import pytest

from nuri import errors


@pytest.mark.parametrize(
    "error",
    [
        errors.InvalidScheme,
        errors.InvalidUserInformation,
        errors.MissingHostForUserInformation,
        errors.InvalidHost,
        errors.InvalidPort,
        errors.MissingHostForPort,
        errors.InvalidPath,
        errors.InvalidQuery,
        errors.InvalidFragment,
        errors.UnparsableURI,
    ],
)
def test_taxonomy(error):
    assert issubclass(error, errors.URIError)
    assert issubclass(error, ValueError)


def test_messages_name_the_component():
    assert str(errors.InvalidHost("x y")) == "invalid host: 'x y'"
    assert str(errors.InvalidUserInformation("a b")) == "invalid user information: 'a b'"
    assert str(errors.MissingHostForPort("80")) == "port '80' set without a host"
    assert str(errors.MissingHostForUserInformation("u")) == "user information 'u' set without a host"
    assert str(errors.UnparsableURI("x")) == "unparsable URI: 'x'"


def test_custom_message():
    error = errors.InvalidPath("a", "custom")
    assert str(error) == "custom"
    assert error.value == "a"
