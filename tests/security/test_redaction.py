from fluentsql.security import REDACTED_VALUE, redact_parameters, redact_value
from fluentsql.security.redaction import is_sensitive_key


def test_sensitive_names_are_redacted():
    assert is_sensitive_key(":password")
    assert is_sensitive_key(":Api_Token")
    assert is_sensitive_key("user_secret")
    assert not is_sensitive_key(":classname")
    assert not is_sensitive_key(":where_condition_1")


def test_sensitive_values_are_redacted():
    assert redact_value("Bearer abc.def") == REDACTED_VALUE
    assert redact_value(b"password=hunter2") == REDACTED_VALUE
    assert redact_value("plain") == "plain"
    assert redact_value(42, key=":pwd") == REDACTED_VALUE


def test_redact_parameters_returns_copy():
    parameters = {":name": "Ada", ":password": "hunter2"}
    redacted = redact_parameters(parameters)
    assert redacted == {":name": "Ada", ":password": REDACTED_VALUE}
    assert parameters[":password"] == "hunter2"
