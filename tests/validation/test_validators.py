import pytest

from fluentsql.validation import (
    InvalidArgumentError,
    NullArgumentError,
    RegexValidator,
    require_object,
    require_text,
)
from fluentsql.validation.validators import is_simple_expression, strip_quotes


def test_require_text():
    assert require_text(" a ", "Name") == " a "
    for value in (None, "", "   ", 5):
        with pytest.raises(InvalidArgumentError) as excinfo:
            require_text(value, "Name")
        assert excinfo.value.argument == "Name"


def test_require_object_distinguishes_missing_from_wrong_type():
    with pytest.raises(NullArgumentError):
        require_object(None, dict, "Parameters")
    with pytest.raises(InvalidArgumentError) as excinfo:
        require_object([], dict, "Parameters")
    assert not isinstance(excinfo.value, NullArgumentError)


def test_regex_validator_messages():
    validator = RegexValidator(r"\d+", "{argument} argument '{value}' should be digits.")
    validator("123", argument="Count")
    with pytest.raises(InvalidArgumentError, match="Count argument 'x1' should be digits."):
        validator("x1", argument="Count")
    search = RegexValidator(r"\d", "{argument} needs a digit.", search=True)
    search("x1", argument="Value")


def test_errors_are_value_errors():
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(NullArgumentError, InvalidArgumentError)


def test_expression_helpers():
    assert is_simple_expression("o.amount")
    assert not is_simple_expression("a.b.c")
    assert strip_quotes(' "a" ') == "a"
    assert strip_quotes(None) is None
