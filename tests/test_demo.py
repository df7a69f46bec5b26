"""Tests for the login example form."""

import pytest

from warded import Err, Ok, RequiredFieldIsEmpty, ValidationFailed, fill
from warded.demo import EmailAddress, LoginValues, LogIn, login_form


class TestEmailAddress:
    """Tests for email parsing."""

    def test_parse_valid(self) -> None:
        """Test parsing a valid address."""
        assert EmailAddress.parse("ada@example.com").address == "ada@example.com"

    @pytest.mark.parametrize("value", ["not-an-email", "a@b", "a b@c.d", "@example.com"])
    def test_parse_invalid(self, value: str) -> None:
        """Test rejecting invalid addresses."""
        with pytest.raises(ValueError):
            EmailAddress.parse(value)


class TestLoginForm:
    """Tests for the composed login form."""

    def test_valid_login(self) -> None:
        """Test a complete login."""
        values = LoginValues(email="ada@example.com", password="secret", remember_me=True)

        filled = fill(login_form, values)

        assert filled.result == Ok(
            LogIn(
                email=EmailAddress(address="ada@example.com"),
                password="secret",
                remember_me=True,
            )
        )
        assert filled.is_empty is False

    def test_empty_login(self) -> None:
        """Test an untouched login form."""
        filled = fill(login_form, LoginValues())

        assert filled.result == Err(RequiredFieldIsEmpty(), (RequiredFieldIsEmpty(),))
        assert [f.error for f in filled.fields] == [
            RequiredFieldIsEmpty(),
            RequiredFieldIsEmpty(),
            None,
        ]
        # The checkbox always holds a value.
        assert filled.is_empty is False

    def test_invalid_email(self) -> None:
        """Test that an invalid email is the headline error."""
        filled = fill(login_form, LoginValues(email="nope"))

        assert filled.result == Err(
            ValidationFailed("The e-mail address is invalid"),
            (RequiredFieldIsEmpty(),),
        )

    def test_update_through_descriptor(self) -> None:
        """Test editing a field through its setter."""
        values = LoginValues()

        email = fill(login_form, values).fields[0].state
        updated = email.state.update("ada@example.com")

        assert updated == LoginValues(email="ada@example.com")
        assert values == LoginValues()
