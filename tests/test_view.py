"""Tests for the view model."""

import pytest

from warded import External, FieldConfig, Form, RequiredFieldIsEmpty, ValidationFailed, succeed
from warded.demo import LoginValues, login_form
from warded.simple import (
    ErrorState,
    ErrorTracking,
    LoadingState,
    SuccessState,
    TextAttributes,
    Validation,
    ViewConfig,
    blur,
    error_to_string,
    idle,
    render,
    submit,
    text_field,
)


@pytest.fixture
def signup_form() -> Form:
    """Username with a server-side error, followed by a plain text field."""

    def text(key: str, label: str, error=lambda values: None) -> Form:
        return text_field(
            FieldConfig(
                parser=lambda value: value,
                value=lambda values: values[key],
                update=lambda new_value, values: {**values, key: new_value},
                error=error,
                attributes=TextAttributes(label=label),
            )
        )

    return (
        succeed(lambda username: lambda bio: (username, bio))
        .append(text("username", "Username", error=lambda values: values.get("server_error")))
        .append(text("bio", "Bio"))
    )


@pytest.fixture
def valid_values() -> LoginValues:
    return LoginValues(email="ada@example.com", password="secret", remember_me=True)


class TestErrorToString:
    """Tests for error messages."""

    def test_messages(self) -> None:
        """Test the message of each error kind."""
        assert error_to_string(RequiredFieldIsEmpty()) == "This field is required"
        assert error_to_string(ValidationFailed("bad")) == "bad"
        assert error_to_string(External("taken")) == "taken"


class TestRender:
    """Tests for render."""

    def test_errors_hidden_before_submit(self) -> None:
        """Test that an untouched form shows no errors."""
        rendered = render(ViewConfig(), login_form, idle(LoginValues()))

        assert [f.label for f in rendered.fields] == ["Email", "Password", "Remember me"]
        assert [f.error for f in rendered.fields] == [None, None, None]
        assert rendered.can_submit is False
        assert rendered.action == "Submit"

    def test_show_all_errors(self) -> None:
        """Test that every error is shown once revealed."""
        model = idle(LoginValues(email="nope")).model_copy(
            update={"error_tracking": ErrorTracking(show_all_errors=True)}
        )

        rendered = render(ViewConfig(), login_form, model)

        assert [f.error for f in rendered.fields] == [
            "The e-mail address is invalid",
            "This field is required",
            None,
        ]

    def test_valid_form_can_submit(self, valid_values) -> None:
        """Test that submission is enabled only for a valid form."""
        rendered = render(ViewConfig(), login_form, idle(valid_values))

        assert rendered.can_submit is True
        assert all(not f.is_disabled for f in rendered.fields)

    def test_loading_disables_fields(self, valid_values) -> None:
        """Test the loading state."""
        model = idle(valid_values).model_copy(update={"state": LoadingState()})

        rendered = render(ViewConfig(loading="Logging in"), login_form, model)

        assert rendered.is_loading is True
        assert rendered.can_submit is False
        assert rendered.action == "Logging in"
        assert all(f.is_disabled for f in rendered.fields)

    def test_external_error_always_shown(self, signup_form) -> None:
        """Test that external errors show before any submit or blur."""
        model = idle({"username": "ada", "bio": "", "server_error": "already taken"})

        rendered = render(ViewConfig(), signup_form, model)

        assert model.error_tracking == ErrorTracking()
        assert [f.label for f in rendered.fields] == ["Username", "Bio"]
        assert [f.error for f in rendered.fields] == ["already taken", None]
        assert rendered.can_submit is False

    def test_external_error_cleared(self, signup_form) -> None:
        """Test that no error shows once the external error is gone."""
        model = idle({"username": "ada", "bio": "", "server_error": None})

        rendered = render(ViewConfig(), signup_form, model)

        assert [f.error for f in rendered.fields] == [None, None]

    @pytest.mark.parametrize("state", [ErrorState(message="boom"), SuccessState(message="done")])
    def test_state_message(self, valid_values, state) -> None:
        """Test that error and success messages are exposed."""
        model = idle(valid_values).model_copy(update={"state": state})

        assert render(ViewConfig(), login_form, model).state_message == state.message


class TestBlur:
    """Tests for blur tracking."""

    def test_blur_reveals_field_error(self) -> None:
        """Test validate-on-blur reveals only the blurred field."""
        config = ViewConfig(validation=Validation.VALIDATE_ON_BLUR)

        model = blur(config, idle(LoginValues(email="nope")), "Email")
        rendered = render(config, login_form, model)

        assert model.error_tracking.show_field_errors == frozenset({"Email"})
        assert [f.error for f in rendered.fields] == ["The e-mail address is invalid", None, None]
        assert all(f.track_blur for f in rendered.fields)

    def test_blur_ignored_on_submit_validation(self) -> None:
        """Test that blur is a no-op under validate-on-submit."""
        model = idle(LoginValues())

        assert blur(ViewConfig(), model, "Email") is model


class TestSubmit:
    """Tests for submit."""

    def test_submit_valid_form(self, valid_values) -> None:
        """Test that a valid form yields its output."""
        outcome = submit(login_form, idle(valid_values))

        assert outcome.submitted is True
        assert outcome.output.email.address == "ada@example.com"
        assert outcome.output.remember_me is True

    def test_submit_invalid_form_reveals_errors(self) -> None:
        """Test that an invalid submit shows every error."""
        outcome = submit(login_form, idle(LoginValues()))

        assert outcome.submitted is False
        assert outcome.output is None
        assert outcome.model.error_tracking.show_all_errors is True

    def test_submit_while_loading(self, valid_values) -> None:
        """Test that a second submit while loading is ignored."""
        model = idle(valid_values).model_copy(update={"state": LoadingState()})

        outcome = submit(login_form, model)

        assert outcome.submitted is False
        assert outcome.model is model
