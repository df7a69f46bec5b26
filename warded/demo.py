"""Login form used by the CLI and as a usage example.

The form is defined once and filled on every values change:

    filled = fill(login_form, LoginValues(email="me@example.com", password="x"))
"""

import re

from pydantic import BaseModel, ConfigDict

from warded.base import FieldConfig, Form, succeed
from warded.simple.fields import (
    CheckboxAttributes,
    TextAttributes,
    checkbox_field,
    email_field,
    password_field,
)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class LoginValues(BaseModel):
    """Raw inputs of the login form."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    password: str = ""
    remember_me: bool = False


class EmailAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str

    @classmethod
    def parse(cls, value: str) -> "EmailAddress":
        """Parse an email address.

        Raises:
            ValueError: If ``value`` is not a valid email address.
        """
        if not EMAIL_PATTERN.match(value):
            raise ValueError("The e-mail address is invalid")
        return cls(address=value)


class LogIn(BaseModel):
    """Validated login request."""

    model_config = ConfigDict(frozen=True)

    email: EmailAddress
    password: str
    remember_me: bool


def identity(value):
    return value


email_input = email_field(
    FieldConfig(
        parser=EmailAddress.parse,
        value=lambda values: values.email,
        update=lambda new_value, values: values.model_copy(update={"email": new_value}),
        attributes=TextAttributes(label="Email", placeholder="some@email.com"),
    )
)

password_input = password_field(
    FieldConfig(
        parser=identity,
        value=lambda values: values.password,
        update=lambda new_value, values: values.model_copy(update={"password": new_value}),
        attributes=TextAttributes(label="Password", placeholder="Your password"),
    )
)

remember_me_input = checkbox_field(
    FieldConfig(
        parser=identity,
        value=lambda values: values.remember_me,
        update=lambda new_value, values: values.model_copy(update={"remember_me": new_value}),
        attributes=CheckboxAttributes(text="Remember me"),
    )
)

login_form: Form = (
    succeed(
        lambda email: lambda password: lambda remember_me: LogIn(
            email=email, password=password, remember_me=remember_me
        )
    )
    .append(email_input)
    .append(password_input)
    .append(remember_me_input)
)
