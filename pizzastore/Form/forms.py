from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, PasswordField, DecimalField
from wtforms.validators import DataRequired, EqualTo, Length, NumberRange, Optional

from pizzastore.util.constant import MAX_LOGIN_LENGTH


class RegisterForm(Form):
    login = StringField(
        "Username",
        validators=[
            DataRequired(message="Username cannot be empty."),
            Length(
                max=MAX_LOGIN_LENGTH,
                message=f"Username cannot be over {MAX_LOGIN_LENGTH} characters.",
            ),
        ],
    )
    password = PasswordField(
        "Password", validators=[DataRequired(message="Password cannot be empty.")]
    )
    confirm_password = PasswordField(
        "Confirm password",
        validators=[EqualTo("password", message="The passwords do not match.")],
    )
    phone_num = StringField(
        "Phone number",
        validators=[DataRequired(message="Phone number cannot be empty.")],
    )


class PasswordForm(Form):
    password = PasswordField(
        "New password",
        validators=[DataRequired(message="New password cannot be empty.")],
    )
    confirm_password = PasswordField(
        "Confirm new password",
        validators=[EqualTo("password", message="The passwords do not match.")],
    )


class PhoneForm(Form):
    phone_num = StringField(
        "Phone number",
        validators=[DataRequired(message="New phone number cannot be empty.")],
    )


class MenuItemForm(Form):
    item_name = StringField(
        "Item name",
        validators=[
            DataRequired(message="Item name cannot be empty."),
            Length(max=50, message="Item name cannot be over 50 characters."),
        ],
    )
    ingredients = StringField("Ingredients", validators=[Optional()])
    type_of_item = StringField("Type of item", validators=[Optional()])
    price = DecimalField(
        "Price",
        places=2,
        validators=[NumberRange(min=0, message="Price cannot be negative.")],
    )
    description = StringField("Description", validators=[Optional()])


class PriceForm(Form):
    price = DecimalField(
        "Price",
        places=2,
        validators=[NumberRange(min=0, message="Price cannot be negative.")],
    )


def bind_form(form_class, **values):
    """Build a form from console answers as if they were posted fields."""
    return form_class(formdata=MultiDict(values))


def field_error(form, name):
    """Validate one field and return its first error message, or None."""
    field = form[name]
    if field.validate(form):
        return None
    return field.errors[0]
