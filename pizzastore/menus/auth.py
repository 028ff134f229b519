import logging

from pizzastore.Form.forms import RegisterForm, bind_form, field_error
from pizzastore.service import user_service
from pizzastore.util.constant import EXIT_KEYWORD

logger = logging.getLogger("auth_logger")


class _Abort(Exception):
    """User typed the exit keyword."""


def _ask(ctx, prompt):
    answer = ctx.console.read_line(prompt)
    if answer.strip().lower() == EXIT_KEYWORD:
        raise _Abort()
    return answer


def _ask_login(ctx):
    while True:
        login = _ask(ctx, "Please enter a username! (Maximum 50 characters)")
        error = field_error(bind_form(RegisterForm, login=login), "login")
        if error:
            ctx.console.echo(f"{error} Please try again.")
        elif user_service.login_exists(ctx.executor, login):
            ctx.console.echo("Username already exists! Please choose a different one.")
        else:
            return login


def _ask_password(ctx):
    while True:
        password = _ask(ctx, "Enter a password: ")
        error = field_error(bind_form(RegisterForm, password=password), "password")
        if error:
            ctx.console.echo(f"{error} Please try again.")
            continue
        confirm = _ask(ctx, "Confirm your password: ")
        form = bind_form(RegisterForm, password=password, confirm_password=confirm)
        error = field_error(form, "confirm_password")
        if error:
            ctx.console.echo(f"{error} Please try again.")
            continue
        return password


def _ask_phone(ctx):
    while True:
        phone_num = _ask(ctx, "Enter your phone number: ")
        error = field_error(bind_form(RegisterForm, phone_num=phone_num), "phone_num")
        if error:
            ctx.console.echo(f"{error} Please try again.")
        else:
            return phone_num.strip()


def create_user(ctx):
    console = ctx.console
    console.echo("\n---- Create User ----")
    console.echo(f"At any prompt, type '{EXIT_KEYWORD}' to return to main menu\n")
    try:
        login = _ask_login(ctx)
        password = _ask_password(ctx)
        phone_num = _ask_phone(ctx)
    except _Abort:
        console.echo("Returning to main menu...")
        return False

    if not user_service.create_user(ctx.executor, login, password, phone_num):
        console.echo("Error: This username already exists. Please choose another.")
        return False
    console.echo("User created successfully!")
    console.echo("Tip: After reviewing our menu, you can add your favorite items to your profile")
    console.echo("by selecting the 'Update Profile' option from the main menu.")
    return True


def log_in(ctx):
    """Prompt until the credentials match; None when the user backs out."""
    console = ctx.console
    console.echo(f"(Type '{EXIT_KEYWORD}' or leave the username empty to go back)")
    while True:
        login = console.read_line("Username: ")
        if not login.strip() or login.strip().lower() == EXIT_KEYWORD:
            console.echo("Returning to main menu...")
            return None
        password = console.read_line("Password: ")
        user = user_service.authenticate(ctx.executor, login, password)
        if user is not None:
            console.echo(f"Login successful! Welcome, {user.login}")
            ctx.current_user = user
            return user
        console.echo("Invalid username or password. Please try again.")
