from pizzastore.Form.forms import PasswordForm, PhoneForm, bind_form, field_error
from pizzastore.menus.context import login_required
from pizzastore.service import user_service


@login_required
def view_profile(ctx):
    login = ctx.current_user.login
    profile = user_service.get_profile(ctx.executor, login)
    if profile is None:
        ctx.console.echo("Error: User profile not found.")
        return
    favorite_items, phone_num = profile
    if favorite_items is None or not favorite_items.strip():
        favorite_items = "(empty)"
    console = ctx.console
    console.echo("\n---- Profile Info ----")
    console.echo(f"Username: {login}")
    console.echo(f"Role: {ctx.current_user.role.label}")
    console.echo(f"Phone Number: {phone_num}")
    console.echo(f"Favorite Items: {favorite_items}")


@login_required
def update_password(ctx):
    console = ctx.console
    while True:
        password = console.read_line("Enter your new password: ")
        error = field_error(bind_form(PasswordForm, password=password), "password")
        if error:
            console.echo(f"{error} Please try again.")
            continue
        confirm = console.read_line("Confirm your new password: ")
        form = bind_form(PasswordForm, password=password, confirm_password=confirm)
        error = field_error(form, "confirm_password")
        if error:
            console.echo(f"{error} Please try again.")
            continue
        break
    user_service.update_password(ctx.executor, ctx.current_user.login, password)
    console.echo("Password updated!")


@login_required
def update_phone(ctx):
    console = ctx.console
    while True:
        phone_num = console.read_line("Enter your new phone number: ")
        error = field_error(bind_form(PhoneForm, phone_num=phone_num), "phone_num")
        if not error:
            break
        console.echo(f"{error} Please try again.")
    user_service.update_phone(ctx.executor, ctx.current_user.login, phone_num.strip())
    console.echo("Phone number updated!")


@login_required
def update_favorite_items(ctx):
    favorite_items = ctx.console.read_line("Enter your new favorite items: ")
    user_service.update_favorite_items(
        ctx.executor, ctx.current_user.login, favorite_items.strip()
    )
    ctx.console.echo("Favorite items updated!")
