from pizzastore.Form.forms import (
    MenuItemForm,
    PasswordForm,
    PhoneForm,
    PriceForm,
    RegisterForm,
    bind_form,
    field_error,
)
from pizzastore.menus.context import requires
from pizzastore.service import item_service, user_service
from pizzastore.service.user_service import CurrentUser
from pizzastore.util.constant import ITEM_FIELDS, PERMISSION, USER_FIELDS, USER_ROLE


@requires(PERMISSION.manage_menu)
def add_menu_item(ctx):
    console = ctx.console
    console.echo("\n---- Add New Menu Item ----")
    item_name = console.read_line("Enter item name: ", nl=False).strip()
    error = field_error(bind_form(MenuItemForm, item_name=item_name), "item_name")
    if error:
        console.echo(error)
        return False
    if item_service.item_exists(ctx.executor, item_name):
        console.echo("Item already exists! Please use update option instead.")
        return False

    ingredients = console.read_line("Enter ingredients (comma separated): ", nl=False).strip()
    type_of_item = console.read_line(
        "Enter type of item (e.g., pizza, drink, dessert): ", nl=False
    ).strip()
    price = console.read_line("Enter price: ", nl=False).strip()
    form = bind_form(MenuItemForm, item_name=item_name, price=price)
    error = field_error(form, "price")
    if error:
        console.echo(f"Invalid price! {error}")
        return False
    description = console.read_line("Enter description: ", nl=False).strip()

    if not item_service.add_item(
        ctx.executor, item_name, ingredients, type_of_item, form.price.data, description
    ):
        console.echo("Item already exists! Please use update option instead.")
        return False
    console.echo("Menu item added successfully!")
    return True


@requires(PERMISSION.manage_menu)
def update_menu_item(ctx):
    console = ctx.console
    console.echo("\n---- Update Menu Item ----")
    item_name = console.read_line("Enter item name to update: ", nl=False).strip()
    if not item_service.item_exists(ctx.executor, item_name):
        console.echo("Item not found!")
        return False

    console.echo("\nCurrent item details:")
    item_service.print_item(ctx.executor, item_name)

    console.echo("\nSelect field to update:")
    for choice, (_column, label) in ITEM_FIELDS.items():
        console.echo(f"{choice}. {label}")
    choice = console.read_choice()
    if choice not in ITEM_FIELDS:
        console.echo("Invalid choice!")
        return False

    column, label = ITEM_FIELDS[choice]
    value = console.read_line(f"Enter new {label.lower()}: ", nl=False).strip()
    if column == "price":
        form = bind_form(PriceForm, price=value)
        error = field_error(form, "price")
        if error:
            console.echo(f"Invalid price! {error}")
            return False
        value = form.price.data

    item_service.update_item_field(ctx.executor, item_name, choice, value)
    console.echo("Menu item updated successfully!")
    return True


@requires(PERMISSION.manage_menu)
def delete_menu_item(ctx):
    console = ctx.console
    console.echo("\n---- Delete Menu Item ----")
    item_name = console.read_line("Enter item name to delete: ", nl=False).strip()
    if not item_service.item_exists(ctx.executor, item_name):
        console.echo("Item not found!")
        return False

    order_count = item_service.count_item_references(ctx.executor, item_name)
    if order_count > 0:
        console.echo(f"Warning: This item is used in {order_count} orders.")
        if not console.confirm(
            "Deleting this item will affect order history. Continue? (y/n): "
        ):
            console.echo("Deletion cancelled.")
            return False

    item_service.delete_item(ctx.executor, item_name)
    console.echo("Menu item deleted successfully!")
    return True


@requires(PERMISSION.manage_users)
def update_user_role(ctx):
    console = ctx.console
    console.echo("\n---- Update User Role ----")
    login = console.read_line("Enter username to change role: ", nl=False).strip()
    if not user_service.login_exists(ctx.executor, login):
        console.echo("User not found!")
        return False
    current = user_service.get_role(ctx.executor, login)
    current_name = current.name if current is not None else "unknown"
    console.echo(f"Current role for {login}: {current_name}")

    console.echo("Select new role:")
    for role in USER_ROLE:
        console.echo(f"{role.choice}. {role.label}")
    role = USER_ROLE.from_choice(console.read_choice())
    if role is None:
        console.echo("Invalid choice!")
        return False
    if role is current:
        console.echo("User already has this role. No change needed.")
        return False

    user_service.update_role(ctx.executor, login, role)
    if ctx.current_user.login == login:
        ctx.current_user = CurrentUser(login, role)
    console.echo(f"{login} has been updated to role: {role.name}")
    return True


@requires(PERMISSION.manage_users)
def update_user_profile(ctx):
    console = ctx.console
    console.echo("\n---- Update User Profile ----")
    login = console.read_line("Enter username to update profile: ", nl=False).strip()
    if not user_service.login_exists(ctx.executor, login):
        console.echo("User not found!")
        return False

    console.echo("\nCurrent user details:")
    user_service.print_user(ctx.executor, login)

    console.echo("\nSelect field to update:")
    console.echo("1. Username")
    for choice, (_column, label) in USER_FIELDS.items():
        console.echo(f"{choice}. {label}")
    console.echo("5. Go Back")
    choice = console.read_choice()

    if choice == 1:
        new_login = console.read_line("Enter new username: ", nl=False).strip()
        error = field_error(bind_form(RegisterForm, login=new_login), "login")
        if error:
            console.echo(error)
            return False
        if not user_service.rename_user(ctx.executor, login, new_login):
            console.echo("Username already exists! Please choose a different username.")
            return False
        if ctx.current_user.login == login:
            ctx.current_user = CurrentUser(new_login, ctx.current_user.role)
        console.echo(f"Username updated successfully from '{login}' to '{new_login}'")
        return True
    if choice == 5:
        return False
    if choice not in USER_FIELDS:
        console.echo("Invalid choice!")
        return False

    column, label = USER_FIELDS[choice]
    value = console.read_line(f"Enter new {label.lower()}: ", nl=False).strip()
    if column == "password":
        error = field_error(bind_form(PasswordForm, password=value), "password")
    elif column == "phoneNum":
        error = field_error(bind_form(PhoneForm, phone_num=value), "phone_num")
    else:
        error = None
    if error:
        console.echo(error)
        return False
    user_service.update_user_field(ctx.executor, login, choice, value)
    console.echo(f"{label} updated successfully for user: {login}")
    return True
