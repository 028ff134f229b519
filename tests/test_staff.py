import pytest

from pizzastore.database_init import db
from pizzastore.menus import orders, staff
from pizzastore.models import User
from pizzastore.util.constant import PERMISSION, USER_ROLE


@pytest.fixture
def manager_ctx(make_ctx):
    def _make(script):
        return make_ctx(script, login="maria", role=USER_ROLE.manager)

    return _make


def test_manager_adds_menu_item(manager_ctx, scalar):
    ctx = manager_ctx("Calzone\ndough,ricotta\nentree\n12.50\nFolded pizza\n")
    assert staff.add_menu_item(ctx)
    assert "Menu item added successfully!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT price FROM Items WHERE itemName = 'Calzone'") == pytest.approx(12.5)
    assert scalar("SELECT typeOfItem FROM Items WHERE itemName = 'Calzone'") == "entree"


def test_add_existing_item_is_rejected(manager_ctx, scalar):
    ctx = manager_ctx("Soda\n")
    assert not staff.add_menu_item(ctx)
    assert "Item already exists!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Items") == 3


def test_add_item_with_bad_price_is_rejected(manager_ctx, scalar):
    ctx = manager_ctx("Calzone\ndough\nentree\ncheap\n")
    assert not staff.add_menu_item(ctx)
    assert "Invalid price!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Items WHERE itemName = 'Calzone'") == 0


@pytest.mark.parametrize("role", [USER_ROLE.customer, USER_ROLE.driver])
def test_menu_management_is_manager_only(make_ctx, scalar, role):
    ctx = make_ctx("Soda\ny\n", login="dave", role=role)
    assert staff.delete_menu_item(ctx) is None
    assert "Access Denied" in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Items WHERE itemName = 'Soda'") == 1


def test_update_item_price(manager_ctx, scalar):
    ctx = manager_ctx("Pepperoni\n3\n10.49\n")
    assert staff.update_menu_item(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Current item details:" in out
    assert scalar("SELECT price FROM Items WHERE itemName = 'Pepperoni'") == pytest.approx(10.49)


def test_update_item_description(manager_ctx, scalar):
    ctx = manager_ctx("Soda\n4\nIce cold\n")
    assert staff.update_menu_item(ctx)
    assert scalar("SELECT description FROM Items WHERE itemName = 'Soda'") == "Ice cold"


def test_update_item_rejects_bad_input(manager_ctx, scalar):
    ctx = manager_ctx("Pizza Pie\n")
    assert not staff.update_menu_item(ctx)
    assert "Item not found!" in ctx.console.stdout.getvalue()

    ctx = manager_ctx("Pepperoni\n3\nfree\n")
    assert not staff.update_menu_item(ctx)
    assert "Invalid price!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT price FROM Items WHERE itemName = 'Pepperoni'") == pytest.approx(9.99)

    ctx = manager_ctx("Pepperoni\n7\n")
    assert not staff.update_menu_item(ctx)
    assert "Invalid choice!" in ctx.console.stdout.getvalue()


def test_delete_referenced_item_declined_keeps_row(manager_ctx, add_order, scalar):
    add_order(1, lines=(("Soda", 1),))
    add_order(2, lines=(("Soda", 3),))
    ctx = manager_ctx("Soda\nn\n")
    assert not staff.delete_menu_item(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Warning: This item is used in 2 orders." in out
    assert "Deletion cancelled." in out
    assert scalar("SELECT COUNT(*) FROM Items WHERE itemName = 'Soda'") == 1


def test_delete_referenced_item_confirmed_removes_row(manager_ctx, add_order, scalar):
    add_order(1, lines=(("Soda", 1),))
    ctx = manager_ctx("Soda\nY\n")
    assert staff.delete_menu_item(ctx)
    assert scalar("SELECT COUNT(*) FROM Items WHERE itemName = 'Soda'") == 0
    assert scalar("SELECT COUNT(*) FROM ItemsInOrder WHERE itemName = 'Soda'") == 1


def test_delete_unreferenced_item_needs_no_confirmation(manager_ctx, scalar):
    ctx = manager_ctx("Margherita\n")
    assert staff.delete_menu_item(ctx)
    assert "Warning" not in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Items WHERE itemName = 'Margherita'") == 0


def test_manager_changes_user_role(manager_ctx, scalar):
    ctx = manager_ctx("alice\n2\n")
    assert staff.update_user_role(ctx)
    assert "alice has been updated to role: driver" in ctx.console.stdout.getvalue()
    assert scalar("SELECT role FROM Users WHERE login = 'alice'") == "driver"


def test_same_role_needs_no_change(manager_ctx):
    ctx = manager_ctx("dave\n2\n")
    assert not staff.update_user_role(ctx)
    assert "User already has this role." in ctx.console.stdout.getvalue()


def test_unknown_user_role_change(manager_ctx):
    ctx = manager_ctx("ghost\n")
    assert not staff.update_user_role(ctx)
    assert "User not found!" in ctx.console.stdout.getvalue()


@pytest.mark.parametrize("role", [USER_ROLE.customer, USER_ROLE.driver])
def test_user_administration_is_manager_only(make_ctx, scalar, role):
    ctx = make_ctx("alice\n3\n", login="dave", role=role)
    staff.update_user_role(ctx)
    assert "Access Denied" in ctx.console.stdout.getvalue()
    assert scalar("SELECT role FROM Users WHERE login = 'alice'") == "customer"


def test_rename_user_moves_orders(manager_ctx, add_order, scalar):
    add_order(1, login="alice")
    ctx = manager_ctx("alice\n1\nalicia\n")
    assert staff.update_user_profile(ctx)
    assert "Username updated successfully from 'alice' to 'alicia'" in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Users WHERE login = 'alice'") == 0
    assert scalar("SELECT login FROM FoodOrder WHERE orderID = 1") == "alicia"


def test_rename_to_taken_login_is_rejected(manager_ctx, scalar):
    ctx = manager_ctx("alice\n1\nbob\n")
    assert not staff.update_user_profile(ctx)
    assert "Username already exists!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Users WHERE login = 'alice'") == 1


def test_admin_updates_phone_and_favorites(manager_ctx, scalar):
    ctx = manager_ctx("bob\n3\n555-9999\n")
    assert staff.update_user_profile(ctx)
    assert scalar("SELECT phoneNum FROM Users WHERE login = 'bob'") == "555-9999"

    ctx = manager_ctx("bob\n4\nPepperoni, Soda\n")
    assert staff.update_user_profile(ctx)
    assert scalar("SELECT favoriteItems FROM Users WHERE login = 'bob'") == "Pepperoni, Soda"


def test_admin_cannot_blank_a_password(manager_ctx, scalar):
    ctx = manager_ctx("bob\n2\n   \n")
    assert not staff.update_user_profile(ctx)
    assert "New password cannot be empty." in ctx.console.stdout.getvalue()
    assert scalar("SELECT password FROM Users WHERE login = 'bob'") == "hunter2"


def test_manager_renaming_themselves_keeps_ordering(manager_ctx, scalar):
    ctx = manager_ctx("maria\n1\nmary\n1\nSoda\n1\ndone\n")
    assert staff.update_user_profile(ctx)
    assert ctx.current_user.login == "mary"
    assert ctx.current_user.role is USER_ROLE.manager

    order = orders.place_order(ctx)
    owner = scalar("SELECT login FROM FoodOrder WHERE orderID = :id", id=order.order_id)
    assert owner == "mary"
    assert scalar("SELECT COUNT(*) FROM Users WHERE login = :login", login=owner) == 1


def test_renaming_another_user_leaves_session_alone(manager_ctx):
    ctx = manager_ctx("alice\n1\nalicia\n")
    assert staff.update_user_profile(ctx)
    assert ctx.current_user.login == "maria"


def test_manager_demoting_themselves_loses_staff_access(manager_ctx, scalar):
    ctx = manager_ctx("maria\n2\n")
    assert staff.update_user_role(ctx)
    assert ctx.current_user.role is USER_ROLE.driver
    assert not ctx.current_user.can(PERMISSION.manage_users)
    assert scalar("SELECT role FROM Users WHERE login = 'maria'") == "driver"


def test_unknown_stored_role_can_be_replaced(manager_ctx, scalar):
    db.session.add(User(login="erin", password="pw", role="admin", phone_num="555-0105"))
    db.session.commit()
    ctx = manager_ctx("erin\n1\n")
    assert staff.update_user_role(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Current role for erin: unknown" in out
    assert scalar("SELECT role FROM Users WHERE login = 'erin'") == "customer"
