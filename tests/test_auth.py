from pizzastore.database_init import db
from pizzastore.menus import auth
from pizzastore.menus.dispatcher import run_menus
from pizzastore.models import User
from pizzastore.service import user_service
from pizzastore.util.constant import USER_ROLE


def test_create_user_rejects_existing_login(executor, scalar):
    assert not user_service.create_user(executor, "alice", "other", "999")
    assert scalar("SELECT COUNT(*) FROM Users") == 4
    assert scalar("SELECT password FROM Users WHERE login = 'alice'") == "secret"


def test_create_user_inserts_customer(executor, scalar):
    assert user_service.create_user(executor, "zoe", "pw", "555-0199")
    assert scalar("SELECT role FROM Users WHERE login = 'zoe'") == "customer"
    assert scalar("SELECT favoriteItems FROM Users WHERE login = 'zoe'") is None


def test_authenticate_requires_exact_match(executor):
    user = user_service.authenticate(executor, "alice", "secret")
    assert user.login == "alice"
    assert user.role is USER_ROLE.customer
    assert user_service.authenticate(executor, "Alice", "secret") is None
    assert user_service.authenticate(executor, "alice", "SECRET") is None
    assert user_service.authenticate(executor, "alice", "secre") is None
    assert user_service.authenticate(executor, "nobody", "secret") is None


def test_authenticate_reads_role_once(executor):
    assert user_service.authenticate(executor, "maria", "boss").role is USER_ROLE.manager
    assert user_service.authenticate(executor, "dave", "drive").role is USER_ROLE.driver


def test_register_flow(make_ctx, scalar):
    ctx = make_ctx("newbie\npw\npw\n555-0000\n")
    assert auth.create_user(ctx)
    assert "User created successfully!" in ctx.console.stdout.getvalue()
    assert scalar("SELECT phoneNum FROM Users WHERE login = 'newbie'") == "555-0000"


def test_register_reprompts_on_invalid_login(make_ctx, scalar):
    script = "\n" + "x" * 51 + "\nalice\nnewbie\npw\npw\n555\n"
    ctx = make_ctx(script)
    assert auth.create_user(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Username cannot be empty." in out
    assert "Username cannot be over 50 characters." in out
    assert "Username already exists!" in out
    assert scalar("SELECT COUNT(*) FROM Users") == 5


def test_register_reprompts_on_password_mismatch(make_ctx, scalar):
    ctx = make_ctx("newbie\n\npw\nnope\npw\npw\n\n555\n")
    assert auth.create_user(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Password cannot be empty." in out
    assert "The passwords do not match." in out
    assert "Phone number cannot be empty." in out
    assert scalar("SELECT password FROM Users WHERE login = 'newbie'") == "pw"


def test_register_exit_aborts(make_ctx, scalar):
    ctx = make_ctx("newbie\nEXIT\n")
    assert not auth.create_user(ctx)
    assert "Returning to main menu..." in ctx.console.stdout.getvalue()
    assert scalar("SELECT COUNT(*) FROM Users WHERE login = 'newbie'") == 0


def test_log_in_retries_until_credentials_match(make_ctx):
    ctx = make_ctx("alice\nwrong\nalice\nsecret\n")
    user = auth.log_in(ctx)
    assert user.login == "alice"
    assert ctx.current_user is user
    out = ctx.console.stdout.getvalue()
    assert "Invalid username or password. Please try again." in out
    assert "Login successful! Welcome, alice" in out


def test_log_in_can_be_abandoned(make_ctx):
    ctx = make_ctx("alice\nwrong\nexit\n")
    assert auth.log_in(ctx) is None
    assert ctx.current_user is None


def _add_user_with_role(login, role):
    db.session.add(User(login=login, password="pw", role=role, phone_num="555-0105"))
    db.session.commit()


def test_unknown_stored_role_logs_in_as_customer(executor):
    _add_user_with_role("erin", "admin")
    user = user_service.authenticate(executor, "erin", "pw")
    assert user.login == "erin"
    assert user.role is USER_ROLE.customer
    assert user_service.get_role(executor, "erin") is None


def test_unknown_stored_role_does_not_end_the_session(make_ctx):
    _add_user_with_role("erin", "admin")
    ctx = make_ctx("2\nerin\npw\n9\n20\n9\n")
    run_menus(ctx)
    out = ctx.console.stdout.getvalue()
    assert "Login successful! Welcome, erin" in out
    assert "Access" not in out.split("Welcome, erin")[1]
    assert "Unrecognized choice!" in out
