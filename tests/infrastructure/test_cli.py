"""End-to-end CLI tests with the backend replaced by in-memory fakes."""

import pytest
from click.testing import CliRunner

from insuite.application.auth_gateway import AuthGateway
from insuite.application.session_store import SessionStore
from insuite.domain.exceptions import ConfigurationError
from insuite.infrastructure import bootstrap
from insuite.infrastructure.cli import (
    account_commands,
    auth_commands,
    dashboard_commands,
    gate,
    inventory_commands,
    main,
    sales_commands,
)
from insuite.infrastructure.config import Settings
from tests.fakes import (
    FakeIdentityProvider,
    FakeInventoryRepository,
    FakeSalesRepository,
    make_session,
)


class Backend:

    def __init__(self, session=None):
        self.provider = FakeIdentityProvider(accounts={"alice@example.com": "pw"}, session=session)
        self.store = SessionStore(self.provider)
        self.store.start()
        self.gateway = AuthGateway(self.provider, self.store, "https://x/cb")
        self.inventory = FakeInventoryRepository()
        self.sales = FakeSalesRepository()
        self.settings = Settings()


def _install(monkeypatch, backend):
    for module in (gate, account_commands):
        monkeypatch.setattr(module, "session_store", lambda: backend.store)
    monkeypatch.setattr(auth_commands, "auth_gateway", lambda: backend.gateway)
    for module in (inventory_commands, sales_commands, dashboard_commands, account_commands):
        monkeypatch.setattr(module, "inventory_repository", lambda: backend.inventory)
    for module in (sales_commands, dashboard_commands, account_commands):
        monkeypatch.setattr(module, "sales_repository", lambda: backend.sales)
    for module in (main, sales_commands):
        monkeypatch.setattr(module, "settings", lambda: backend.settings)
    monkeypatch.setattr(main, "shutdown", lambda: None)


@pytest.fixture
def signed_in(monkeypatch):
    backend = Backend(session=make_session())
    _install(monkeypatch, backend)
    return backend


@pytest.fixture
def signed_out(monkeypatch):
    backend = Backend()
    _install(monkeypatch, backend)
    return backend


def invoke(*args, input=None):
    return CliRunner().invoke(main.cli, list(args), input=input)


def _stock():
    invoke("inventory", "add", "--name", "Widget", "--quantity", "10",
           "--price", "5.00", "--cost", "2.00")


class TestGate:

    @pytest.mark.parametrize("command", [
        ["dashboard"],
        ["inventory", "list"],
        ["sales", "list"],
        ["account", "show"],
    ])
    def test_protected_commands_require_login(self, signed_out, command):
        result = invoke(*command)
        assert result.exit_code == 1
        assert "Please log in first." in result.output
        assert signed_out.inventory.total_calls == 0
        assert signed_out.sales.total_calls == 0


class TestAuthCommands:

    def test_login(self, signed_out):
        result = invoke("login", "--email", "alice@example.com", "--password", "pw")
        assert result.exit_code == 0
        assert "Logged in as alice@example.com" in result.output
        assert signed_out.store.is_authenticated

    def test_login_failure(self, signed_out):
        result = invoke("login", "--email", "alice@example.com", "--password", "bad")
        assert result.exit_code == 1
        assert "Invalid login credentials" in result.output

    def test_register_pending_confirmation(self, signed_out):
        signed_out.provider.sign_up_error = "Error sending confirmation email"
        result = invoke("register", "--email", "new@example.com", "--password", "pw")
        assert result.exit_code == 0
        assert "check your email" in result.output

    def test_logout(self, signed_in):
        result = invoke("logout")
        assert result.exit_code == 0
        assert not signed_in.store.is_authenticated

    def test_whoami(self, signed_in):
        assert invoke("whoami").output.strip() == "alice@example.com"

    def test_whoami_signed_out(self, signed_out):
        assert "Not logged in." in invoke("whoami").output


class TestInventoryCommands:

    def test_add_and_list(self, signed_in):
        result = invoke(
            "inventory", "add", "--name", "Widget", "--quantity", "10",
            "--price", "5.00", "--cost", "2.00",
        )
        assert result.exit_code == 0, result.output
        assert "Item #1 'Widget' added" in result.output

        listing = invoke("inventory", "list")
        assert "Widget" in listing.output
        assert "$5.00" in listing.output

    def test_empty_list(self, signed_in):
        assert "No inventory records found." in invoke("inventory", "list").output

    def test_update_keeps_unspecified_fields(self, signed_in):
        invoke("inventory", "add", "--name", "Widget", "--quantity", "10",
               "--price", "5.00", "--cost", "2.00")
        result = invoke("inventory", "update", "--id", "1", "--quantity", "4")
        assert result.exit_code == 0, result.output
        item = signed_in.inventory.get(1)
        assert item.quantity == 4
        assert item.product_name == "Widget"

    def test_update_needs_a_change(self, signed_in):
        result = invoke("inventory", "update", "--id", "1")
        assert result.exit_code == 2

    def test_delete_failure_reported(self, signed_in):
        signed_in.inventory.fail_on("delete", "foreign key violation")
        result = invoke("inventory", "delete", "--id", "1")
        assert result.exit_code == 1
        assert "Failed to delete item: foreign key violation" in result.output


class TestSalesAndDashboard:

    def test_sale_updates_dashboard(self, signed_in):
        _stock()
        result = invoke("sales", "add", "--product-id", "1", "--quantity", "3")
        assert result.exit_code == 0, result.output
        assert signed_in.inventory.get(1).quantity == 7

        dashboard = invoke("dashboard").output
        assert "$15.00" in dashboard
        assert "$13.00" in dashboard

    def test_oversell_rejected(self, signed_in):
        _stock()
        result = invoke("sales", "add", "--product-id", "1", "--quantity", "11")
        assert result.exit_code == 1
        assert "Quantity exceeds available inventory." in result.output
        assert signed_in.sales.count() == 0

    def test_list_shows_product_names(self, signed_in):
        _stock()
        invoke("sales", "add", "--product-id", "1", "--quantity", "2")
        listing = invoke("sales", "list").output
        assert "Widget" in listing
        assert "$10.00" in listing

    def test_products(self, signed_in):
        _stock()
        assert "Widget - $5.00 (Available: 10)" in invoke("sales", "products").output


class TestAccountCommands:

    def test_show(self, signed_in):
        assert "Email: alice@example.com" in invoke("account", "show").output

    def test_reset_asks_for_confirmation(self, signed_in):
        _stock()
        result = invoke("account", "reset", input="n\n")
        assert result.exit_code == 1
        assert signed_in.inventory.get(1) is not None

    def test_reset(self, signed_in):
        _stock()
        result = invoke("account", "reset", "--yes")
        assert result.exit_code == 0
        assert "All data has been successfully reset." in result.output
        assert signed_in.inventory.get(1) is None


class TestMissingConfiguration:

    @pytest.fixture(autouse=True)
    def unconfigured(self, monkeypatch, tmp_path):
        for name in ("SUPABASE_URL", "SUPABASE_KEY", "SUPABASE_ANON_KEY"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("INSUITE_SESSION_FILE", str(tmp_path / "session.json"))
        self._reset_bootstrap()
        yield
        self._reset_bootstrap()

    @staticmethod
    def _reset_bootstrap():
        bootstrap.settings.cache_clear()
        bootstrap.client.cache_clear()
        bootstrap.identity_provider.cache_clear()
        bootstrap.shutdown()

    @pytest.mark.parametrize("command", [
        ["inventory", "list"],
        ["dashboard"],
        ["whoami"],
        ["logout"],
    ])
    def test_reported_as_message(self, command):
        result = invoke(*command)
        assert result.exit_code == 1
        assert not isinstance(result.exception, ConfigurationError)
        assert "SUPABASE_URL and SUPABASE_KEY must be set" in result.output
