"""Tests for the click CLI, run against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {
        "STOREFRONT_DATA_DIR": str(tmp_path),
        "STOREFRONT_OWNER": "owner",
        "STOREFRONT_CALLER": None,
        "STOREFRONT_REFUND_WINDOW_TICKS": None,
    }

    def _run(*args):
        return runner.invoke(cli, list(args), env=env)

    return _run


class TestProductCommands:

    def test_add_and_show(self, run):
        result = run("product", "add", "--name", "Widget", "--quantity", "10")
        assert result.exit_code == 0, result.output
        assert "Product #0 'Widget' stocked with 10" in result.output

        result = run("product", "show", "--name", "Widget")
        assert result.exit_code == 0
        assert "Quantity: 10" in result.output

    def test_list(self, run):
        run("product", "add", "--name", "Widget", "--quantity", "10")
        run("product", "add", "--name", "Gadget", "--quantity", "1")

        result = run("product", "list")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "Gadget" in result.output

    def test_list_empty(self, run):
        result = run("product", "list")
        assert "No products found." in result.output

    def test_non_owner_add_fails(self, run):
        result = run("--as", "client1", "product", "add", "--name", "W", "--quantity", "1")
        assert result.exit_code == 1
        assert "Unauthorized account: client1" in result.output

    def test_show_unknown_product_fails(self, run):
        result = run("product", "show", "--id", "3")
        assert result.exit_code == 1
        assert "This product does not exist!" in result.output

    def test_show_requires_exactly_one_key(self, run):
        result = run("product", "show")
        assert result.exit_code == 2

    def test_update(self, run):
        run("product", "add", "--name", "Widget", "--quantity", "10")
        result = run("product", "update", "--id", "0", "--quantity", "0")
        assert result.exit_code == 0
        assert "quantity set to 0" in result.output


class TestPurchaseCommands:

    def test_buy_refund_cycle(self, run):
        run("product", "add", "--name", "Widget", "--quantity", "10")

        result = run("--as", "client1", "purchase", "buy", "--id", "0")
        assert result.exit_code == 0, result.output
        assert "'client1' bought product #0" in result.output

        result = run("product", "buyers", "--id", "0")
        assert result.output.strip() == "client1"

        result = run("--as", "client1", "purchase", "refund", "--id", "0")
        assert result.exit_code == 0
        assert "refunded" in result.output

    def test_refund_after_mining_past_window_fails(self, run):
        run("product", "add", "--name", "Widget", "--quantity", "10")
        run("--as", "client1", "purchase", "buy", "--id", "0")

        result = run("chain", "mine", "--blocks", "101")
        assert "now at block 101" in result.output

        result = run("--as", "client1", "purchase", "refund", "--id", "0")
        assert result.exit_code == 1
        assert "Sorry, your request for refund has been denied." in result.output


class TestPolicyAndOwnerCommands:

    def test_policy_show_and_set(self, run):
        assert "100 blocks" in run("policy", "show").output

        result = run("policy", "set", "--window", "0")
        assert result.exit_code == 0
        assert "Refund window: 0 blocks" in run("policy", "show").output

    def test_non_owner_cannot_set_policy(self, run):
        result = run("--as", "client1", "policy", "set", "--window", "0")
        assert result.exit_code == 1

    def test_owner_transfer(self, run):
        assert run("owner", "show").output.strip() == "owner"
        result = run("owner", "transfer", "--to", "alice")
        assert result.exit_code == 0
        assert run("owner", "show").output.strip() == "alice"

    def test_chain_tick(self, run):
        assert run("chain", "tick").output.strip() == "0"
