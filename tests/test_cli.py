import pytest
from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def test_sell_and_checkout():
    # Sell, 2 hamburgers, checkout, quit.
    result = runner.invoke(app, [], input="1\n0\n2\n5\n2\n")
    assert result.exit_code == 0
    assert "Rebel Food Truck Inventory Sales Program" in result.output
    assert "Quantity Available" in result.output
    assert "Order Total: $ 10.50" in result.output


def test_empty_chili_rejects_selection():
    # Set chili to 0, return, sell chili, checkout, quit.
    result = runner.invoke(app, [], input="0\n4\n0\n5\n1\n4\n5\n2\n")
    assert result.exit_code == 0
    assert "0 oz" in result.output
    assert "Invalid input, please enter an item with quantity available or update inventory." in result.output
    assert "Order Total: $ 0.00" in result.output


def test_low_stock_warning_is_printed():
    result = runner.invoke(app, [], input="1\n2\n65\n5\n2\n")
    assert result.exit_code == 0
    assert "Warning: Hotdog bun inventory low. Please restock soon." in result.output
    assert "Order Total: $ 341.25" in result.output


def test_quantity_above_max_reprompts():
    result = runner.invoke(app, [], input="1\n0\n80\n1\n5\n2\n")
    assert result.exit_code == 0
    assert "Exceeded quantity of hamburgers available (75). Please enter a valid quantity." in result.output
    assert "Order Total: $ 5.25" in result.output


def test_end_of_input_exits_cleanly():
    result = runner.invoke(app, [], input="1\n")
    assert result.exit_code == 0


def test_config_file(tmp_path):
    path = tmp_path / "truck.yaml"
    path.write_text("truck:\n  name: Night Truck\nstarting_inventory:\n  hamburger_bun: 3\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(path)], input="1\n0\n3\n5\n2\n")
    assert result.exit_code == 0
    assert "Night Truck Inventory Sales Program" in result.output
    assert "Warning: Hamburger bun inventory low. Please restock soon." in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1
    assert "Config error" in result.output


def test_summary_on_quit():
    result = runner.invoke(app, [], input="0\n0\n150\n5\n1\n1\n3\n5\n2\n")
    assert result.exit_code == 0
    assert "Orders" in result.output
    assert "Restocks" in result.output
    assert "Chiliburger Sold" in result.output
    assert "$ 22.05" in result.output


@pytest.mark.parametrize(
    "text",
    [
        "truck: [unclosed\n",
        "truck: Night\n",
        "- chili\n",
        "starting_inventory:\n  - chili\n",
        "sales_tax_rate: [0.05]\n",
        "starting_inventory:\n  hamburger_bun: true\n",
    ],
)
def test_invalid_config_reports_error(tmp_path, text):
    path = tmp_path / "truck.yaml"
    path.write_text(text, encoding="utf-8")
    result = runner.invoke(app, ["--config", str(path)])
    assert result.exit_code == 1
    assert "Config error" in result.output


def test_log_level_choices():
    assert runner.invoke(app, ["--log-level", "verbose"]).exit_code == 2
    assert runner.invoke(app, ["--log-level", "info"], input="2\n").exit_code == 0
