"""Tests for the localefmt command-line interface."""

import pytest
import yaml
from typer.testing import CliRunner

from localefmt.cli import app
from localefmt.locales import unregister_locale


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def swiss_file(tmp_path):
    """Locale file inheriting from de-de."""
    path = tmp_path / "de-ch.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "id": "de-ch",
                "base": "de-de",
                "name": "Deutsch (Schweiz)",
                "number": {"symbols": {"decimal": ".", "group": "'"}},
            },
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    yield path
    unregister_locale("de-ch")


# =============================================================================
# Formatting Commands
# =============================================================================


class TestNumberCommand:
    """Tests for the number command."""

    def test_default_locale(self, runner):
        """Test formatting with the default locale."""
        result = runner.invoke(app, ["number", "1234.5678"])
        assert result.exit_code == 0
        assert result.output.strip() == "1,234.568"

    def test_fraction_and_locale(self, runner):
        """Test the fraction and locale options."""
        result = runner.invoke(app, ["number", "1234567.1", "-f", "2", "-l", "de-de"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.234.567,10"

    def test_not_a_number(self, runner):
        """Test non-numbers exit with an error."""
        result = runner.invoke(app, ["number", "abc"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCurrencyCommand:
    """Tests for the currency command."""

    def test_symbol(self, runner):
        """Test a custom symbol."""
        result = runner.invoke(app, ["currency", "1234.5678", "--symbol", "USD$"])
        assert result.exit_code == 0
        assert result.output.strip() == "USD$1,234.57"

    def test_locale(self, runner):
        """Test locale currency patterns."""
        result = runner.invoke(app, ["currency", "1234567.5", "--locale", "en-in"])
        assert result.exit_code == 0
        assert result.output.strip() == "₹ 12,34,567.50"


class TestDateCommand:
    """Tests for the date command."""

    def test_pattern(self, runner):
        """Test a token pattern."""
        result = runner.invoke(
            app, ["date", "2003-09-10T13:02:03Z", "--pattern", "yyyy-MM-dd HH:mm Z"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2003-09-10 13:02 +0000"

    def test_preset_and_locale(self, runner):
        """Test a preset in another locale."""
        result = runner.invoke(
            app, ["date", "2010-09-03T12:05:08", "-p", "longDate", "-l", "es-es"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "3 de septiembre de 2010"

    def test_invalid(self, runner):
        """Test invalid dates exit with an error."""
        result = runner.invoke(app, ["date", "yesterday"])
        assert result.exit_code == 1
        assert "Invalid date" in result.output


class TestParseCommand:
    """Tests for the parse command."""

    def test_offset_kept(self, runner):
        """Test the parsed instant and offset are shown."""
        result = runner.invoke(app, ["parse", "20030910T033203-0930"])
        assert result.exit_code == 0
        assert "2003-09-10T03:32:03.000-09:30" in result.output
        assert "Timestamp: 1063198923000 ms" in result.output
        assert "Offset: -570 min" in result.output

    def test_invalid(self, runner):
        """Test invalid input exits with an error."""
        result = runner.invoke(app, ["parse", "2003-02-30"])
        assert result.exit_code == 1
        assert "Error" in result.output


# =============================================================================
# Locales
# =============================================================================


class TestLocales:
    """Tests for locale listing and locale files."""

    def test_list(self, runner):
        """Test built-in locales are listed."""
        result = runner.invoke(app, ["locales"])
        assert result.exit_code == 0
        assert "en-us" in result.output
        assert "de-de" in result.output

    def test_locale_file(self, runner, swiss_file):
        """Test a locale file is registered before the command runs."""
        result = runner.invoke(
            app, ["--locale-file", str(swiss_file), "number", "1234.5", "-l", "de-ch"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "1'234.5"

    def test_bad_locale_file(self, runner, tmp_path):
        """Test a broken locale file exits with an error."""
        path = tmp_path / "broken.yaml"
        path.write_text("name: no id", encoding="utf-8")
        result = runner.invoke(app, ["--locale-file", str(path), "locales"])
        assert result.exit_code == 1
        assert "missing 'id'" in result.output

    def test_scalar_section_in_locale_file(self, runner, tmp_path):
        """Test a scalar section exits with an error instead of a traceback."""
        path = tmp_path / "scalar.yaml"
        path.write_text("id: xx\nnumber: 5\n", encoding="utf-8")
        result = runner.invoke(app, ["--locale-file", str(path), "locales"])
        assert result.exit_code == 1
        assert "'number' must be a mapping" in result.output
