"""
Integration tests for the Click command-line interface.

Tests:
- list / encrypt / decrypt / matrix / analyze subcommands
- JSON and HTML output
- Exit status 2 on cipher errors
"""

import json

import pytest
from click.testing import CliRunner

from cryptex.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestListCommand:
    """Tests for ``cryptex list``."""

    def test_json(self, runner):
        result = runner.invoke(cli, ["-o", "json", "list"])
        assert result.exit_code == 0
        ids = [d["id"] for d in json.loads(result.output)]
        assert ids == ["caesar", "rot13", "atbash", "vigenere", "playfair", "rail-fence"]

    def test_console(self, runner):
        result = runner.invoke(cli, ["list", "--details"])
        assert result.exit_code == 0
        assert "Available Ciphers" in result.output
        assert "rail-fence" in result.output


class TestTransformCommands:
    """Tests for ``cryptex encrypt`` and ``cryptex decrypt``."""

    def test_encrypt_console(self, runner):
        result = runner.invoke(cli, ["encrypt", "caesar", "Hello, World!", "-k", "3"])
        assert result.exit_code == 0
        assert "Khoor, Zruog!" in result.output

    def test_decrypt_json(self, runner):
        result = runner.invoke(
            cli, ["-o", "json", "decrypt", "vigenere", "Lxfopv ef rnhr", "--key", "LEMON"]
        )
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["result"]["output_text"] == "Attack at dawn"
        assert report["result"]["operation"] == "decrypt"
        assert report["cipher"]["id"] == "vigenere"
        assert "profile" not in report

    def test_profile_flag(self, runner):
        result = runner.invoke(
            cli, ["-o", "json", "encrypt", "rot13", "Hello world", "--profile"]
        )
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["profile"]["letter_count"] == 10

    def test_input_file(self, runner, tmp_path):
        source = tmp_path / "plain.txt"
        source.write_text("WE ARE DISCOVERED. FLEE AT ONCE", encoding="utf-8")
        result = runner.invoke(
            cli, ["-o", "json", "encrypt", "rail-fence", "-i", str(source), "-k", "3"]
        )
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["result"]["output_text"] == "WECRLTEERDSOEEFEAOCAIVDEN"
        assert report["result"]["normalized"] is True

    def test_playfair_shows_matrix(self, runner):
        result = runner.invoke(cli, ["encrypt", "playfair", "INSTRUMENTS", "-k", "MONARCHY"])
        assert result.exit_code == 0
        assert "GATLMZCLRQXA" in result.output
        assert "Playfair Key Square" in result.output

    def test_rail_fence_shows_zigzag(self, runner):
        result = runner.invoke(cli, ["encrypt", "rail-fence", "WEAREDISCOVERED", "-k", "3"])
        assert result.exit_code == 0
        assert "Rail Fence (3 rails)" in result.output

    def test_html_report(self, runner, tmp_path):
        report_path = tmp_path / "report.html"
        result = runner.invoke(
            cli,
            ["-o", "html", "-f", str(report_path), "encrypt", "atbash", "<b>hi</b>"],
        )
        assert result.exit_code == 0
        html = report_path.read_text(encoding="utf-8")
        assert "Atbash Cipher" in html
        assert "&lt;y&gt;sr&lt;/y&gt;" in html

    def test_json_report_file(self, runner, tmp_path):
        report_path = tmp_path / "out" / "report.json"
        result = runner.invoke(
            cli,
            ["-q", "-o", "json", "-f", str(report_path), "encrypt", "caesar", "abc", "-k", "1"],
        )
        assert result.exit_code == 0
        report = json.loads(report_path.read_text(encoding="utf-8"))
        assert report["result"]["output_text"] == "bcd"

    def test_cipher_defaults_to_caesar(self, runner):
        """A lone positional is the text; the cipher comes from config."""
        result = runner.invoke(cli, ["-o", "json", "encrypt", "Hello", "-k", "3"])
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["cipher"]["id"] == "caesar"
        assert report["result"]["output_text"] == "Khoor"

    def test_default_cipher_from_config(self, runner, tmp_path):
        config = tmp_path / "cryptex.toml"
        config.write_text('[cryptex]\ndefault_cipher = "atbash"\n', encoding="utf-8")
        result = runner.invoke(
            cli, ["-c", str(config), "-o", "json", "decrypt", "zyx"]
        )
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["cipher"]["id"] == "atbash"
        assert report["result"]["output_text"] == "abc"

    def test_input_file_without_cipher(self, runner, tmp_path):
        source = tmp_path / "plain.txt"
        source.write_text("abc", encoding="utf-8")
        result = runner.invoke(
            cli, ["-o", "json", "encrypt", "-i", str(source), "-k", "1"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["result"]["output_text"] == "bcd"


class TestErrors:
    """Tests for error reporting and exit status."""

    def test_missing_key_console(self, runner):
        result = runner.invoke(cli, ["encrypt", "vigenere", "hello"])
        assert result.exit_code == 2
        assert "requires a key" in result.output

    def test_missing_key_json(self, runner):
        result = runner.invoke(cli, ["-o", "json", "encrypt", "vigenere", "hello"])
        assert result.exit_code == 2
        assert json.loads(result.output)["error"] == "missing_key"

    def test_invalid_vigenere_key(self, runner):
        result = runner.invoke(cli, ["-o", "json", "encrypt", "vigenere", "hello", "-k", "123"])
        assert result.exit_code == 2
        payload = json.loads(result.output)
        assert payload["error"] == "invalid_key"
        assert payload["message"] == "Invalid key (must contain at least one letter)"

    def test_unknown_cipher(self, runner):
        result = runner.invoke(cli, ["-o", "json", "decrypt", "enigma", "hello"])
        assert result.exit_code == 2
        assert json.loads(result.output)["cipher_id"] == "enigma"

    def test_no_text(self, runner):
        result = runner.invoke(cli, ["encrypt"])
        assert result.exit_code == 2
        assert "Provide TEXT" in result.output


class TestOtherCommands:
    """Tests for ``cryptex matrix`` and ``cryptex analyze``."""

    def test_matrix_json(self, runner):
        result = runner.invoke(cli, ["-o", "json", "matrix", "MONARCHY"])
        assert result.exit_code == 0
        assert json.loads(result.output)["rows"] == [
            "MONAR", "CHYBD", "EFGIK", "LPQST", "UVWXZ",
        ]

    def test_matrix_console(self, runner):
        result = runner.invoke(cli, ["matrix", "MONARCHY"])
        assert result.exit_code == 0
        assert "Playfair Key Square" in result.output

    def test_analyze_json(self, runner, tmp_path):
        source = tmp_path / "cipher.txt"
        source.write_text("Hello world", encoding="utf-8")
        result = runner.invoke(cli, ["-o", "json", "analyze", "-i", str(source)])
        assert result.exit_code == 0
        profile = json.loads(result.output)
        assert profile["letter_count"] == 10
        assert profile["likely_class"] == "insufficient"

    def test_analyze_console(self, runner):
        result = runner.invoke(cli, ["analyze", "Hello world"])
        assert result.exit_code == 0
        assert "Frequency Profile" in result.output
