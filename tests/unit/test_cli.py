"""
Unit Tests for the SecurePass CLI
"""

import pytest

from securepass.cli import SecurePassCLI, main

FAST = ["--algorithm", "PBKDF2WithHmacSHA256", "--key-length", "256", "--iterations", "1000"]


@pytest.fixture
def cli():
    """Create a CLI instance."""
    return SecurePassCLI()


def hash_password(cli, capsys, password, *extra):
    assert cli.run(FAST + ["hash", "--password", password] + list(extra)) == 0
    return capsys.readouterr().out.strip().splitlines()


class TestCLI:
    """Test cases for the command line interface."""

    def test_hash_prints_salt_and_key(self, cli, capsys):
        """Test hash prints two base64 lines."""
        lines = hash_password(cli, capsys, "Test_Password")

        assert len(lines) == 2

    def test_verify_success(self, cli, capsys):
        """Test verify accepts the right password."""
        salt, key = hash_password(cli, capsys, "Test_Password")

        code = cli.run(FAST + ["verify", "--password", "Test_Password", "--salt", salt, "--key", key])

        assert code == 0
        assert "SUCCESS" in capsys.readouterr().out

    def test_verify_failure(self, cli, capsys):
        """Test verify rejects the wrong password."""
        salt, key = hash_password(cli, capsys, "Test_Password")

        code = cli.run(FAST + ["verify", "--password", "test_password", "--salt", salt, "--key", key])

        assert code == 1
        assert "FAILED" in capsys.readouterr().out

    def test_encoded_round_trip(self, cli, capsys):
        """Test hash --encoded output verifies with verify --encoded."""
        (encoded,) = hash_password(cli, capsys, "Test_Password", "--encoded")

        assert encoded.startswith("$PBKDF2WithHmacSHA256$1000$64$256$")
        # Embedded parameters win over the defaults
        assert cli.run(["verify", "--password", "Test_Password", "--encoded", encoded]) == 0

    def test_verify_malformed(self, cli, capsys):
        """Test malformed stored text exits with code 2."""
        code = cli.run(FAST + ["verify", "--password", "x", "--salt", "not-valid-base64!!", "--key", "AAAA"])

        assert code == 2
        assert "DecodingError" in capsys.readouterr().err

    def test_verify_missing_record(self, cli, capsys):
        """Test verify without a record exits with code 2."""
        assert cli.run(FAST + ["verify", "--password", "x", "--salt", "AAAA"]) == 2

    def test_verify_encoded_with_salt_and_key(self, cli, capsys):
        """Test --encoded together with --salt or --key exits with code 2."""
        salt, key = hash_password(cli, capsys, "Test_Password")
        (encoded,) = hash_password(cli, capsys, "Test_Password", "--encoded")

        code = cli.run(FAST + ["verify", "--password", "Test_Password", "--encoded", encoded, "--salt", salt])
        assert code == 2
        assert "cannot be combined" in capsys.readouterr().err

        code = cli.run(FAST + ["verify", "--password", "Test_Password", "--encoded", encoded, "--key", key])
        assert code == 2

    def test_oversized_iterations(self, cli, capsys):
        """Test an out of range iteration count exits with code 2."""
        code = cli.run(["--iterations", "18446744073709551616", "hash", "--password", "x"])

        assert code == 2
        assert "InvalidParameterError" in capsys.readouterr().err

    def test_unsupported_algorithm(self, cli, capsys):
        """Test an unknown algorithm exits with code 2."""
        code = cli.run(["--algorithm", "PBKDF2WithHmacMD5", "hash", "--password", "x"])

        assert code == 2
        assert "UnsupportedAlgorithmError" in capsys.readouterr().err

    def test_prompts_for_password(self, cli, capsys, monkeypatch):
        """Test the password is prompted for when not given."""
        monkeypatch.setattr("getpass.getpass", lambda prompt="": "Test_Password")

        assert cli.run(FAST + ["hash"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()

        assert cli.run(FAST + ["verify", "--salt", lines[0], "--key", lines[1]]) == 0

    def test_algorithms(self, cli, capsys):
        """Test listing algorithms."""
        assert cli.run(["algorithms"]) == 0

        out = capsys.readouterr().out.split()
        assert "PBKDF2WithHmacSHA512" in out
        assert "pbkdf2-sha1" in out

    def test_no_command_prints_help(self, cli, capsys):
        """Test running without a command."""
        assert cli.run([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_main_exits_with_code(self):
        """Test main() exits with the run() result."""
        with pytest.raises(SystemExit) as exc_info:
            main(["algorithms"])

        assert exc_info.value.code == 0
