"""
Tests for the command-line wrapper.
"""
import pytest

from totp_core.base32 import ALPHABET
from totp_core.otp_cli import build_parser, main


class TestSecretCommand:

    def test_prints_secret(self, capsys):
        assert main(["secret", "--length", "20"]) == 0
        secret = capsys.readouterr().out.strip()
        assert len(secret) == 20
        assert set(secret) <= set(ALPHABET)

    def test_length_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("TOTP_SECRET_LENGTH", "24")
        assert main(["secret"]) == 0
        assert len(capsys.readouterr().out.strip()) == 24

    def test_bad_length_reports_error(self, capsys):
        assert main(["secret", "--length", "9"]) == 2
        assert capsys.readouterr().err.startswith("[!]")


class TestCodeCommand:

    def test_prints_code(self, capsys, rfc_secret):
        assert main(["code", "--secret", rfc_secret, "--timestamp", "59", "--digits", "8"]) == 0
        out = capsys.readouterr().out
        assert "94287082" in out

    def test_secret_from_environment(self, capsys, monkeypatch, rfc_secret):
        monkeypatch.setenv("TOTP_SECRET", rfc_secret)
        assert main(["code", "--timestamp", "30"]) == 0
        assert "287082" in capsys.readouterr().out

    def test_missing_secret(self, capsys):
        assert main(["code"]) == 2
        assert "TOTP_SECRET" in capsys.readouterr().err

    def test_invalid_secret(self, capsys):
        assert main(["code", "--secret", "MZXW6Y=="]) == 2
        assert capsys.readouterr().err.startswith("[!]")


class TestVerifyCommand:

    def test_valid_code(self, capsys, rfc_secret):
        assert main(["verify", "--secret", rfc_secret, "--code", "287082", "--timestamp", "59"]) == 0
        assert "VALID" in capsys.readouterr().out

    def test_code_within_window(self, rfc_secret):
        # step 1 code checked at step 2
        assert main(["verify", "--secret", rfc_secret, "--code", "287082", "--timestamp", "60"]) == 0

    def test_code_outside_window(self, capsys, rfc_secret):
        args = ["verify", "--secret", rfc_secret, "--code", "287082", "--timestamp", "60", "--window", "0"]
        assert main(args) == 1
        assert "INVALID" in capsys.readouterr().out

    def test_malformed_code(self, rfc_secret):
        assert main(["verify", "--secret", rfc_secret, "--code", "12345", "--timestamp", "59"]) == 1


class TestProvisioningCommands:

    def test_uri(self, capsys, rfc_secret):
        assert main(["uri", "--account", "alice", "--secret", rfc_secret]) == 0
        assert capsys.readouterr().out.strip() == f"otpauth://totp/alice?secret={rfc_secret}"

    def test_qr(self, capsys, rfc_secret):
        assert main(["qr", "--account", "alice", "--secret", rfc_secret, "--level", "H"]) == 0
        assert capsys.readouterr().out.startswith("data:image/png;base64,")


class TestErrorReporting:
    """Bad settings and arguments end with '[!] ...' and exit status 2."""

    @pytest.mark.parametrize("name,value", [
        ("TOTP_DIGITS", "4"),
        ("TOTP_DIGITS", "six"),
        ("TOTP_DISCREPANCY", "-1"),
        ("TOTP_SECRET_LENGTH", "200"),
    ])
    def test_bad_environment_setting(self, capsys, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        assert main(["secret"]) == 2
        err = capsys.readouterr().err
        assert err.startswith("[!]")
        assert "Traceback" not in err

    def test_negative_window(self, capsys, rfc_secret):
        args = ["verify", "--secret", rfc_secret, "--code", "287082", "--window", "-1"]
        assert main(args) == 2
        assert capsys.readouterr().err.startswith("[!] discrepancy")

    def test_timestamp_before_epoch(self, capsys, rfc_secret):
        assert main(["code", "--secret", rfc_secret, "--timestamp", "-5"]) == 2
        assert capsys.readouterr().err.startswith("[!] time step")


class TestParser:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().out

    def test_defaults_follow_environment(self, monkeypatch):
        monkeypatch.setenv("TOTP_DIGITS", "8")
        monkeypatch.setenv("TOTP_DISCREPANCY", "3")
        args = build_parser().parse_args(["verify", "--code", "12345678"])
        assert args.digits == 8
        assert args.window == 3

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["qr", "--account", "a", "--level", "Z"])
