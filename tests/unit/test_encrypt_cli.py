"""
Unit tests for the wholesale-encrypt command.
"""

import re

from wholesale.cli.encrypt_password import main
from wholesale.core.crypto import PasswordEncryptor, unwrap_encrypted

FAST = "1000"


def test_prints_config_line_and_check(capsys):
    exit_code = main(["daminda@77", "--passphrase", "wholesale_secret_key", "--iterations", FAST])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Decryption check: OK" in out
    match = re.search(r"^DATABASE_PASSWORD=(ENC\(.+\))$", out, re.MULTILINE)
    assert match is not None

    ciphertext = unwrap_encrypted(match.group(1))
    encryptor = PasswordEncryptor("wholesale_secret_key", iterations=1000)
    assert encryptor.decrypt(ciphertext) == "daminda@77"
    assert "ENCRYPTOR_ITERATIONS=1000" in out


def test_passphrase_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("ENCRYPTOR_PASSWORD", "env-secret")

    assert main(["secret", "--iterations", FAST]) == 0
    assert "ENC(" in capsys.readouterr().out


def test_missing_passphrase_fails(monkeypatch, capsys):
    monkeypatch.delenv("ENCRYPTOR_PASSWORD", raising=False)

    assert main(["secret"]) == 1
    assert "ENCRYPTOR_PASSWORD" in capsys.readouterr().err
