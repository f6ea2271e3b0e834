"""
Operator commands.
"""
from flashcards_api import cli
from flashcards_api.app.core.security import decode_access_token

from .conftest import API


def test_reset_password_then_login(client, user, database, capsys):
    code = cli.main(["reset-password", "--db", database.path, "--email", "a@x.com", "--password", "new-pw"])
    assert code == cli.EXIT_OK
    assert "Password updated" in capsys.readouterr().out

    assert client.post(f"{API}/login", json={"email": "a@x.com", "password": "pw"}).status_code == 400
    assert client.post(f"{API}/login", json={"email": "a@x.com", "password": "new-pw"}).status_code == 200


def test_reset_password_unknown_email(database, capsys):
    code = cli.main(["reset-password", "--db", database.path, "--email", "ghost@x.com", "--password", "pw"])
    assert code == cli.EXIT_NOT_FOUND
    assert "No user found" in capsys.readouterr().err


def test_reset_password_prompts_when_missing(database, monkeypatch, capsys):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: "")
    code = cli.main(["reset-password", "--db", database.path, "--email", "a@x.com"])
    assert code == cli.EXIT_BAD_INPUT


def test_create_token(capsys):
    assert cli.main(["create-token", "--user-id", "5", "--days", "2"]) == cli.EXIT_OK
    token = capsys.readouterr().out.strip()
    assert decode_access_token(token)["sub"] == "5"


def test_create_token_rejects_non_positive_days(capsys):
    assert cli.main(["create-token", "--user-id", "5", "--days", "0"]) == cli.EXIT_BAD_INPUT
