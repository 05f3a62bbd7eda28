"""CLI smoke tests."""

from __future__ import annotations

import json
from pathlib import Path

from cli.main import app, build_event


def _run(capsys, argv: list[str]) -> tuple[int, str]:
    code = app(argv)
    return code, capsys.readouterr().out


def _result(out: str) -> dict:
    return json.loads(out)


def test_build_event_shapes_rest_payload():
    event = build_event("GET", user_id="3")
    assert event["httpMethod"] == "GET"
    assert event["pathParameters"] == {"user_id": "3"}
    assert event["path"] == "/users/3"
    assert build_event("GET")["pathParameters"] is None


def test_invoke_get_user(capsys, tmp_path: Path):
    code, out = _run(capsys, ["--config", str(tmp_path / "none.yml"), "invoke", "GET", "--user-id", "42"])
    assert code == 0
    result = _result(out)
    assert result["statusCode"] == 200
    assert result["body"] == {"username": "username_42", "email": "test@example.com"}


def test_invoke_post_from_file(capsys, tmp_path: Path):
    body = tmp_path / "user.json"
    body.write_text('{"username":"bob","email":"bob@x.com"}', encoding="utf-8")
    code, out = _run(capsys, ["--config", str(tmp_path / "none.yml"), "invoke", "POST", "--body-file", str(body)])
    assert code == 0
    assert _result(out)["body"] == {"username": "bob", "email": "bob@x.com"}


def test_invoke_not_allowed_exit_code(capsys, tmp_path: Path):
    code, out = _run(capsys, ["--config", str(tmp_path / "none.yml"), "invoke", "DELETE"])
    assert code == 4
    assert _result(out)["body"] == "Method not allowed"


def test_invoke_missing_body_file(capsys, tmp_path: Path):
    code = app(["--config", str(tmp_path / "none.yml"), "invoke", "POST", "--body-file", str(tmp_path / "nope.json")])
    assert code == 2
    assert "Body file not found" in capsys.readouterr().err


def test_routes_table(capsys, tmp_path: Path):
    code, out = _run(capsys, ["--config", str(tmp_path / "none.yml"), "routes", "--format", "md"])
    assert code == 0
    assert "| method | handler | doc |" in out
    assert "apiserver.routes.users.list_users" in out
    assert "apiserver.routes.users.create_user" in out


def test_routes_strict_mode_uses_get_user(capsys, tmp_path: Path):
    code, out = _run(capsys, ["--config", str(tmp_path / "none.yml"), "routes", "--strict-user-id", "--format", "table"])
    assert code == 0
    assert "apiserver.routes.users.get_user" in out


def test_invoke_keeps_logs_off_stdout(capsys, tmp_path: Path):
    config_path = tmp_path / "usersapi.yml"
    config_path.write_text("service_name: users-cli-stdout\nlog_level: DEBUG\n", encoding="utf-8")
    code = app(["--config", str(config_path), "invoke", "GET", "--user-id", "7"])
    captured = capsys.readouterr()
    assert code == 0
    assert json.loads(captured.out)["statusCode"] == 200
    assert "users-cli-stdout" not in captured.out
    assert "users-cli-stdout" in captured.err
