"""
Tests for unix socket listener startup and the command-line entry point.
"""

import logging
import socket
from pathlib import Path
from unittest.mock import patch

import pytest

from app.core.config import DEFAULT_SOCKET_PATH
from app.core.errors import ListenerError
from app.core.listener import bind_unix_socket, remove_stale_socket
from app.main import main, parse_args


@pytest.fixture
def sock_path(tmp_path: Path) -> Path:
    return tmp_path / "v.sock"


def test_bind_creates_listening_socket(sock_path: Path) -> None:
    sock = bind_unix_socket(str(sock_path))
    try:
        assert sock.family == socket.AF_UNIX
        assert sock_path.is_socket()
        client = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        client.connect(str(sock_path))
        client.close()
    finally:
        sock.close()


def test_bind_replaces_existing_file(sock_path: Path) -> None:
    sock_path.write_text("stale")
    sock = bind_unix_socket(str(sock_path))
    try:
        assert sock_path.is_socket()
    finally:
        sock.close()


def test_bind_replaces_stale_socket(sock_path: Path) -> None:
    old = bind_unix_socket(str(sock_path))
    old.close()
    assert sock_path.exists()
    sock = bind_unix_socket(str(sock_path))
    try:
        assert sock_path.is_socket()
    finally:
        sock.close()


def test_remove_stale_socket_directory(sock_path: Path) -> None:
    sock_path.mkdir()
    (sock_path / "inner").write_text("x")
    assert remove_stale_socket(str(sock_path)) is True
    assert not sock_path.exists()


def test_remove_stale_socket_nothing_there(sock_path: Path) -> None:
    assert remove_stale_socket(str(sock_path)) is False


def test_bind_missing_parent_raises(tmp_path: Path) -> None:
    with pytest.raises(ListenerError):
        bind_unix_socket(str(tmp_path / "nope" / "v.sock"))


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.socket == DEFAULT_SOCKET_PATH


def test_parse_args_socket_flag() -> None:
    assert parse_args(["--socket", "/tmp/x.sock"]).socket == "/tmp/x.sock"


def test_main_exits_when_bind_fails(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--socket", str(tmp_path / "nope" / "v.sock")])
    assert exc.value.code == 1


def test_main_applies_log_level_to_app_loggers(sock_path: Path) -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        with patch("app.main.uvicorn.Server"):
            main(["--socket", str(sock_path), "--log-level", "debug"])
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_main_seeds_random_source_before_serving(sock_path: Path) -> None:
    calls: list[str] = []
    with patch("app.main.get_random_source", side_effect=lambda: calls.append("seed")), \
            patch("app.main.uvicorn.Server") as server_cls:
        server_cls.return_value.run.side_effect = lambda **kwargs: calls.append("run")
        main(["--socket", str(sock_path)])
    assert calls == ["seed", "run"]


def test_main_serves_on_bound_socket(sock_path: Path) -> None:
    with patch("app.main.uvicorn.Server") as server_cls:
        main(["--socket", str(sock_path)])
    run = server_cls.return_value.run
    run.assert_called_once()
    (sock,) = run.call_args.kwargs["sockets"]
    assert sock.family == socket.AF_UNIX
    assert sock.fileno() == -1  # closed once the server returns
