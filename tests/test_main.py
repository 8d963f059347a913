
import pytest
from voxbuilder import __version__
from voxbuilder.main import parse_arguments


def test_defaults(monkeypatch):
    monkeypatch.delenv("VOXBUILDER_TRANSPORT", raising=False)
    monkeypatch.delenv("VOXBUILDER_LOG_LEVEL", raising=False)

    args = parse_arguments([])

    assert args.transport == "stdio"
    assert args.log_level == "WARNING"
    assert args.name == "VoxBuilder"


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("VOXBUILDER_TRANSPORT", "sse")
    monkeypatch.setenv("VOXBUILDER_LOG_LEVEL", "info")

    args = parse_arguments([])

    assert args.transport == "sse"
    assert args.log_level == "INFO"


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("VOXBUILDER_TRANSPORT", "sse")

    args = parse_arguments(["--transport", "stdio", "--log-level", "error"])

    assert args.transport == "stdio"
    assert args.log_level == "ERROR"


def test_debug_flag():
    assert parse_arguments(["--debug"]).log_level == "DEBUG"


def test_invalid_environment_transport(monkeypatch):
    monkeypatch.setenv("VOXBUILDER_TRANSPORT", "carrier-pigeon")
    with pytest.raises(SystemExit):
        parse_arguments([])


def test_version(capsys):
    with pytest.raises(SystemExit):
        parse_arguments(["--version"])
    assert __version__ in capsys.readouterr().out
