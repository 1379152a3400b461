import pytest

from server import parse_args


def test_defaults():
    args = parse_args([])
    assert args.host == ""
    assert args.port == 8080
    assert args.directory == "."
    assert args.server_name == "JFS Server"
    assert args.timeout == 20
    assert args.log_level == "WARNING"


def test_overrides():
    args = parse_args(
        ["-p", "9000", "-d", "/srv/www", "--server-name", "Jon's very own server", "--timeout", "0", "--log-level", "info"]
    )
    assert args.port == 9000
    assert args.directory == "/srv/www"
    assert args.server_name == "Jon's very own server"
    assert args.timeout == 0
    assert args.log_level == "info"


def test_negative_timeout_rejected(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--timeout", "-1"])
    assert "must be 0 or greater" in capsys.readouterr().err
