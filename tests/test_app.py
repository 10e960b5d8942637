"""HostsReader 和命令行入口的测试"""

import logging
from pathlib import Path

import pytest

import main as entry_point
from hostsfile import cli
from hostsfile import app
from hostsfile.app import HostsReader
from hostsfile.config import Config
from hostsfile.errors import LineParseError, LocateError


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    hosts = tmp_path / "hosts"
    hosts.write_text("# local\n127.0.0.1\tlocalhost\n::1 localhost ip6-localhost # v6\n")
    return hosts


def test_reader_parses_configured_file(hosts_file: Path) -> None:
    reader = HostsReader(Config(hosts_file_path=str(hosts_file)))

    entries = reader.run()

    assert reader.hosts_path == hosts_file
    assert [entry.canonical_name for entry in entries] == ["localhost", "localhost"]


def test_reader_falls_back_to_system_file(
    hosts_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(app, "locate_system_hosts_file", lambda: hosts_file)

    reader = HostsReader(Config())

    assert reader.hosts_path == hosts_file
    assert len(reader.run()) == 2


def test_reader_propagates_locate_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail() -> Path:
        raise LocateError("no hosts file on this platform")

    monkeypatch.setattr(app, "locate_system_hosts_file", fail)

    with pytest.raises(LocateError):
        HostsReader(Config())


def test_reader_rejects_invalid_config(hosts_file: Path) -> None:
    with pytest.raises(ValueError):
        HostsReader(Config(hosts_file_path=str(hosts_file), log_level="LOUD"))


def test_reader_reraises_parse_errors(tmp_path: Path) -> None:
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1 localhost\n::1\n")
    reader = HostsReader(Config(hosts_file_path=str(hosts)))

    with pytest.raises(LineParseError) as exc_info:
        reader.run()

    assert exc_info.value.line_number == 2


def test_parse_error_logged_once(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1localhost\n")
    reader = HostsReader(Config(hosts_file_path=str(hosts)))

    with pytest.raises(LineParseError):
        reader.run()

    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert len(errors) == 1


def test_logging_handler_added_once(hosts_file: Path) -> None:
    config = Config(hosts_file_path=str(hosts_file))

    first = HostsReader(config)
    second = HostsReader(config)

    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1


def test_main_prints_entries(hosts_file: Path, capsys: pytest.CaptureFixture) -> None:
    cli.main([str(hosts_file)])

    out = capsys.readouterr().out
    assert out.splitlines() == ["127.0.0.1\tlocalhost", "::1\tlocalhost ip6-localhost"]


def test_main_uses_hosts_file_env(
    hosts_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setenv("HOSTS_FILE", str(hosts_file))

    cli.main([])

    assert len(capsys.readouterr().out.splitlines()) == 2


def test_main_exits_on_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1localhost\n")

    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(hosts)])

    assert exc_info.value.code == 1
    assert "127.0.0.1localhost" in capsys.readouterr().err


def test_main_exits_on_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing")])

    assert exc_info.value.code == 1


def test_root_main_delegates_to_package_cli() -> None:
    assert entry_point.main is cli.main
