import os
import socket

import pytest

import cli
import settings
from fwsyslog.types import HEADER

from conftest import SCENARIO_LINE, SCENARIO_ROW, STATISTICS_LINE


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    monkeypatch.setattr(settings, "load_dotenv", lambda: None)
    monkeypatch.delenv("FWSYSLOG_RESOLVE_SRC", raising=False)
    monkeypatch.delenv("FWSYSLOG_RESOLVE_DST", raising=False)
    monkeypatch.delenv("FWSYSLOG_MAX_CACHED_HOSTNAMES", raising=False)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "fw.log"
    path.write_text(f"{SCENARIO_LINE}\n{STATISTICS_LINE}\n{SCENARIO_LINE}\n")
    return path


def test_default_output_file(log_file):
    assert cli.main([str(log_file)]) == 0

    out = log_file.with_name("fw.log.csv").read_text().splitlines()
    assert out == [HEADER, SCENARIO_ROW, SCENARIO_ROW]


def test_explicit_output_without_header(log_file, tmp_path):
    target = tmp_path / "out.csv"
    assert cli.main(["-h", str(log_file), str(target)]) == 0
    assert target.read_text().splitlines() == [SCENARIO_ROW, SCENARIO_ROW]


def test_console_output(log_file, capsys):
    assert cli.main(["-o", str(log_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [HEADER, SCENARIO_ROW, SCENARIO_ROW]
    assert not log_file.with_name("fw.log.csv").exists()


def test_resolve_destination(log_file, capsys, monkeypatch):
    calls = []

    def fake_gethostbyaddr(ip):
        calls.append(ip)
        return ("edge.example.com", [], [ip])

    monkeypatch.setattr(socket, "gethostbyaddr", fake_gethostbyaddr)

    assert cli.main(["-o", "-h", "-d", str(log_file)]) == 0

    rows = capsys.readouterr().out.splitlines()
    assert rows == [SCENARIO_ROW.replace("8.8.8.8", "edge.example.com")] * 2
    assert calls == ["8.8.8.8"]


def test_missing_input_is_fatal(tmp_path, capsys):
    missing = tmp_path / "nope.log"
    assert cli.main(["-o", str(missing)]) == 1
    assert f"Error opening {missing}" in capsys.readouterr().err


def test_unwritable_output_is_fatal(log_file, tmp_path, capsys):
    target = tmp_path / "no-such-dir" / "out.csv"
    assert cli.main([str(log_file), str(target)]) == 1
    assert f"Error opening {target}" in capsys.readouterr().err


def test_same_input_and_output_rejected(log_file):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(log_file), str(log_file)])
    assert exc.value.code == 2


def test_missing_arguments_rejected():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code != 0


def test_cache_size_flag(log_file):
    args = cli.parse_args(["-s", "--cache-size", "3", str(log_file)])
    converter = cli.build_converter(args)
    assert converter.resolver.cache.max_size == 3
    assert converter.resolve_src is True
    assert converter.resolve_dst is False


def test_no_resolver_without_flags(log_file):
    converter = cli.build_converter(cli.parse_args([str(log_file)]))
    assert converter.resolver is None


def test_negative_cache_size_rejected(log_file):
    with pytest.raises(SystemExit):
        cli.parse_args(["--cache-size", "-1", str(log_file)])


def test_relative_alias_of_input_rejected(log_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    original = log_file.read_text()

    with pytest.raises(SystemExit) as exc:
        cli.main(["fw.log", "./fw.log"])

    assert exc.value.code == 2
    assert log_file.read_text() == original


def test_absolute_alias_of_input_rejected(log_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit):
        cli.parse_args(["fw.log", str(log_file.resolve())])


def test_symlink_to_input_rejected(log_file, tmp_path):
    link = tmp_path / "link.log"
    link.symlink_to(log_file)

    with pytest.raises(SystemExit):
        cli.parse_args([str(log_file), str(link)])


def test_hard_link_to_input_rejected(log_file, tmp_path):
    twin = tmp_path / "twin.log"
    os.link(log_file, twin)

    with pytest.raises(SystemExit):
        cli.parse_args([str(log_file), str(twin)])


def test_distinct_output_accepted(log_file, tmp_path):
    args = cli.parse_args([str(log_file), str(tmp_path / "fw.csv")])
    assert args.output_file == str(tmp_path / "fw.csv")


def test_open_error_names_the_reason(tmp_path, capsys):
    missing = tmp_path / "nope.log"
    assert cli.main(["-o", str(missing)]) == 1
    assert capsys.readouterr().err.strip() == f"Error opening {missing}: No such file or directory"
