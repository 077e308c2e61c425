import io

import pytest

from escalonador.inserter import format_record, main
from escalonador.process import parse_process


def test_format_record_joins_fields():
    assert format_record(["1", "0", "3", "0", "0", "0"]) == "1 0 3 0 0 0\n"


def test_format_record_accepts_numbers():
    assert format_record([2, 1, 2, 1, 2, 1]) == "2 1 2 1 2 1\n"


@pytest.mark.parametrize("fields", [[], ["1", "2"], ["1"] * 7])
def test_format_record_rejects_wrong_length(fields):
    with pytest.raises(ValueError):
        format_record(fields)


def test_record_round_trips_through_parser():
    process = parse_process(format_record([5, 3, 4, 1, 2, 6]), 2)
    assert (process.id, process.arrival, process.exec1) == (5, 3, 4)
    assert process.has_block is True
    assert (process.block_time, process.exec2) == (2, 6)


def test_main_writes_records_until_sair(tmp_path, monkeypatch, capsys):
    target = tmp_path / "fifo_processos"
    target.write_text("", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0 3 0 0 0\n2 1\n2 1 2 1\nsair\n"))
    status = main(["--fifo", str(target)])
    out = capsys.readouterr().out
    assert status == 0
    assert target.read_text(encoding="utf-8") == "1 0 3 0 0 0\n2 1 2 1 2 1\n"
    assert out.count("Processo enviado!") == 2


def test_main_stops_on_incomplete_record(tmp_path, monkeypatch):
    target = tmp_path / "fifo_processos"
    target.write_text("", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0 3\n"))
    status = main(["--fifo", str(target)])
    assert status == 0
    assert target.read_text(encoding="utf-8") == ""


def test_main_fails_when_pipe_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0 3 0 0 0\n"))
    status = main(["--fifo", str(tmp_path / "missing")])
    err = capsys.readouterr().err
    assert status == 1
    assert "para escrita" in err