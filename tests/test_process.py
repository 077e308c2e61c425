import pytest

from escalonador.process import Process, State, parse_process


def test_parse_fields_from_record():
    p = parse_process("1 0 3 1 2 4", 5)
    assert (p.id, p.arrival, p.exec1, p.block_time, p.exec2) == (1, 0, 3, 2, 4)
    assert p.has_block is True
    assert p.quantum_left == 5


def test_parse_initial_runtime_state():
    p = parse_process("7 3 6 0 0 0", 2)
    assert p.remaining == p.exec1 == 6
    assert p.state is State.READY
    assert p.start_time is None
    assert p.end_time is None
    assert p.context_switches == 0
    assert p.phase2_started is False
    assert p.block_left == 0


@pytest.mark.parametrize("flag", ["0", "2", "-1"])
def test_only_one_means_blocking(flag):
    p = parse_process(f"1 0 3 {flag} 2 4", 2)
    assert p.has_block is False


def test_extra_tokens_are_ignored():
    p = parse_process("4 1 2 0 0 0 trailing words\n", 2)
    assert p.id == 4
    assert p.exec2 == 0


@pytest.mark.parametrize("text", ["", "1 2 3", "1 0 x 0 0 0", "a b c d e f"])
def test_malformed_records_raise(text):
    with pytest.raises(ValueError):
        parse_process(text, 2)


def test_process_constructor_sets_remaining():
    p = Process(id=2, arrival=0, exec1=9, has_block=False, block_time=0, exec2=0)
    assert p.remaining == 9


def test_parsed_process_matches_only_ready_state():
    p = parse_process("1 0 3 0 0 0", 2)
    assert [s for s in State if p.state is s] == [State.READY]