import io

import pytest

from ticketsched.examples import main, run_contexts, run_timer


def test_run_contexts_order_of_output():
    out = io.StringIO()
    assert run_contexts(2, out) == 2
    assert out.getvalue().splitlines() == [
        "made context 0",
        "made context 1",
        "0",
        "in func()",
        "1",
        "in func()",
    ]


def test_run_contexts_runs_each_once():
    out = io.StringIO()
    assert run_contexts(5, out) == 5
    lines = out.getvalue().splitlines()
    assert lines.count("in func()") == 5
    assert all(f"made context {i}" in lines for i in range(5))


def test_run_contexts_zero_is_silent():
    out = io.StringIO()
    assert run_contexts(0, out) == 0
    assert out.getvalue() == ""


def test_run_contexts_rejects_negative():
    with pytest.raises(ValueError):
        run_contexts(-1, io.StringIO())


def test_run_timer_reports_each_tick():
    out = io.StringIO()
    assert run_timer(3, 0.0005, out) == 3
    lines = out.getvalue().splitlines()
    assert lines[0] == "( 1) handled a timer signal, setting timer"
    assert len(lines) == 3
    assert all(line.endswith("handled a timer signal, setting timer") for line in lines)


def test_run_timer_pads_numbers_to_two_columns():
    out = io.StringIO()
    run_timer(10, 0.0001, out)
    lines = out.getvalue().splitlines()
    assert lines[9].startswith("(10)")
    assert lines[8].startswith("( 9)")


@pytest.mark.parametrize("ticks, interval", [(-1, 0.1), (1, 0), (1, -0.5)])
def test_run_timer_rejects_bad_arguments(ticks, interval):
    with pytest.raises(ValueError):
        run_timer(ticks, interval, io.StringIO())


def test_main_contexts(capsys):
    assert main(["contexts", "--count", "2"]) == 0
    assert capsys.readouterr().out.count("in func()") == 2


def test_main_timer(capsys):
    assert main(["timer", "--ticks", "2", "--interval", "0.0005"]) == 0
    assert capsys.readouterr().out.count("handled a timer signal") == 2