import io

import pytest

from threadkit.timing import CpuTimer, wait_ms


def test_wait_ms_sleeps_at_least_requested():
    timer = CpuTimer()
    timer.start()
    wait_ms(30)
    timer.stop()
    assert timer.elapsed() >= 0.025


def test_negative_wait_returns_promptly():
    with CpuTimer() as timer:
        wait_ms(-100)
    assert timer.elapsed() < 0.5


def test_elapsed_frozen_after_stop():
    timer = CpuTimer()
    timer.start()
    timer.stop()
    first = timer.elapsed()
    wait_ms(10)
    assert timer.elapsed() == first


def test_context_manager_measures_block():
    with CpuTimer() as timer:
        wait_ms(20)
    assert timer.elapsed() >= 0.015


def test_elapsed_without_start_raises():
    with pytest.raises(RuntimeError):
        CpuTimer().elapsed()


def test_stop_without_start_raises():
    with pytest.raises(RuntimeError):
        CpuTimer().stop()


def test_report_format():
    timer = CpuTimer()
    timer.start()
    timer.stop()
    buf = io.StringIO()
    timer.report(buf)
    text = buf.getvalue()
    assert text.startswith("\n Wall time is ")
    assert text.endswith(" seconds\n")
    value = float(text.split()[3])
    assert value == pytest.approx(timer.elapsed(), rel=1e-4, abs=1e-6)