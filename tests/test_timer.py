import os
from unittest import mock

import pytest

from hornetkit.timer import Timer, TimeUnit, TimerKind


def _run(timer, count):
    durations = []
    for _ in range(count):
        timer.start()
        timer.stop()
        durations.append(timer.duration())
    return durations


def test_duration_in_seconds():
    with mock.patch("time.perf_counter", side_effect=[1.0, 3.0]):
        timer = Timer(TimerKind.HOST, TimeUnit.SECONDS)
        timer.start()
        timer.stop()
    assert timer.duration() == pytest.approx(2.0)


def test_units_scale_consistently():
    with mock.patch("time.perf_counter", side_effect=[1.0, 3.0, 1.0, 3.0]):
        seconds = Timer(TimerKind.HOST, TimeUnit.SECONDS)
        milli = Timer(TimerKind.HOST, TimeUnit.MILLI)
        _run(seconds, 1)
        _run(milli, 1)
    assert milli.duration() == pytest.approx(seconds.duration() / TimeUnit.MILLI.seconds)


def test_statistics_over_runs():
    with mock.patch("time.perf_counter", side_effect=[0.0, 1.0, 1.0, 4.0, 4.0, 6.0]):
        timer = Timer(unit=TimeUnit.SECONDS)
        durations = _run(timer, 3)
    assert timer.runs == 3
    assert timer.total_duration() == pytest.approx(sum(durations))
    assert timer.average() == pytest.approx(sum(durations) / 3)
    assert timer.min() == pytest.approx(min(durations))
    assert timer.max() == pytest.approx(max(durations))
    assert timer.duration() == pytest.approx(durations[-1])


def test_std_deviation_of_equal_runs_is_zero():
    with mock.patch("time.perf_counter", side_effect=[0.0, 2.0, 5.0, 7.0]):
        timer = Timer(unit=TimeUnit.SECONDS)
        _run(timer, 2)
    assert timer.std_deviation() == pytest.approx(0.0, abs=1e-9)


def test_std_deviation_positive_for_different_runs():
    with mock.patch("time.perf_counter", side_effect=[0.0, 1.0, 1.0, 4.0]):
        timer = Timer(unit=TimeUnit.SECONDS)
        _run(timer, 2)
    assert timer.std_deviation() == pytest.approx(1.0)


def test_reset_forgets_runs():
    with mock.patch("time.perf_counter", side_effect=[0.0, 1.0]):
        timer = Timer()
        _run(timer, 1)
    timer.reset()
    assert timer.runs == 0
    assert timer.total_duration() == 0.0
    with pytest.raises(ValueError):
        timer.average()
    with pytest.raises(ValueError):
        timer.min()


def test_stop_without_start_raises():
    timer = Timer()
    with pytest.raises(RuntimeError):
        timer.stop()


def test_context_manager_records_a_run():
    with Timer() as timer:
        sum(range(100))
    assert timer.runs == 1
    assert timer.duration() >= 0.0
    assert timer.total_duration() == timer.duration()


def test_cpu_timer_reads_process_time():
    with mock.patch("time.process_time", side_effect=[2.0, 2.5]):
        timer = Timer(TimerKind.CPU, TimeUnit.SECONDS)
        _run(timer, 1)
    assert timer.duration() == pytest.approx(0.5)


def test_sys_timer_adds_user_and_system_time():
    samples = [
        os.times_result((1.0, 1.0, 0.0, 0.0, 0.0)),
        os.times_result((2.0, 1.5, 0.0, 0.0, 0.0)),
    ]
    with mock.patch("os.times", side_effect=samples):
        timer = Timer(TimerKind.SYS, TimeUnit.SECONDS)
        _run(timer, 1)
    expected = (samples[1].user + samples[1].system) - (samples[0].user + samples[0].system)
    assert timer.duration() == pytest.approx(expected)


def test_format_layout():
    with mock.patch("time.perf_counter", side_effect=[0.0, 0.25]):
        timer = Timer(TimerKind.HOST, TimeUnit.SECONDS, decimals=2, space=10)
        _run(timer, 1)
    text = timer.format("run")
    assert text.startswith("run".ljust(10))
    assert text.endswith(" s")
    assert text == "run".ljust(10) + "0.25 s"


def test_print_writes_format(capsys):
    with mock.patch("time.perf_counter", side_effect=[0.0, 1.0]):
        timer = Timer()
        _run(timer, 1)
    timer.print("label")
    assert capsys.readouterr().out == timer.format("label") + "\n"


def test_invalid_settings_raise():
    with pytest.raises(ValueError):
        Timer(decimals=-1)
    with pytest.raises(ValueError):
        Timer(space=-1)