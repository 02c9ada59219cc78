import pytest

from quadkit.telemetry import Frame, Profiler


def make_clock(*values):
    it = iter(values)
    return lambda: next(it)


def test_disabled_by_default_records_nothing():
    profiler = Profiler(clock=make_clock())
    profiler.begin_zone("a")
    profiler.end_zone()
    profiler.reset(0.1)
    assert profiler.frame().zones == []
    assert profiler.enabled is False


def test_enable_takes_effect_after_reset():
    profiler = Profiler(clock=make_clock(1.0, 2.0))
    profiler.enable()
    assert profiler.enabled is False
    profiler.begin_zone("ignored")
    profiler.end_zone()
    profiler.reset(0.0)
    assert profiler.frame().zones == []
    assert profiler.enabled is True
    profiler.begin_zone("work")
    profiler.end_zone()
    profiler.reset(0.5)
    frame = profiler.frame()
    assert [z.name for z in frame.zones] == ["work"]
    assert frame.zones[0].start_time == 1.0
    assert frame.zones[0].duration == pytest.approx(1.0)
    assert frame.full_frame_time == 0.5


def test_end_zone_without_begin_raises():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    with pytest.raises(RuntimeError):
        profiler.end_zone()


def test_reset_with_open_zone_raises():
    profiler = Profiler(clock=make_clock(0.0))
    profiler.enable()
    profiler.reset(0.0)
    profiler.begin_zone("open")
    with pytest.raises(RuntimeError, match="unpaired"):
        profiler.reset(0.0)


def test_disable_stops_recording():
    profiler = Profiler(clock=make_clock(0.0, 1.0))
    profiler.enable()
    profiler.reset(0.0)
    profiler.disable()
    with profiler.zone("still recorded"):
        pass
    profiler.reset(0.0)
    assert len(profiler.frame().zones) == 1
    with profiler.zone("dropped"):
        pass
    profiler.reset(0.0)
    assert profiler.frame().zones == []


def test_frame_returns_independent_copy():
    profiler = Profiler(clock=make_clock(0.0, 1.0))
    profiler.enable()
    profiler.reset(0.0)
    with profiler.zone("z"):
        pass
    profiler.reset(0.25)
    copy = profiler.frame()
    copy.zones.clear()
    assert len(profiler.frame().zones) == 1


def test_fresh_profiler_frame_is_empty():
    assert Profiler().frame() == Frame()


def test_log_string_and_strings_copy():
    profiler = Profiler()
    profiler.log_string("hello")
    profiler.log_string("world")
    logged = profiler.strings()
    logged.append("extra")
    assert profiler.strings() == ["hello", "world"]


def test_log_time_format():
    profiler = Profiler(clock=make_clock(1.0, 1.5))
    with profiler.log_time("Atlas build time"):
        pass
    assert profiler.strings() == ["Time query: Atlas build time, 0.5s"]


def test_log_time_logs_even_on_error():
    profiler = Profiler(clock=make_clock(0.0, 2.0))
    with pytest.raises(ValueError):
        with profiler.log_time("failing"):
            raise ValueError("boom")
    assert profiler.strings() == ["Time query: failing, 2.0s"]