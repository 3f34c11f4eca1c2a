import pytest

import elapsed
from elapsed.clock import DEFAULT_CLOCK, ClockExhaustedError
from elapsed.timer import Timer, default_timer


def test_time_returns_body_value_and_reports_once(timer_factory, reports):
    timer = timer_factory(100, 350)
    result = timer.time(reports.append, lambda: "payload")
    assert result == "payload"
    assert reports == [250]


def test_time_failure_skips_reporter(timer_factory, reports):
    timer = timer_factory(0, 1)

    def boom():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        timer.time(reports.append, boom)
    assert reports == []
    # only the start reading was taken
    assert timer.clock.reads == 1


def test_time_pretty_formats_elapsed(timer_factory, reports):
    timer = timer_factory(100, 1600)
    assert timer.time_pretty(reports.append, lambda: 42) == 42
    assert reports == ["1.500 us"]


def test_time_pretty_format_substitutes_template(timer_factory, reports):
    timer = timer_factory(0, 2_000_000_000)
    timer.time_pretty_format("took %s", reports.append, lambda: None)
    assert reports == ["took 2 s"]


@pytest.mark.parametrize("template", ["no placeholder", "%s and %s", "%d items"])
def test_time_pretty_format_malformed_template_propagates(timer_factory, reports, template):
    timer = timer_factory(0, 10)
    with pytest.raises((TypeError, ValueError)):
        timer.time_pretty_format(template, reports.append, lambda: None)
    assert reports == []


def test_time_with_real_clock_reports_non_negative(reports):
    timer = Timer()
    assert timer.clock is DEFAULT_CLOCK
    assert timer.time(reports.append, lambda: sum(range(1000))) == 499500
    assert len(reports) == 1
    assert reports[0] >= 0


def test_module_level_functions_use_default_timer(reports):
    assert elapsed.time.__self__ is default_timer
    assert elapsed.time_pretty_format("took %s", reports.append, lambda: "ok") == "ok"
    assert reports[0].startswith("took ")


def test_timed_decorator_sync(timer_factory, reports):
    timer = timer_factory(0, 3_000, 10_000, 10_500)

    @timer.timed(reports.append)
    def add(a, b):
        """Adds."""
        return a + b

    assert add(1, 2) == 3
    assert add(a=2, b=2) == 4
    assert reports == [3_000, 500]
    assert add.__name__ == "add"
    assert add.__doc__ == "Adds."


def test_exhausted_clock_surfaces_error(timer_factory, reports):
    timer = timer_factory(0)
    with pytest.raises(ClockExhaustedError):
        timer.time(reports.append, lambda: 1)
    assert reports == []
