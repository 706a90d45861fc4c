import io

from zerogravity.logger import DebugLogger, Timer


def test_lines_carry_tag_and_continuations() -> None:
    out = io.StringIO()
    log = DebugLogger(out=out)

    log.nav(None, "welcome")
    log.quiz("first\nsecond")

    lines = out.getvalue().splitlines()
    assert "[ NAV]" in lines[0] and "∅ → welcome" in lines[0]
    assert "[QUIZ]" in lines[1] and lines[1].endswith("first")
    assert lines[2].strip() == "second"


def test_disabled_logger_is_silent() -> None:
    out = io.StringIO()
    log = DebugLogger(enabled=False, out=out)

    log.error("boom")
    log.banner("hello")

    assert out.getvalue() == ""


def test_exc_info_goes_to_err_stream() -> None:
    out, err = io.StringIO(), io.StringIO()
    log = DebugLogger(out=out, err=err)

    try:
        raise OSError("disk full")
    except OSError:
        log.error("write failed", exc_info=True)

    assert "write failed" in out.getvalue()
    assert "OSError: disk full" in err.getvalue()


def test_timer_measures_duration() -> None:
    with Timer() as timer:
        sum(range(1000))
    assert timer.duration_ms >= 0
