from conftest import FakeScreen
from zerogravity.navigation import NavigationController, ScreenName
from zerogravity.progress import ProgressLog


def test_show_screen_mounts_target_and_unmounts_previous(controller, events) -> None:
    controller.show_screen(ScreenName.WELCOME)
    controller.show_screen(ScreenName.LESSON)

    assert controller.current_screen == ScreenName.LESSON
    assert events == [
        ("mount", ScreenName.WELCOME),
        ("unmount", ScreenName.WELCOME),
        ("mount", ScreenName.LESSON),
    ]


def test_show_screen_accepts_plain_names(controller) -> None:
    controller.show_screen("chat")
    assert controller.current_screen == ScreenName.CHAT


def test_showing_current_screen_is_a_no_op(controller, events) -> None:
    controller.show_screen(ScreenName.LESSON)
    controller.show_screen(ScreenName.LESSON)

    assert events == [("mount", ScreenName.LESSON)]
    assert controller.history == [ScreenName.LESSON]


def test_unknown_screen_leaves_state_unchanged(controller, events) -> None:
    controller.show_screen(ScreenName.LESSON)
    controller.show_screen("settings")

    assert controller.current_screen == ScreenName.LESSON
    assert events == [("mount", ScreenName.LESSON)]


def test_unregistered_screen_is_ignored(tmp_path) -> None:
    nav = NavigationController(ProgressLog(tmp_path / "p.txt"))
    nav.show_screen(ScreenName.QUIZ)
    assert nav.current_screen is None


def test_navigation_from_inside_mount(tmp_path, events) -> None:
    nav = NavigationController(ProgressLog(tmp_path / "p.txt"))
    nav.register(ScreenName.LESSON, FakeScreen(ScreenName.LESSON, events))
    nav.register(ScreenName.RESULT, FakeScreen(ScreenName.RESULT, events))
    nav.register(
        ScreenName.QUIZ,
        FakeScreen(ScreenName.QUIZ, events, on_mount=lambda: nav.show_screen(ScreenName.RESULT)),
    )

    nav.show_screen(ScreenName.LESSON)
    nav.show_screen(ScreenName.QUIZ)

    assert nav.current_screen == ScreenName.RESULT
    assert nav.history == [ScreenName.LESSON, ScreenName.QUIZ, ScreenName.RESULT]
    assert events[-2:] == [("unmount", ScreenName.QUIZ), ("mount", ScreenName.RESULT)]


def test_score_and_session_resources(controller, tmp_path) -> None:
    assert controller.get_score() == 0
    assert controller.has_result is False

    controller.set_score(2)

    assert controller.get_score() == 2
    assert controller.has_result is True
    assert controller.cursor == "star"
    assert controller.progress_sink().file_path == tmp_path / "progress.txt"
