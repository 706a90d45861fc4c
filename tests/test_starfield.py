import random

from zerogravity.starfield import (
    MAX_BRIGHTNESS,
    MAX_TAIL_POINTS,
    MIN_BRIGHTNESS,
    OFFSCREEN_MARGIN,
    Starfield,
    blend,
    star_color,
)


def make_field(stars=30, comets=3) -> Starfield:
    return Starfield(stars, comets, 400, 300, rng=random.Random(42))


def test_brightness_stays_in_bounds() -> None:
    field = make_field()
    for _ in range(500):
        field.tick()
        for star in field.stars:
            assert MIN_BRIGHTNESS <= star.brightness <= MAX_BRIGHTNESS


def test_stars_start_inside_area() -> None:
    field = make_field()
    assert len(field.stars) == 30
    assert all(0 <= s.x <= 400 and 0 <= s.y <= 300 for s in field.stars)


def test_comets_respawn_off_the_left_edge() -> None:
    field = make_field(stars=0, comets=1)
    comet = field.comets[0]
    comet.x = 400 + OFFSCREEN_MARGIN
    comet.y = 10

    field.tick()

    fresh = field.comets[0]
    assert fresh is not comet
    assert fresh.x == -OFFSCREEN_MARGIN
    assert 0 <= fresh.y < 150


def test_resize_rescatters() -> None:
    field = make_field()
    field.resize(50, 40)
    assert all(0 <= s.x <= 50 and 0 <= s.y <= 40 for s in field.stars)
    assert len(field.comets) == 3


def test_tail_fades_out() -> None:
    field = make_field(stars=0, comets=1)
    points = field.tail_points(field.comets[0])
    alphas = [alpha for _, _, alpha in points]
    assert alphas == sorted(alphas, reverse=True)
    assert alphas[0] == field.comets[0].tail_alpha


def test_blend() -> None:
    assert blend((255, 255, 255), 1.0) == "#ffffff"
    assert blend((255, 255, 255), 0.0) == "#000000"
    assert blend((200, 100, 0), 0.5) == "#643200"
    assert star_color(make_field().stars[0]).startswith("#")


def test_tail_never_exceeds_preallocated_dots() -> None:
    field = Starfield(0, 8, 200, 100, rng=random.Random(7))
    for _ in range(2000):
        field.tick()
        for comet in field.comets:
            assert len(field.tail_points(comet)) <= MAX_TAIL_POINTS
