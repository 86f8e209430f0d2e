from enginebravo.gameobject import Vector2
from enginebravo.particle import Color, Particle

BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)


def make(life=1000, max_life=1000, size=Vector2(2, 2), end=Vector2(0, 0), colors=()):
    return Particle(
        Vector2(0, 0),
        Vector2(2, 4),
        0.0,
        life,
        max_life,
        size,
        end,
        0.0,
        1.0,
        0.0,
        colors,
    )


def test_life_time_in_seconds():
    assert make(life=1500, max_life=1500).life_time == 1500 / 1000


def test_update_moves_by_velocity():
    particle = make()
    particle.update(0.25)
    assert particle.position == Vector2(2 * 0.25, 4 * 0.25)
    assert particle.rotation == 0.25


def test_constructor_copies_vectors():
    size = Vector2(2, 2)
    particle = make(size=size)
    particle.update(0.5)
    assert size == Vector2(2, 2)


def test_life_time_clamps_to_zero():
    particle = make()
    particle.update(5.0)
    assert particle.life_time == 0


def test_negative_size_ends_life():
    particle = make(size=Vector2(1, 1), end=Vector2(-10, -10))
    particle.update(0.5)
    assert particle.size == Vector2(0, 0)
    assert particle.life_time == 0


def test_size_reaches_end_size_at_end_of_life():
    particle = make(size=Vector2(4, 6), end=Vector2(1, 2))
    particle.update(1.0)
    assert particle.size == Vector2(1, 2)


def test_empty_gradient_is_white():
    assert make().current_color() == Color(255, 255, 255, 255)


def test_single_colour_gradient():
    assert make(colors=[BLACK]).current_color() == BLACK


def test_interpolation_starts_at_first_colour():
    assert make(colors=[BLACK, WHITE]).current_color() == BLACK


def test_interpolation_ends_at_last_colour():
    particle = make(colors=[BLACK, WHITE])
    particle.update(1.0)
    assert particle.current_color() == WHITE


def test_interpolation_midway():
    particle = make(colors=[BLACK, WHITE])
    particle.update(0.5)
    assert particle.current_color() == Color(127, 127, 127, 255)


def test_nearest_colour_at_start():
    particle = make(colors=[BLACK, WHITE])
    particle.interpolate_color = False
    assert particle.current_color() == BLACK