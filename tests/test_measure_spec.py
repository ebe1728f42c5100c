from utils.measure_spec import (MeasureMode, MeasureSpec, resolve_dimension,
                                square_dimension, exact, at_most, unspecified)


def test_unconstrained_axis_uses_default():
    assert resolve_dimension(unspecified()) == 200
    assert resolve_dimension(MeasureSpec(MeasureMode.UNSPECIFIED, 999)) == 200


def test_constrained_axis_uses_full_size():
    assert resolve_dimension(exact(150)) == 150
    assert resolve_dimension(at_most(320)) == 320


def test_both_unconstrained_gives_default_square():
    assert square_dimension(unspecified(), unspecified()) == 200


def test_square_uses_shorter_side():
    assert square_dimension(exact(150), exact(300)) == 150
    assert square_dimension(exact(300), at_most(120)) == 120


def test_mixed_constraint_against_default():
    assert square_dimension(at_most(500), unspecified()) == 200
    assert square_dimension(unspecified(), exact(80)) == 80


def test_negative_size_is_clamped():
    assert square_dimension(exact(-10), exact(50)) == 0
