import pytest

from overhead.rect import Rect


def test_default_rect_is_degenerate_at_origin():
    r = Rect()
    assert r.bottom_left == (0.0, 0.0)
    assert r.top_right == (0.0, 0.0)
    assert r.width == 0.0
    assert r.height == 0.0
    assert r.center == (0.0, 0.0)


def test_sprite_sized_rect():
    r = Rect((0.0, 0.0), (8.0, 8.0))
    assert r.width == 8.0
    assert r.height == 8.0
    assert r.center == (4.0, 4.0)


@pytest.mark.parametrize(
    "bl,tr",
    [((-8.0, -22.0), (16.0, 8.0)), ((3.5, 1.0), (10.0, 2.5)), ((5.0, 5.0), (5.0, 5.0))],
)
def test_center_is_between_corners(bl, tr):
    r = Rect(bl, tr)
    cx, cy = r.center
    assert cx - bl[0] == pytest.approx(tr[0] - cx)
    assert cy - bl[1] == pytest.approx(tr[1] - cy)
    assert bl[0] + r.width == pytest.approx(tr[0])
    assert bl[1] + r.height == pytest.approx(tr[1])


def test_rect_is_immutable():
    r = Rect((0.0, 0.0), (1.0, 1.0))
    with pytest.raises(AttributeError):
        r.bottom_left = (2.0, 2.0)
    assert r.bottom_left == (0.0, 0.0)
    assert r.center == (0.5, 0.5)
    assert r.width == 1.0