import pytest

from fractalia.viewport import Direction, Session, Viewport


def test_default_bounds():
    vp = Viewport()
    assert (vp.min_x, vp.max_x, vp.min_y, vp.max_y) == (-1.5, 1.5, -1.25, 1.25)
    assert vp.step == 0.1


@pytest.mark.parametrize(
    "direction, attrs, sign",
    [
        (Direction.UP, ("min_y", "max_y"), 1),
        (Direction.DOWN, ("min_y", "max_y"), -1),
        (Direction.RIGHT, ("min_x", "max_x"), 1),
        (Direction.LEFT, ("min_x", "max_x"), -1),
    ],
)
def test_pan_shifts_by_step(direction, attrs, sign):
    vp = Viewport()
    before = {a: getattr(vp, a) for a in attrs}
    vp.pan(direction)
    for a in attrs:
        assert getattr(vp, a) - before[a] == pytest.approx(sign * vp.step)


def test_pan_opposite_directions_cancel():
    vp = Viewport()
    vp.pan(Direction.UP)
    vp.pan(Direction.DOWN)
    vp.pan(Direction.LEFT)
    vp.pan(Direction.RIGHT)
    assert vp.min_x == pytest.approx(-1.5)
    assert vp.max_y == pytest.approx(1.25)


def test_zoom_in_then_out_restores():
    vp = Viewport()
    vp.zoom_in()
    assert vp.max_x - vp.min_x < 3.0
    vp.zoom_out()
    assert vp.min_x == pytest.approx(-1.5)
    assert vp.max_x == pytest.approx(1.5)
    assert vp.min_y == pytest.approx(-1.25)
    assert vp.max_y == pytest.approx(1.25)


def test_zoom_in_when_narrow_refines_step():
    vp = Viewport(min_x=0.0, max_x=0.2, min_y=0.0, max_y=0.2, step=0.1)
    vp.zoom_in()
    assert vp.step == pytest.approx(0.01)
    assert (vp.min_x, vp.max_x) == (0.0, 0.2)


def test_refine_and_coarsen_are_inverse():
    vp = Viewport()
    vp.refine_step()
    assert vp.step == pytest.approx(0.01)
    vp.coarsen_step()
    assert vp.step == pytest.approx(0.1)


def test_axes_span_viewport():
    vp = Viewport()
    xs, ys = vp.axes(30, 20)
    assert len(xs) == 30 and len(ys) == 20
    assert xs[0] == vp.min_x and ys[0] == vp.min_y
    assert xs[-1] == pytest.approx(vp.max_x - (vp.max_x - vp.min_x) / 30)
    assert all(a < b for a, b in zip(xs, xs[1:]))


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_axes_rejects_bad_size(size):
    with pytest.raises(ValueError):
        Viewport().axes(*size)


def test_cycle_scheme_wraps():
    session = Session()
    seen = [session.cycle_scheme() for _ in range(6)]
    assert seen == [1, 2, 3, 4, 5, 0]


def test_handle_key_bindings():
    session = Session()
    assert session.handle_key("C") is True
    assert session.scheme == 1
    assert session.handle_key("w") is True
    assert session.viewport.step == pytest.approx(0.01)
    assert session.handle_key("s") is True
    assert session.viewport.step == pytest.approx(0.1)


def test_handle_key_arrow():
    session = Session()
    assert session.handle_key(Direction.RIGHT) is True
    assert session.viewport.min_x == pytest.approx(-1.4)


def test_handle_key_zoom_keys():
    session = Session()
    session.handle_key("Q")
    width = session.viewport.max_x - session.viewport.min_x
    session.handle_key("a")
    assert session.viewport.max_x - session.viewport.min_x > width


@pytest.mark.parametrize("key", ["W", "S", "x", " "])
def test_unbound_keys_ignored(key):
    session = Session()
    assert session.handle_key(key) is False
    assert session.viewport == Viewport()
    assert session.scheme == 0