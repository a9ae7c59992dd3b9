import pytest

from planetaryorbits.engine.inputs import (
    MAX_ZOOM,
    MIN_ZOOM,
    WHEEL_PIXELS_PER_STEP,
    InputState,
    clamp_zoom,
    set_keycode,
    wheel_steps_to_delta,
    zoom_from_wheel,
)


XKB_W, XKB_A, XKB_S, XKB_D = 25, 38, 39, 40
XKB_Z, XKB_Q = 52, 24


def test_set_keycode_toggles_physical_keys():
    state = InputState()
    assert set_keycode(state, XKB_W, True)
    assert set_keycode(state, XKB_D, True)
    assert state == InputState(W=True, D=True)

    assert set_keycode(state, XKB_W, False)
    assert state == InputState(D=True)


@pytest.mark.parametrize("keycode, field", [
    (XKB_W, "W"),
    (XKB_A, "A"),
    (XKB_S, "S"),
    (XKB_D, "D"),
])
def test_each_keycode_maps_to_its_field(keycode, field):
    state = InputState()
    set_keycode(state, keycode, True)
    assert state == InputState(**{field: True})


def test_layout_letters_do_not_matter():
    # On AZERTY the W position types "z" and the Z position types "w";
    # only the W position pans.
    state = InputState()
    assert not set_keycode(state, XKB_Z, True)
    assert not set_keycode(state, XKB_Q, True)
    assert state == InputState()
    assert set_keycode(state, XKB_W, True)
    assert state.W


def test_set_keycode_ignores_unbound_keys():
    state = InputState()
    assert not set_keycode(state, 9, True)
    assert not set_keycode(state, 0, False)
    assert state == InputState()


@pytest.mark.parametrize("held, expected", [
    ({}, (0, 0)),
    ({"W": True}, (0, -1)),
    ({"A": True}, (-1, 0)),
    ({"S": True}, (0, 1)),
    ({"D": True}, (1, 0)),
    ({"W": True, "S": True}, (0, 0)),
    ({"W": True, "D": True}, (1, -1)),
])
def test_pan_vector(held, expected):
    assert InputState(**held).pan_vector() == expected


def test_pan_vector_step():
    assert InputState(A=True, S=True).pan_vector(step=2.5) == (-2.5, 2.5)


def test_wheel_scroll_down_zooms_out():
    assert zoom_from_wheel(2.0, 100) == pytest.approx(1.0)
    assert zoom_from_wheel(2.0, -50) == pytest.approx(2.5)


def test_repeated_zoom_out_never_below_min():
    zoom = 1.0
    for _ in range(100):
        zoom = zoom_from_wheel(zoom, 100)
        assert zoom >= MIN_ZOOM
    assert zoom == MIN_ZOOM


def test_repeated_zoom_in_never_above_max():
    zoom = 1.0
    for _ in range(100):
        zoom = zoom_from_wheel(zoom, -100)
        assert zoom <= MAX_ZOOM
    assert zoom == MAX_ZOOM


def test_clamp_zoom():
    assert clamp_zoom(0.1) == 0.5
    assert clamp_zoom(3) == 3
    assert clamp_zoom(12) == 5.0


def test_wheel_steps_to_delta():
    assert WHEEL_PIXELS_PER_STEP == 100
    assert wheel_steps_to_delta(1) == 100
    assert wheel_steps_to_delta(-0.5) == -50
    assert wheel_steps_to_delta(0) == 0


def test_one_wheel_notch_changes_zoom_by_one():
    assert zoom_from_wheel(3.0, wheel_steps_to_delta(1)) == pytest.approx(2.0)
    assert zoom_from_wheel(3.0, wheel_steps_to_delta(-1)) == pytest.approx(4.0)
