from dataclasses import dataclass

MIN_ZOOM = 0.5
MAX_ZOOM = 5.0

## Zoom change per unit of wheel delta (browser-style pixel deltas).
WHEEL_ZOOM_RATE = 0.01

## World units the camera moves per held key per tick.
PAN_STEP = 1.0

## GTK reports scroll in wheel steps, the zoom rate is tuned for pixel deltas.
WHEEL_PIXELS_PER_STEP = 100


@dataclass
class InputState:
    """Held direction keys, sampled once per tick."""
    W: bool = False
    A: bool = False
    S: bool = False
    D: bool = False

    def pan_vector(self, step:float=PAN_STEP) -> tuple[float, float]:
        dx, dy = 0.0, 0.0
        if self.W:
            dy -= step
        if self.A:
            dx -= step
        if self.S:
            dy += step
        if self.D:
            dx += step
        return dx, dy


## XKB hardware keycodes (evdev scancode + 8) of the W/A/S/D key positions.
## They name the physical key, so the pan keys stay put on AZERTY or Dvorak.
KEYCODE_BINDINGS = {
    25: "W",
    38: "A",
    39: "S",
    40: "D",
}


def set_keycode(state:InputState, keycode:int, pressed:bool) -> bool:
    """Record a press/release by physical key. Returns False for unbound keycodes."""
    field_name = KEYCODE_BINDINGS.get(keycode)
    if field_name is None:
        return False
    setattr(state, field_name, pressed)
    return True


def clamp_zoom(zoom:float) -> float:
    return max(MIN_ZOOM, min(zoom, MAX_ZOOM))


def wheel_steps_to_delta(steps:float) -> float:
    """Convert GTK wheel steps into the pixel-style delta zoom_from_wheel expects."""
    return steps * WHEEL_PIXELS_PER_STEP


def zoom_from_wheel(zoom:float, delta_y:float, rate:float=WHEEL_ZOOM_RATE) -> float:
    """Scrolling down (positive delta) zooms out."""
    return clamp_zoom(zoom - delta_y * rate)
