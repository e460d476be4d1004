import math


def clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def wrap(x: float, lo: float, hi: float) -> float:
    """Wrap ``x`` into the half-open interval [lo, hi)."""
    span = hi - lo
    return float(lo + (x - lo) % span)


def wrap_angle(a: float) -> float:
    return wrap(a, -math.pi, math.pi)


def heading(rotation: float):
    """Unit vector an animal with ``rotation`` moves along (rotation 0 -> +y)."""
    return -math.sin(rotation), math.cos(rotation)
