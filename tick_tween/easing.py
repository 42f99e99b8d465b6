"""Easing functions for tween interpolation.

Every curve takes ``(t, b, c, d)``: time elapsed inside the active
duration, start value, change in value (end - start) and total duration.
``f(0, b, c, d)`` is ``b`` and ``f(d, b, c, d)`` is ``b + c``. Elastic and
back curves overshoot in between; they hit both ends through explicit
branches rather than the general formula.
"""
from __future__ import annotations

import math
from typing import Callable

from tick_tween.types import UnknownEasingError

EasingFunction = Callable[..., float]

BACK_OVERSHOOT = 1.70158
_BACK_IN_OUT_SCALE = 1.525

_HALF_PI = math.pi / 2
_TWO_PI = math.pi * 2


def linear(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


# --- Quadratic ---

def ease_in_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def ease_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def ease_in_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


# --- Cubic ---

def ease_in_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t + b


def ease_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t + 1) + b


def ease_in_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t + 2) + b


# --- Quartic ---

def ease_in_quart(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t + b


def ease_out_quart(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return -c * (t * t * t * t - 1) + b


def ease_in_out_quart(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t + b
    t -= 2
    return -c / 2 * (t * t * t * t - 2) + b


# --- Quintic ---

def ease_in_quint(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t * t + b


def ease_out_quint(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t * t * t + 1) + b


def ease_in_out_quint(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t * t * t + 2) + b


# --- Sine ---

def ease_in_sine(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * _HALF_PI) + c + b


def ease_out_sine(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * _HALF_PI) + b


def ease_in_out_sine(t: float, b: float, c: float, d: float) -> float:
    return -c / 2 * (math.cos(math.pi * t / d) - 1) + b


# --- Exponential ---

def ease_in_expo(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    return c * 2 ** (10 * (t / d - 1)) + b


def ease_out_expo(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * (-(2 ** (-10 * t / d)) + 1) + b


def ease_in_out_expo(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    t /= d / 2
    if t < 1:
        return c / 2 * 2 ** (10 * (t - 1)) + b
    t -= 1
    return c / 2 * (-(2 ** (-10 * t)) + 2) + b


# --- Circular ---

def ease_in_circ(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * (math.sqrt(1 - t * t) - 1) + b


def ease_out_circ(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * math.sqrt(1 - t * t) + b


def ease_in_out_circ(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return -c / 2 * (math.sqrt(1 - t * t) - 1) + b
    t -= 2
    return c / 2 * (math.sqrt(1 - t * t) + 1) + b


# --- Elastic ---

def _elastic_shape(
    c: float, period: float, amplitude: float | None
) -> tuple[float, float]:
    """Resolve (amplitude, phase shift) for the elastic curves.

    An amplitude smaller than |c| cannot reach the end value, so it falls
    back to c with a quarter-period shift.
    """
    if amplitude is None or amplitude < abs(c):
        return c, period / 4
    return amplitude, period / _TWO_PI * math.asin(c / amplitude)


def ease_in_elastic(
    t: float,
    b: float,
    c: float,
    d: float,
    amplitude: float | None = None,
    period: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p = period or d * 0.3
    a, s = _elastic_shape(c, p, amplitude)
    t -= 1
    return -(a * 2 ** (10 * t) * math.sin((t * d - s) * _TWO_PI / p)) + b


def ease_out_elastic(
    t: float,
    b: float,
    c: float,
    d: float,
    amplitude: float | None = None,
    period: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p = period or d * 0.3
    a, s = _elastic_shape(c, p, amplitude)
    return a * 2 ** (-10 * t) * math.sin((t * d - s) * _TWO_PI / p) + c + b


def ease_in_out_elastic(
    t: float,
    b: float,
    c: float,
    d: float,
    amplitude: float | None = None,
    period: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d / 2
    if t == 2:
        return b + c
    p = period or d * (0.3 * 1.5)
    a, s = _elastic_shape(c, p, amplitude)
    t -= 1
    if t < 0:
        return -0.5 * (a * 2 ** (10 * t) * math.sin((t * d - s) * _TWO_PI / p)) + b
    return a * 2 ** (-10 * t) * math.sin((t * d - s) * _TWO_PI / p) * 0.5 + c + b


# --- Back ---

def ease_in_back(
    t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT
) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    t /= d
    return c * t * t * ((s + 1) * t - s) + b


def ease_out_back(
    t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT
) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    t = t / d - 1
    return c * (t * t * ((s + 1) * t + s) + 1) + b


def ease_in_out_back(
    t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT
) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    s *= _BACK_IN_OUT_SCALE
    t /= d / 2
    if t < 1:
        return c / 2 * (t * t * ((s + 1) * t - s)) + b
    t -= 2
    return c / 2 * (t * t * ((s + 1) * t + s) + 2) + b


# --- Bounce ---

def ease_out_bounce(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    t /= d
    if t < 1 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def ease_in_bounce(t: float, b: float, c: float, d: float) -> float:
    return c - ease_out_bounce(d - t, 0, c, d) + b


def ease_in_out_bounce(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2:
        return ease_in_bounce(t * 2, 0, c, d) * 0.5 + b
    return ease_out_bounce(t * 2 - d, 0, c, d) * 0.5 + c * 0.5 + b


EASINGS: dict[str, EasingFunction] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_quart": ease_in_quart,
    "ease_out_quart": ease_out_quart,
    "ease_in_out_quart": ease_in_out_quart,
    "ease_in_quint": ease_in_quint,
    "ease_out_quint": ease_out_quint,
    "ease_in_out_quint": ease_in_out_quint,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_expo": ease_in_expo,
    "ease_out_expo": ease_out_expo,
    "ease_in_out_expo": ease_in_out_expo,
    "ease_in_circ": ease_in_circ,
    "ease_out_circ": ease_out_circ,
    "ease_in_out_circ": ease_in_out_circ,
    "ease_in_elastic": ease_in_elastic,
    "ease_out_elastic": ease_out_elastic,
    "ease_in_out_elastic": ease_in_out_elastic,
    "ease_in_back": ease_in_back,
    "ease_out_back": ease_out_back,
    "ease_in_out_back": ease_in_out_back,
    "ease_in_bounce": ease_in_bounce,
    "ease_out_bounce": ease_out_bounce,
    "ease_in_out_bounce": ease_in_out_bounce,
}


def get_easing(name: str) -> EasingFunction:
    """Look up an easing by name, raising UnknownEasingError if absent."""
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownEasingError(name) from None
