"""Boundary validation for player input.

Payloads arrive either as form data (``POST /keypress``, ``POST /click``) or
as Socket.IO event data; both are plain mappings.
"""
import math


class InputError(ValueError):
    pass


def parse_key_press(data) -> str:
    key = (data or {}).get('last_key')
    if not isinstance(key, str) or not key:
        raise InputError('last_key is required')
    return key


def _unit_float(data, name: str) -> float:
    raw = (data or {}).get(name)
    if raw is None or isinstance(raw, bool):
        raise InputError(f'{name} is required')
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InputError(f'{name} must be a number')
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InputError(f'{name} must be between 0 and 1')
    return value


def parse_click(data):
    return _unit_float(data, 'x'), _unit_float(data, 'y')
