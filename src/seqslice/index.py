#  Copyright (C) 2024-2026 Theodore Chang
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <http://www.gnu.org/licenses/>.

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_RE_INTEGER = re.compile(r"-?[0-9]+")
_RE_END = re.compile(r"end(?:([-/])([0-9]+))?")

# `int()` refuses decimal strings longer than `sys.get_int_max_str_digits()`
_DIGITS_PER_CHUNK = 4000


class SliceError(Enum):
    INVALID_SUBSEQUENCE = "ERR_SLICE_INVALID_SUBSEQUENCE"
    INVALID_INCREMENT = "ERR_SLICE_INVALID_INCREMENT"
    OUT_OF_BOUNDS = "ERR_SLICE_OUT_OF_BOUNDS"


@dataclass(frozen=True)
class ResolvedSlice:
    """
    A fully resolved `start:stop:step` triple.

    A `stop` of `None` only appears with a negative `step` and means the slice runs down to index 0 inclusive.
    """

    start: int
    stop: int | None
    step: int


@dataclass(frozen=True)
class SliceFailure:
    code: SliceError


def _to_int(literal: str) -> int:
    digits: str = literal.lstrip("-")
    value: int = 0
    for i in range(0, len(digits), _DIGITS_PER_CHUNK):
        chunk = digits[i : i + _DIGITS_PER_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if literal.startswith("-") else value


def _parse_step(field: str) -> int:
    if field == "":
        return 1
    if _RE_INTEGER.fullmatch(field) is None:
        raise ValueError(f"Invalid increment: {field}.")
    return _to_int(field)


def _parse_bound(field: str) -> tuple[str, int] | None:
    """
    Parse a start or stop field.

    :param field: the raw field
    :return: `None` for an empty field, `("", value)` for an integer literal,
             `("-", k)` for `end` and `end-k`, `("/", d)` for `end/d`
    """
    if field == "":
        return None

    if _RE_INTEGER.fullmatch(field):
        return "", _to_int(field)

    if (match := _RE_END.fullmatch(field)) is None:
        raise ValueError(f"Invalid bound: {field}.")

    operator, operand = match.groups()
    if operator is None:
        return "-", 0

    if operator == "/" and _to_int(operand) == 0:
        raise ValueError(f"Division by zero: {field}.")

    return operator, _to_int(operand)


def _resolve_bound(bound: tuple[str, int], length: int, step: int) -> int:
    operator, value = bound

    if operator == "":
        return length + value if value < 0 else value

    if operator == "-":
        return length - value

    # walking backwards, `end` is the last index so that `end/d` lands on an element
    return (length - 1 if step < 0 else length) // value


def resolve(text: str, length: int, strict: bool) -> ResolvedSlice | SliceFailure:
    """
    Resolve a subsequence string against a container of the given length.

    The string has the form `start:stop:step` where every field is optional.
    The bounds may be signed integers or use the `end` keyword as `end`, `end-k` or `end/d`.
    Division rounds down.

    With `strict` turned off, out-of-range bounds are clamped into the index bounds
    so that `:n` and `n:` always partition the container.
    With `strict` turned on, out-of-range bounds are reported as `SliceError.OUT_OF_BOUNDS`.

    :param text: the subsequence string
    :param length: number of elements in the container
    :param strict: whether to report out-of-range bounds instead of clamping them
    :return: a `ResolvedSlice` on success, otherwise a `SliceFailure`
    """
    parts: list = text.split(":")

    if len(parts) > 3:
        return SliceFailure(SliceError.INVALID_SUBSEQUENCE)

    start_str, stop_str, step_str = parts + [""] * (3 - len(parts))

    try:
        step = _parse_step(step_str)
        start = _parse_bound(start_str)
        stop = _parse_bound(stop_str)
    except ValueError:
        return SliceFailure(SliceError.INVALID_SUBSEQUENCE)

    if step == 0:
        return SliceFailure(SliceError.INVALID_INCREMENT)

    if length == 0:
        return ResolvedSlice(0, 0, step)

    first: int = 0 if step > 0 else length - 1
    if start is not None:
        first = _resolve_bound(start, length, step)
        if step > 0:
            if first < 0 or first > length:
                if strict:
                    return SliceFailure(SliceError.OUT_OF_BOUNDS)
                first = min(max(first, 0), length)
        elif first < 0:
            if strict:
                return SliceFailure(SliceError.OUT_OF_BOUNDS)
            first = 0
        elif first >= length:
            if strict and first > length:
                return SliceFailure(SliceError.OUT_OF_BOUNDS)
            first = length - 1

    last: int | None = length if step > 0 else None
    if stop is not None:
        last = _resolve_bound(stop, length, step)
        if last > length:
            if strict:
                return SliceFailure(SliceError.OUT_OF_BOUNDS)
            last = length
        elif last < 0:
            if step > 0:
                if strict:
                    return SliceFailure(SliceError.OUT_OF_BOUNDS)
                last = 0
            else:
                if strict and last < -1:
                    return SliceFailure(SliceError.OUT_OF_BOUNDS)
                last = None

    return ResolvedSlice(first, last, step)
