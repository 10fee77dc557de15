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

import logging

from .config import config, configure
from .index import ResolvedSlice, SliceError, SliceFailure, resolve
from .slices import Slice

__all__ = [
    "ResolvedSlice",
    "Slice",
    "SliceError",
    "SliceFailure",
    "config",
    "configure",
    "resolve",
    "seq2slice",
]

logger = logging.getLogger(__name__)


def seq2slice(text: str, length: int, strict: bool | None = None) -> Slice:
    """
    This function is used to convert a subsequence string to a `Slice` object.

    A subsequence string has the form `start:stop:step`.
    The `start` is inclusive and the `stop` is exclusive.
    All fields are optional, missing bounds default to the index extremes in the direction of the step,
    and a missing step defaults to one.
    Negative bounds count from the end, and the `end` keyword supports `end`, `end-k` and `end/d`.
    When dividing with a negative step, `end` is the last index, and the quotient is rounded down.

    When `length` is zero, the result is always `Slice(0, 0, step)`.

    :param text: the subsequence string, for example `end-2::-1`
    :param length: number of elements in the container
    :param strict: switch on to reject bounds outside the container, `None` to use `config.strict`
    :return: a `Slice` object
    :raise TypeError: if any argument has the wrong type, or the string is not a valid subsequence
    :raise ValueError: if the increment is zero, or the slice exceeds the index bounds in strict mode
    """
    if not isinstance(text, str):
        raise TypeError(
            f"invalid argument. First argument must be a valid subsequence string. Value: `{text}`."
        )

    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise TypeError(
            f"invalid argument. Second argument must be a nonnegative integer. Value: `{length}`."
        )

    if strict is None:
        strict = config.strict
    elif not isinstance(strict, bool):
        raise TypeError(
            f"invalid argument. Third argument must be a boolean. Value: `{strict}`."
        )

    result = resolve(text, length, strict)

    if isinstance(result, ResolvedSlice):
        return Slice(result.start, result.stop, result.step)

    logger.debug(
        "Failed to resolve `%s` with length %d (strict=%s): %s.",
        text,
        length,
        strict,
        result.code.value,
    )

    if result.code is SliceError.INVALID_INCREMENT:
        raise ValueError(
            f"invalid argument. A subsequence string must have a non-zero increment. Value: `{text}`."
        )

    if result.code is SliceError.OUT_OF_BOUNDS:
        raise ValueError(
            f"invalid argument. The subsequence string resolves to a slice which exceeds index bounds. Value: `{text}`."
        )

    raise TypeError(
        f"invalid argument. First argument must be a valid subsequence string. Value: `{text}`."
    )
