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

import random


def generate_random_bound(length: int, rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    seed = rng.random()

    if seed < 0.2:
        return ""

    if seed < 0.6:
        return str(rng.randint(-2 * length - 2, 2 * length + 2))

    if seed < 0.7:
        return "end"

    if seed < 0.85:
        return f"end-{rng.randint(0, 2 * length + 2)}"

    return f"end/{rng.randint(1, length + 2)}"


def generate_random_step(rng: random.Random | None = None, allow_zero: bool = False) -> str:
    rng = rng or random.Random()
    seed = rng.random()

    if seed < 0.3:
        return ""

    step: int = rng.choice([-3, -2, -1, 1, 2, 3])
    if allow_zero and seed < 0.4:
        step = 0

    return str(step)


def generate_random_subsequence(length: int, rng: random.Random | None = None, allow_zero: bool = False) -> str:
    """
    Generate a syntactically valid subsequence string.

    :param length: the container length the bounds are drawn around
    :param rng: the random number generator to draw from
    :param allow_zero: switch on to occasionally produce a zero increment
    :return: a string with one or two colons
    """
    rng = rng or random.Random()

    start = generate_random_bound(length, rng)
    stop = generate_random_bound(length, rng)

    if rng.random() < 0.5:
        return f"{start}:{stop}"

    return f"{start}:{stop}:{generate_random_step(rng, allow_zero)}"


def generate_invalid_subsequence(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()

    def generate_token():
        return rng.choice(["x", "1.5", "+1", "--1", " 1", "end*2", "end-1/2", "end+1", "end/0", "3-1", "End", "end-"])

    seed = rng.random()

    if seed < 0.3:
        return ":".join(generate_token() if rng.random() < 0.5 else "" for _ in range(rng.randint(4, 6)))

    if seed < 0.65:
        return f"{generate_token()}:{rng.randint(-5, 5)}"

    return f"::{rng.choice(['end', 'end-1', 'x', '1.0', '+'])}"


def split_points(length: int) -> list[int]:
    """
    All split points worth checking for a container of the given length, including out-of-range ones.
    """
    return list(range(-2 * length - 2, 2 * length + 3))
