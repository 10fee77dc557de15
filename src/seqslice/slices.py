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

from dataclasses import dataclass

from bitarray import bitarray
from msgpack import packb, unpackb  # type: ignore


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Slice:
    """
    An immutable `start:stop:step` triple.

    The `stop` can be `None` when the `step` is negative, meaning the slice includes the first index.

    :param start: the first selected index
    :param stop: the exclusive end index, or `None`
    :param step: the non-zero increment
    """

    start: int
    stop: int | None
    step: int = 1

    def __post_init__(self):
        if not _is_int(self.start):
            raise TypeError(f"Invalid type: {type(self.start)} for start {self.start}.")
        if self.stop is not None and not _is_int(self.stop):
            raise TypeError(f"Invalid type: {type(self.stop)} for stop {self.stop}.")
        if not _is_int(self.step):
            raise TypeError(f"Invalid type: {type(self.step)} for step {self.step}.")
        if self.step == 0:
            raise ValueError("Step must not be zero.")
        if self.stop is None and self.step > 0:
            raise ValueError("An unbounded stop requires a negative step.")

    def __str__(self):
        return f"Slice({self.start},{'null' if self.stop is None else self.stop},{self.step})"

    def __len__(self):
        return len(self.indices())

    def to_builtin(self) -> slice:
        return slice(self.start, self.stop, self.step)

    def indices(self) -> range:
        return range(self.start, -1 if self.stop is None else self.stop, self.step)

    def to_mask(self, length: int) -> bitarray:
        """
        Mark the selected indices of a container with the given length.

        :param length: number of elements in the container
        :return: a `bitarray` with one bit per element, set if the element is selected
        """
        mask: bitarray = bitarray(length)
        mask.setall(0)
        mask[self.to_builtin()] = 1
        return mask

    def to_obj(self) -> dict:
        return {"type": "Slice", "data": [self.start, self.stop, self.step]}

    @classmethod
    def from_obj(cls, obj) -> Slice:
        if not isinstance(obj, dict) or obj.get("type") != "Slice":
            raise ValueError(f"Invalid: {obj}.")

        if not isinstance(data := obj.get("data"), (list, tuple)) or len(data) != 3:
            raise ValueError(f"Invalid: {obj}.")

        return cls(*data)

    def packb(self) -> bytes:
        return packb(self.to_obj())

    @classmethod
    def unpackb(cls, data: bytes) -> Slice:
        return cls.from_obj(unpackb(data))
