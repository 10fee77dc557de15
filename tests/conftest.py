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

import random

import pytest


@pytest.fixture(scope="function")
def rng():
    return random.Random(20240101)


@pytest.fixture(scope="function", params=[0, 1, 2, 9, 10])
def length(request):
    return request.param


@pytest.fixture(scope="function")
def non_strict(monkeypatch):
    from seqslice import config

    monkeypatch.setattr(config, "strict", False)
