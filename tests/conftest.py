from __future__ import annotations

from datetime import datetime

import pytest
from fakes import RecordingSleep

from flapgate.vector import ReferenceSet, Vector3


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def refs() -> ReferenceSet:
    return ReferenceSet(
        closed=Vector3(0.0, 0.0, 1.0),
        inside=Vector3(0.0, 0.7, 0.7),
        outside=Vector3(0.0, -0.7, 0.7),
    )


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2022, 11, 5, 7, 3, 9)
