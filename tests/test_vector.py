from __future__ import annotations

import math

import pytest

from flapgate.vector import FlapState, ReferenceSet, Vector3


def test_arithmetic_is_component_wise() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, -1.0, 2.0)

    assert a + b == Vector3(1.5, 1.0, 5.0)
    assert a - b == Vector3(0.5, 3.0, 1.0)
    assert a / 2 == Vector3(0.5, 1.0, 1.5)


def test_distance_is_euclidean() -> None:
    assert Vector3(1.0, 2.0, 2.0).length() == 3.0
    assert Vector3(0.0, 0.0, 1.0).distance_to(Vector3(0.0, 1.0, 0.0)) == pytest.approx(math.sqrt(2))


def test_vector_is_immutable() -> None:
    v = Vector3(1.0, 1.0, 1.0)
    with pytest.raises(AttributeError):
        v.x = 2.0  # type: ignore[misc]


def test_row_formats_two_decimals() -> None:
    assert Vector3(0.123, -1.0, 0.999).row("Inside") == " Inside  0.12 -1.00  1.00"


def test_reference_set_indexes_by_state(refs: ReferenceSet) -> None:
    assert refs[FlapState.CLOSED] is refs.closed
    assert refs[FlapState.INSIDE] is refs.inside
    assert refs[FlapState.OUTSIDE] is refs.outside


def test_reference_set_rejects_missing_vector() -> None:
    with pytest.raises(TypeError):
        ReferenceSet(closed=Vector3(), inside=Vector3(), outside=None)  # type: ignore[arg-type]


def test_from_mapping_requires_all_states() -> None:
    with pytest.raises(KeyError):
        ReferenceSet.from_mapping({FlapState.CLOSED: Vector3(), FlapState.INSIDE: Vector3()})


def test_state_tags() -> None:
    assert [s.tag for s in FlapState] == ["C", "I", "O"]
