from __future__ import annotations

import math

import pytest

from storely.detection import EqualityChangeDetection, IdentityChangeDetection, ValueChangeDetector


@pytest.mark.parametrize(
    ("new_value", "previous_value", "expected"),
    [
        (1, 1, False),
        (1, 2, True),
        ("a", "a", False),
        (None, None, False),
        (0, None, True),
        (1, True, True),
        (1, 1.0, True),
        (math.nan, math.nan, True),
    ],
)
def test_identity_detection_primitives(new_value: object, previous_value: object, expected: bool) -> None:
    assert IdentityChangeDetection().value_changed(new_value, previous_value) is expected


def test_identity_detection_compares_objects_by_identity() -> None:
    detector = IdentityChangeDetection()
    value = [1, 2]

    assert detector.value_changed(value, value) is False
    assert detector.value_changed([1, 2], value) is True


def test_equality_detection_compares_structurally() -> None:
    detector = EqualityChangeDetection()

    assert detector.value_changed({"a": [1]}, {"a": [1]}) is False
    assert detector.value_changed({"a": [1]}, {"a": [2]}) is True
    assert detector.value_changed(1, True) is True
    assert detector.value_changed([], None) is True


def test_detectors_satisfy_protocol() -> None:
    assert isinstance(IdentityChangeDetection(), ValueChangeDetector)
    assert isinstance(EqualityChangeDetection(), ValueChangeDetector)
