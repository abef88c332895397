from __future__ import annotations

import pytest

from wizard.progress import SectionStatus, completion_ratio, section_progress


def test_section_progress_marks_relative_positions() -> None:
    statuses = [marker.status for marker in section_progress(1, 4)]

    assert statuses == [
        SectionStatus.COMPLETED,
        SectionStatus.CURRENT,
        SectionStatus.UPCOMING,
        SectionStatus.UPCOMING,
    ]


def test_section_progress_first_section() -> None:
    markers = section_progress(0, 2)

    assert [marker.index for marker in markers] == [0, 1]
    assert markers[0].status is SectionStatus.CURRENT


@pytest.mark.parametrize(
    ("index", "count", "submitted", "expected"),
    [
        (0, 4, False, 0.0),
        (2, 4, False, 0.5),
        (3, 4, True, 1.0),
        (0, 0, False, 1.0),
    ],
)
def test_completion_ratio(index: int, count: int, submitted: bool, expected: float) -> None:
    assert completion_ratio(index, count, submitted=submitted) == expected
