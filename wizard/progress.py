"""Progress markers shown above the active wizard section."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SectionStatus(StrEnum):
    COMPLETED = "completed"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class SectionProgress:
    """Position of one section relative to the active one."""

    index: int
    status: SectionStatus


def section_progress(current_index: int, section_count: int) -> list[SectionProgress]:
    """Return one progress marker per section."""

    markers: list[SectionProgress] = []
    for index in range(section_count):
        if index < current_index:
            status = SectionStatus.COMPLETED
        elif index == current_index:
            status = SectionStatus.CURRENT
        else:
            status = SectionStatus.UPCOMING
        markers.append(SectionProgress(index=index, status=status))
    return markers


def completion_ratio(current_index: int, section_count: int, *, submitted: bool = False) -> float:
    """Return the share of sections already passed, ``1.0`` once submitted."""

    if submitted or section_count <= 0:
        return 1.0
    return max(0, min(current_index, section_count)) / section_count


__all__ = ["SectionProgress", "SectionStatus", "completion_ratio", "section_progress"]
