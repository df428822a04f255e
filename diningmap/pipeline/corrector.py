"""Coordinate correction for coarse geocoding results.

Geocoders tend to answer with a city-level point for small campus eateries,
so only the whole-degree part of each coordinate is trusted.  The fractional
part comes from a hand-maintained :class:`Offset` per location:

    latitude  = round(coarse latitude)  + offset.latitude
    longitude = round(coarse longitude) - offset.longitude

Offsets are looked up by label through a :class:`CorrectionTable`.  A plain
positional sequence is still accepted, but its length must match the rows
exactly.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union

from diningmap.errors import AlignmentError
from diningmap.pipeline.cleaner import normalize_label
from diningmap.pipeline.models import Coordinates, DiningLocationRow, Offset


def correct_coordinate(coarse: Coordinates, offset: Offset) -> Coordinates:
    """Apply *offset* to the rounded *coarse* coordinate."""
    return Coordinates(
        latitude=round(coarse.latitude) + offset.latitude,
        longitude=round(coarse.longitude) - offset.longitude,
    )


class CorrectionTable:
    """Label-keyed offsets.  Labels are matched via ``normalize_label``."""

    def __init__(self, offsets: dict[str, Offset] | None = None) -> None:
        self._offsets: dict[str, Offset] = {}
        self._labels: dict[str, str] = {}
        for label, offset in (offsets or {}).items():
            self.add(label, offset)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float, float]]) -> CorrectionTable:
        """Build from ``(label, latitude_offset, longitude_offset)`` triples."""
        table = cls()
        for label, lat, lon in pairs:
            table.add(label, Offset(lat, lon))
        return table

    @classmethod
    def from_vector(
        cls, labels: Sequence[str], offsets: Sequence[Offset]
    ) -> CorrectionTable:
        """Key a positional correction vector by the labels it was written for.

        Raises:
            AlignmentError: If the two sequences differ in length.
        """
        if len(labels) != len(offsets):
            raise AlignmentError(
                f"{len(offsets)} corrections for {len(labels)} locations"
            )
        return cls(dict(zip(labels, offsets)))

    def add(self, label: str, offset: Offset) -> None:
        key = normalize_label(label)
        if key in self._offsets:
            raise ValueError(f"Duplicate correction for {label!r}")
        self._offsets[key] = offset
        self._labels[key] = label

    def lookup(self, label: str) -> Offset:
        """Return the offset for *label*.

        Raises:
            AlignmentError: If no correction exists for *label*.
        """
        try:
            return self._offsets[normalize_label(label)]
        except KeyError:
            raise AlignmentError(f"No correction for {label!r}") from None

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and normalize_label(label) in self._offsets

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels.values())


Corrections = Union[CorrectionTable, Sequence[Offset]]


def _offsets_for(rows: Sequence[DiningLocationRow], corrections: Corrections) -> list[Offset]:
    if isinstance(corrections, CorrectionTable):
        return [corrections.lookup(row.label) for row in rows]
    if len(corrections) != len(rows):
        raise AlignmentError(
            f"Correction vector has {len(corrections)} entries "
            f"for {len(rows)} rows"
        )
    return list(corrections)


def apply_corrections(
    rows: Sequence[DiningLocationRow],
    coarse: Sequence[Coordinates],
    corrections: Corrections,
) -> list[DiningLocationRow]:
    """Fill every row with its corrected coordinate and return the rows.

    Raises:
        AlignmentError: If *coarse* or a positional *corrections* vector is
            not exactly one entry per row, or a row has no label-keyed
            correction.  No row is modified in that case.
        ValueError: If any row already has coordinates.  No row is modified.
    """
    if len(coarse) != len(rows):
        raise AlignmentError(
            f"{len(coarse)} geocoded coordinates for {len(rows)} rows"
        )
    located = [row.label for row in rows if row.is_located]
    if located:
        raise ValueError(f"Coordinates already set for {', '.join(map(repr, located))}")
    offsets = _offsets_for(rows, corrections)
    corrected = [correct_coordinate(point, offset) for point, offset in zip(coarse, offsets)]

    for row, point in zip(rows, corrected):
        row.set_coordinates(point)
    return list(rows)
