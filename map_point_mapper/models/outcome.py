"""Result of parsing one input string.

A ``ParseOutcome`` is either a success holding a non-empty ordered list
of coordinate sequences, or a failure holding the error that explains
why nothing could be parsed.  Exactly one of the two is populated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from map_point_mapper.models.coordinate import ModelValidationError

if TYPE_CHECKING:
    from map_point_mapper.core.exceptions import MapperError
    from map_point_mapper.models.coordinate import CoordinateSequence


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Success-or-failure result of a parse.

    Attributes:
        sequences: Parsed coordinate sequences (empty on failure).
        error: The failure reason (``None`` on success).
    """

    sequences: list[CoordinateSequence] = field(default_factory=list)
    error: MapperError | None = None

    def __post_init__(self) -> None:
        if self.sequences and self.error is not None:
            raise ModelValidationError(
                "ParseOutcome", "error", self.error, "must be None when sequences are present"
            )
        if not self.sequences and self.error is None:
            raise ModelValidationError(
                "ParseOutcome", "sequences", self.sequences, "must not be empty without an error"
            )
        if any(not seq for seq in self.sequences):
            raise ModelValidationError(
                "ParseOutcome", "sequences", self.sequences, "must not contain empty sequences"
            )

    @classmethod
    def success(cls, sequences: list[CoordinateSequence]) -> ParseOutcome:
        return cls(sequences=sequences)

    @classmethod
    def failure(cls, error: MapperError) -> ParseOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether the parse produced at least one sequence."""
        return self.error is None

    @property
    def point_count(self) -> int:
        """Total number of coordinates across all sequences."""
        return sum(len(seq) for seq in self.sequences)

    def unwrap(self) -> list[CoordinateSequence]:
        """Return the sequences, or raise the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.sequences
