from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class FaultKind(enum.Enum):
    INPUT_STREAM_FAILURE = 'Failed to read user input'
    OUTPUT_STREAM_FAILURE = 'Failed to write data to output'
    TAPE_POINTER_OUT_OF_RANGE = 'Memory address out of boundaries'
    CELL_VALUE_OUT_OF_RANGE = 'Memory data greater than 255 or less than 0'
    UNMATCHED_OPENING_BRACKET = 'Missing right bracket'
    UNMATCHED_CLOSING_BRACKET = 'Missing left bracket'

    @property
    def message(self) -> str:
        return self.value


@dataclass
class BFTapeError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class TapeFault(BFTapeError):
    kind: FaultKind
    instruction_pointer: int
    tape_pointer: int
    cell: int


@dataclass
class UnmatchedBracketError(BFTapeError):
    kind: FaultKind
    position: int


@dataclass
class SourceLoadError(BFTapeError):
    path: str


def make_fault(
    kind: FaultKind,
    *,
    instruction_pointer: int,
    tape_pointer: int,
    cell: int,
) -> TapeFault:
    return TapeFault(
        message=f"{kind.message} (instruction {instruction_pointer}, cell {tape_pointer})",
        kind=kind,
        instruction_pointer=instruction_pointer,
        tape_pointer=tape_pointer,
        cell=cell,
    )


def make_bracket_error(kind: FaultKind, *, position: int, source: Optional[bytes] = None) -> UnmatchedBracketError:
    """Build a strict-mode bracket error, quoting the offending line when the source is known."""
    where = f"position {position}"
    if source is not None:
        line_no = source.count(b'\n', 0, position) + 1
        line_start = source.rfind(b'\n', 0, position) + 1
        where = f"line {line_no}, column {position - line_start + 1}"
    return UnmatchedBracketError(
        message=f"CompileError: {kind.message} ({where})",
        kind=kind,
        position=position,
    )
