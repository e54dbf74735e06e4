"""
Source -> instruction sequence.

Every source byte yields exactly one instruction, so instruction positions
are source positions. Bytes outside ``><+-.,[]`` become ``NOOP``.

Brackets are matched in a single pass with a stack of pending ``[``
positions. By default an unmatched bracket is not an error here: it keeps a
``None`` target and only faults if the engine actually reaches it. Pass
``strict=True`` to reject unmatched brackets at compile time instead.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .errors import FaultKind, make_bracket_error

Source = Union[bytes, bytearray, memoryview, str]


class Op(enum.Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT_BYTE = '.'
    INPUT_BYTE = ','
    JUMP_IF_ZERO = '['
    JUMP_BACK = ']'
    NOOP = ''


@dataclass(frozen=True)
class Instruction:
    op: Op
    target: Optional[int] = None  # jumps only; None = unmatched bracket

    @property
    def is_jump(self) -> bool:
        return self.op in (Op.JUMP_IF_ZERO, Op.JUMP_BACK)

    def __repr__(self) -> str:
        if self.is_jump:
            return f"{self.op.value}(target: {self.target})"
        return self.op.name


NOOP = Instruction(Op.NOOP)

_SIMPLE = {
    ord('>'): Instruction(Op.MOVE_RIGHT),
    ord('<'): Instruction(Op.MOVE_LEFT),
    ord('+'): Instruction(Op.INCREMENT),
    ord('-'): Instruction(Op.DECREMENT),
    ord('.'): Instruction(Op.OUTPUT_BYTE),
    ord(','): Instruction(Op.INPUT_BYTE),
}
_OPEN = ord('[')
_CLOSE = ord(']')


class Program(Sequence[Instruction]):
    """Immutable, indexable instruction sequence."""

    __slots__ = ('_instructions',)

    def __init__(self, instructions: Sequence[Instruction]):
        self._instructions: Tuple[Instruction, ...] = tuple(instructions)

    def __getitem__(self, index):
        return self._instructions[index]

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __eq__(self, other) -> bool:
        if isinstance(other, Program):
            return self._instructions == other._instructions
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._instructions)

    def __repr__(self) -> str:
        return f"Program({list(self._instructions)!r})"

    def unmatched(self) -> List[int]:
        """Positions of jumps that have no matching bracket, in source order."""
        return [i for i, ins in enumerate(self._instructions) if ins.is_jump and ins.target is None]


def to_bytes(source: Source) -> bytes:
    # str sources are taken byte-for-byte as UTF-8; no character-level handling
    if isinstance(source, str):
        return source.encode('utf-8')
    return bytes(source)


def compile_program(source: Source, *, strict: bool = False) -> Program:
    code = to_bytes(source)
    instructions: List[Instruction] = []
    open_stack: List[int] = []

    for pos, byte in enumerate(code):
        if byte == _OPEN:
            open_stack.append(pos)
            instructions.append(Instruction(Op.JUMP_IF_ZERO))
        elif byte == _CLOSE:
            if open_stack:
                start = open_stack.pop()
                instructions[start] = Instruction(Op.JUMP_IF_ZERO, pos)
                instructions.append(Instruction(Op.JUMP_BACK, start))
            else:
                instructions.append(Instruction(Op.JUMP_BACK))
        else:
            instructions.append(_SIMPLE.get(byte, NOOP))

    program = Program(instructions)
    if strict:
        _check_brackets(program, code)
    return program


def _check_brackets(program: Program, code: bytes) -> None:
    unmatched = program.unmatched()
    if not unmatched:
        return
    pos = unmatched[0]
    if program[pos].op is Op.JUMP_IF_ZERO:
        kind = FaultKind.UNMATCHED_OPENING_BRACKET
    else:
        kind = FaultKind.UNMATCHED_CLOSING_BRACKET
    raise make_bracket_error(kind, position=pos, source=code)
