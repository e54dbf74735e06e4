from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from .compiler import Instruction, Op, Program, Source, compile_program
from .errors import FaultKind, make_fault
from .state import CELL_MAX, CELL_MIN, TAPE_SIZE, MachineState

logger = logging.getLogger(__name__)

# exceptions a stream may raise for a failed or closed read/write
_STREAM_ERRORS = (OSError, ValueError)


class Engine:
    """
    Tape machine for compiled programs.

    The engine owns one fixed-size tape and two cursors. ``run`` compiles a
    source, executes it until the instruction pointer runs off the end of
    the program or the first fault, and always resets the tape and cursors
    before returning, so one engine can run any number of programs in turn.

    Cells hold 0..255 and the tape pointer stays in 0..TAPE_SIZE-1. Leaving
    either range is a fault; nothing wraps around.

    Values written to ``state.tape`` before ``run`` are seen by that run.
    """

    def __init__(self, input_stream: BinaryIO, output_stream: BinaryIO, *, strict: bool = False):
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.strict = strict
        self.state = MachineState()

    @property
    def tape(self):
        return self.state.tape

    def run(self, source: Source) -> None:
        """Run ``source`` to completion; raises TapeFault on the first fault."""
        try:
            program = compile_program(source, strict=self.strict)
            logger.debug("Running program of %d instructions", len(program))
            self._execute(program)
            logger.debug("Program finished after %d steps", self.state.steps)
        finally:
            self.state.reset()

    def _execute(self, program: Program) -> None:
        state = self.state
        end = len(program)
        while state.instruction_pointer < end:
            self.step(program[state.instruction_pointer])

    def step(self, instruction: Instruction) -> None:
        """Execute one instruction and move the instruction pointer on."""
        state = self.state
        op = instruction.op
        state.steps += 1

        if op is Op.MOVE_RIGHT:
            if state.tape_pointer >= TAPE_SIZE - 1:
                self._fault(FaultKind.TAPE_POINTER_OUT_OF_RANGE)
            state.tape_pointer += 1
        elif op is Op.MOVE_LEFT:
            if state.tape_pointer <= 0:
                self._fault(FaultKind.TAPE_POINTER_OUT_OF_RANGE)
            state.tape_pointer -= 1
        elif op is Op.INCREMENT:
            value = state.cell
            if value >= CELL_MAX:
                self._fault(FaultKind.CELL_VALUE_OUT_OF_RANGE)
            state.tape[state.tape_pointer] = value + 1
        elif op is Op.DECREMENT:
            value = state.cell
            if value <= CELL_MIN:
                self._fault(FaultKind.CELL_VALUE_OUT_OF_RANGE)
            state.tape[state.tape_pointer] = value - 1
        elif op is Op.OUTPUT_BYTE:
            self._write_byte(state.cell)
        elif op is Op.INPUT_BYTE:
            state.tape[state.tape_pointer] = self._read_byte()
        elif op is Op.JUMP_IF_ZERO:
            if instruction.target is None:
                self._fault(FaultKind.UNMATCHED_OPENING_BRACKET)
            if state.cell == 0:
                # resume after the matching ']'
                state.instruction_pointer = instruction.target + 1
                return
        elif op is Op.JUMP_BACK:
            if instruction.target is None:
                self._fault(FaultKind.UNMATCHED_CLOSING_BRACKET)
            # land on the matching '[' so it re-tests the cell
            state.instruction_pointer = instruction.target
            return

        state.instruction_pointer += 1

    def _write_byte(self, value: int) -> None:
        try:
            written = self.output_stream.write(bytes((value,)))
            flush = getattr(self.output_stream, 'flush', None)
            if flush is not None:
                flush()
        except _STREAM_ERRORS as exc:
            self._fault(FaultKind.OUTPUT_STREAM_FAILURE, cause=exc)
        if written == 0:
            self._fault(FaultKind.OUTPUT_STREAM_FAILURE)

    def _read_byte(self) -> int:
        try:
            data = self.input_stream.read(1)
        except _STREAM_ERRORS as exc:
            self._fault(FaultKind.INPUT_STREAM_FAILURE, cause=exc)
        if not data:
            # end of stream
            self._fault(FaultKind.INPUT_STREAM_FAILURE)
        return data[0]

    def _fault(self, kind: FaultKind, *, cause: Optional[BaseException] = None) -> None:
        state = self.state
        fault = make_fault(
            kind,
            instruction_pointer=state.instruction_pointer,
            tape_pointer=state.tape_pointer,
            cell=state.cell,
        )
        logger.info("Run aborted: %s", fault)
        raise fault from cause
