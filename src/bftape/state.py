from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

TAPE_SIZE = 30000
CELL_MIN = 0
CELL_MAX = 255


def _new_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class MachineState:
    tape: np.ndarray = field(default_factory=_new_tape)
    tape_pointer: int = 0
    instruction_pointer: int = 0
    steps: int = 0

    @property
    def cell(self) -> int:
        return int(self.tape[self.tape_pointer])

    def reset(self) -> None:
        # clear in place: the tape buffer is allocated once per engine
        self.tape.fill(0)
        self.tape_pointer = 0
        self.instruction_pointer = 0
        self.steps = 0
