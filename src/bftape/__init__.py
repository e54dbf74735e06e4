
from .api import RunOptions, run_file, run_string
from .compiler import Instruction, Op, Program, compile_program
from .engine import Engine
from .errors import BFTapeError, FaultKind, SourceLoadError, TapeFault, UnmatchedBracketError
from .state import TAPE_SIZE

__all__ = [
    'Engine',
    'compile_program',
    'Program',
    'Instruction',
    'Op',
    'TAPE_SIZE',
    'FaultKind',
    'BFTapeError',
    'TapeFault',
    'UnmatchedBracketError',
    'SourceLoadError',
    'RunOptions',
    'run_string',
    'run_file',
]
