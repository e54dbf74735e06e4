from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .compiler import Source
from .engine import Engine
from .errors import SourceLoadError


@dataclass(frozen=True)
class RunOptions:
    strict: bool = False


def run_string(
    source: Source,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> None:
    strict = False if options is None else options.strict
    engine = Engine(
        sys.stdin.buffer if stdin is None else stdin,
        sys.stdout.buffer if stdout is None else stdout,
        strict=strict,
    )
    engine.run(source)


def load_source(path: str | Path) -> bytes:
    p = Path(path)
    try:
        return p.read_bytes()
    except OSError as exc:
        raise SourceLoadError(message=f"Unable to read given file name: {p}", path=str(p)) from exc


def run_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> None:
    run_string(load_source(path), stdin=stdin, stdout=stdout, options=options)
