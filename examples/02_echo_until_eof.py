#!/usr/bin/env python3

import io

from bftape import Engine, FaultKind, TapeFault


def main():
    # echoes forever; the run ends with an input fault once the data runs out
    code = "+[,.]"

    out = io.BytesIO()
    engine = Engine(io.BytesIO(b"hello\n"), out)
    try:
        engine.run(code)
    except TapeFault as fault:
        if fault.kind is not FaultKind.INPUT_STREAM_FAILURE:
            raise
    print(out.getvalue().decode("ascii"), end="")


if __name__ == "__main__":
    main()
