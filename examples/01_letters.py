#!/usr/bin/env python3

import io

from bftape import run_string


def main():
    # 8 * 8 + 1 = 'A', then 'B'
    code = "++++++++[>++++++++<-]>+.+."

    out = io.BytesIO()
    run_string(code, stdout=out)
    print(out.getvalue().decode("ascii"))


if __name__ == "__main__":
    main()
