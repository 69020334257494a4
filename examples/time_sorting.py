#!/usr/bin/env python3
"""
Compare sorting strategies on freshly shuffled input.

Usage:
    uv run examples/time_sorting.py
    uv run examples/time_sorting.py 50000 20     # size, runs

Environment:
    RUNTIMER_QUIET: Set to 1 to hide the "Finished ..." lines
"""

import random
import sys

from runtimer import measure_with_args, new, time_iterable


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 10_000
    runs = int(sys.argv[2]) if len(sys.argv) > 2 else 10

    def shuffled():
        return random.sample(range(size), size)

    # Builder: label, runs and argument generator assembled step by step
    base = new().runs(runs).with_argument_generator(shuffled)
    base.with_work(sorted).execute_and_print()

    # Direct call: same measurement without the completion notice
    print(measure_with_args("list.sort", runs, shuffled, lambda xs: xs.sort()))

    # Whole pass over an iterable as a single run
    print(time_iterable(range(size), f"sum of squares ({size})", lambda n: n * n))


if __name__ == "__main__":
    main()
