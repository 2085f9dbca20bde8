from __future__ import annotations

import argparse
import random
import string
from time import perf_counter

from optedit.align import align


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--length", type=int, default=200)
    ap.add_argument("--pairs", type=int, default=20)
    ap.add_argument("--alphabet", default=string.ascii_lowercase[:4])
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    if args.length < 0 or args.pairs < 1 or not args.alphabet:
        print("Need --length >= 0, --pairs >= 1 and a non-empty --alphabet.")
        return 1

    rng = random.Random(args.seed)
    pairs = [
        (
            "".join(rng.choice(args.alphabet) for _ in range(args.length)),
            "".join(rng.choice(args.alphabet) for _ in range(args.length)),
        )
        for _ in range(args.pairs)
    ]

    t0 = perf_counter()
    for source, target in pairs:
        res = align(source, target)
        print(len(res.operations), res.total_cost)
    dt = perf_counter() - t0
    print(f"Aligned {len(pairs)} pairs of length {args.length} in {dt:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
