"""
Benchmark: parse time against operator chain length.

The parser hands token lists around by slicing, so every consumed token copies
the rest of the stream. This script measures how `syntax` scales with the
number of tokens to keep that cost visible.

Usage:
    python benchmarks/bench_chain_length.py
"""

import timeit

from pyarith.Grammar import syntax
from pyarith.Lexer import lex


def bench_chain(op: str, sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark syntax() on `1 op 1 op ... op 1` with n operands."""
    results = {}
    for n in sizes:
        tokens, err = lex(f" {op} ".join(["1"] * n))
        if err:
            raise SystemExit(str(err))
        t = timeit.timeit(lambda: syntax(tokens), number=repeats)
        results[n] = t / repeats
    return results


def bench_lex(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark lex() alone on the same inputs."""
    results = {}
    for n in sizes:
        data = " + ".join(["1"] * n)
        t = timeit.timeit(lambda: lex(data), number=repeats)
        results[n] = t / repeats
    return results


def format_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:8.1f} us"
    elif seconds < 1:
        return f"{seconds * 1e3:8.2f} ms"
    else:
        return f"{seconds:8.3f}  s"


def print_results(name: str, results: dict[int, float]) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")
    print(f"  {'Size':>10}  {'Time':>12}  {'Ratio vs smallest':>18}")
    print(f"  {'-'*10}  {'-'*12}  {'-'*18}")

    baseline = list(results.values())[0]
    for size, elapsed in results.items():
        ratio = elapsed / baseline if baseline > 0 else 0
        print(f"  {size:>10,}  {format_time(elapsed)}  {ratio:>17.1f}x")


def main() -> None:
    sizes = [250, 500, 1_000, 2_000, 4_000]

    print("pyarith Parsing Benchmark")
    print("=" * 60)

    suites = [
        ("lex(1 + 1 + ...)", bench_lex),
        ("syntax(1 + 1 + ...)", lambda sz: bench_chain("+", sz)),
        ("syntax(1 * 1 * ...)", lambda sz: bench_chain("*", sz)),
    ]

    for name, fn in suites:
        print_results(name, fn(sizes))

    print()


if __name__ == "__main__":
    main()
