"""Benchmark – misst die Laufzeit von calculate_folder_size() über mehrere Durchläufe."""

import argparse
import sys
import time
from dataclasses import dataclass

from tqdm import tqdm

from .analyzer import AggregateResult, calculate_folder_size
from .utils import format_size
from .walker import RootNotADirectoryError, RootNotFoundError

DEFAULT_SAMPLES = 10


@dataclass
class BenchmarkResult:
    samples: int
    mean: float   # Sekunden
    best: float
    worst: float
    result: AggregateResult


def run_benchmark(
    folder: str,
    samples: int = DEFAULT_SAMPLES,
    workers: int | None = None,
    progress: bool = False,
) -> BenchmarkResult:
    """Führt den Scan ``samples``-mal aus und misst die Zeiten."""
    if samples < 1:
        raise ValueError(f"samples muss >= 1 sein, nicht {samples}")

    timings = []
    result = AggregateResult()
    for _ in tqdm(range(samples), desc="Benchmark", unit="Lauf", disable=not progress):
        start = time.perf_counter()
        result = calculate_folder_size(folder, workers=workers)
        timings.append(time.perf_counter() - start)

    return BenchmarkResult(
        samples=samples,
        mean=sum(timings) / samples,
        best=min(timings),
        worst=max(timings),
        result=result,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark für calculate_folder_size()")
    parser.add_argument("path", help="Zu scannender Ordner")
    parser.add_argument("-n", "--samples", type=int, default=DEFAULT_SAMPLES, help="Anzahl Durchläufe")
    parser.add_argument("-j", "--workers", type=int, default=None, help="Anzahl Worker-Threads")
    args = parser.parse_args(argv)

    try:
        bench = run_benchmark(args.path, samples=args.samples, workers=args.workers, progress=True)
    except (RootNotFoundError, RootNotADirectoryError) as e:
        print(f"Fehler: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Fehler: {e}", file=sys.stderr)
        return 2

    print(f"calculate_folder_size: {bench.samples} Läufe")
    print(f"  Mittel:        {bench.mean * 1000:.1f} ms")
    print(f"  Bester:        {bench.best * 1000:.1f} ms")
    print(f"  Schlechtester: {bench.worst * 1000:.1f} ms")
    print(f"  Ergebnis:      {format_size(bench.result.total_with_links)} / "
          f"{format_size(bench.result.total_without_duplicate_links)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
