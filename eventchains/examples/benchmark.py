"""
Benchmark: cost of running a workflow through EventChains.

Compares three bare-function implementations of the same
validate -> transform -> accumulate workflow against EventChain with
0, 1 and 2 middleware.

Run with:
    python -m eventchains.examples.benchmark --iterations 100000
"""

import argparse
import time
from dataclasses import dataclass

from eventchains import ChainableEvent, EventChain, EventContext, Middleware, Result


@dataclass
class BenchmarkStats:
    name: str
    iterations: int
    total_time: float
    avg_time: float
    min_time: float
    max_time: float
    success_count: int

    @property
    def ops_per_second(self):
        return self.iterations / self.total_time if self.total_time else 0.0

    def overhead_vs(self, baseline):
        """Percentage by which this run's average exceeds ``baseline``'s."""
        if not baseline.avg_time:
            return 0.0
        return (self.avg_time - baseline.avg_time) / baseline.avg_time * 100

    def print_results(self):
        print()
        print(self.name)
        print("-" * 80)
        print(f"Iterations:        {self.iterations:>10d}")
        print(f"Total Time:        {self.total_time:>10.6f} seconds")
        print(f"Average Time:      {self.avg_time * 1e6:>10.3f} μs")
        print(f"Min Time:          {self.min_time * 1e6:>10.3f} μs")
        print(f"Max Time:          {self.max_time * 1e6:>10.3f} μs")
        print(f"Ops/Second:        {self.ops_per_second:>10.0f}")
        print(f"Success Rate:      {self.success_count:>10d} / {self.iterations}")


def run_benchmark(name, iterations, work, warmup=1000):
    """
    Time ``work`` over ``iterations`` calls after ``warmup`` untimed calls.

    Args:
        name: Label for the report
        iterations: Number of measured calls
        work: Zero-argument callable returning True on success
        warmup: Number of unmeasured calls made first

    Returns:
        BenchmarkStats
    """
    for _ in range(warmup):
        work()

    times = []
    success_count = 0

    overall_start = time.perf_counter()
    for _ in range(iterations):
        start = time.perf_counter()
        if work():
            success_count += 1
        times.append(time.perf_counter() - start)
    total_time = time.perf_counter() - overall_start

    return BenchmarkStats(
        name=name,
        iterations=iterations,
        total_time=total_time,
        avg_time=sum(times) / len(times) if times else 0.0,
        min_time=min(times, default=0.0),
        max_time=max(times, default=0.0),
        success_count=success_count,
    )


def print_comparison(baseline, others):
    print()
    print("=" * 80)
    print("PERFORMANCE COMPARISON")
    print("=" * 80)
    print(f"{'Implementation':<40} {'Avg Time (μs)':<15} {'Ops/Sec':<15} Overhead")
    print("-" * 80)
    print(f"{baseline.name:<40} {baseline.avg_time * 1e6:<15.3f} "
          f"{baseline.ops_per_second:<15.0f} baseline")
    for stats in others:
        print(f"{stats.name:<40} {stats.avg_time * 1e6:<15.3f} "
              f"{stats.ops_per_second:<15.0f} {stats.overhead_vs(baseline):.2f}%")
    print("=" * 80)


# Baseline: bare functions over a dict

def minimal_execute(value):
    context = {'value': value}

    if not isinstance(context.get('value'), int) or context['value'] < 0:
        return None
    context['result'] = context['value'] * 2
    context['accumulator'] = context.get('accumulator', 0) + context['result']

    return context['accumulator']


def feature_parity_execute(value):
    """Same workflow with named errors and cleanup, returned as (ok, payload)."""
    context = {'value': value}

    def validate():
        if 'value' not in context:
            return "ValidateEvent: Missing value"
        if context['value'] < 0:
            return "ValidateEvent: Value must be positive"
        return None

    def transform():
        if 'value' not in context:
            return "TransformEvent: Missing value"
        context['result'] = context['value'] * 2
        return None

    def accumulate():
        if 'result' not in context:
            return "AccumulateEvent: Missing result"
        context['accumulator'] = context.get('accumulator', 0) + context['result']
        return None

    try:
        for step in (validate, transform, accumulate):
            error = step()
            if error is not None:
                return False, error
        return True, context['accumulator']
    finally:
        context.clear()


# EventChains implementation

class BenchmarkValidateEvent(ChainableEvent):
    def execute(self, context):
        value = context.get('value', expected_type=int)
        if value is None:
            return Result.fail("Missing value")
        if value < 0:
            return Result.fail("Value must be positive")
        return Result.ok()


class BenchmarkTransformEvent(ChainableEvent):
    def execute(self, context):
        value = context.get('value', expected_type=int)
        if value is None:
            return Result.fail("Missing value")
        context.set('result', value * 2)
        return Result.ok()


class BenchmarkAccumulateEvent(ChainableEvent):
    def execute(self, context):
        result = context.get('result', expected_type=int)
        if result is None:
            return Result.fail("Missing result")
        context.set('accumulator', context.get('accumulator', 0) + result)
        return Result.ok()


class PassThroughMiddleware(Middleware):
    def execute(self, context, next_callable):
        return next_callable(context)


def build_benchmark_chain(middleware_count=0):
    chain = (EventChain()
        .add_event(BenchmarkValidateEvent())
        .add_event(BenchmarkTransformEvent())
        .add_event(BenchmarkAccumulateEvent()))
    for _ in range(middleware_count):
        chain.use_middleware(PassThroughMiddleware())
    return chain


def chain_work(chain, value=42):
    def work():
        return chain.execute(EventContext({'value': value})).success
    return work


def main(argv=None):
    parser = argparse.ArgumentParser(description="EventChains performance benchmark")
    parser.add_argument('--iterations', type=int, default=100_000)
    parser.add_argument('--warmup', type=int, default=1000)
    args = parser.parse_args(argv)

    print("=" * 80)
    print("EventChains - Performance Benchmark")
    print("=" * 80)

    minimal = run_benchmark("Minimal baseline (bare functions)", args.iterations,
                            lambda: minimal_execute(42) is not None, args.warmup)
    parity = run_benchmark("Feature-parity baseline", args.iterations,
                           lambda: feature_parity_execute(42)[0], args.warmup)
    chains = [
        run_benchmark(f"EventChains ({count} middleware)", args.iterations,
                      chain_work(build_benchmark_chain(count)), args.warmup)
        for count in (0, 1, 2)
    ]

    for stats in [minimal, parity, *chains]:
        stats.print_results()

    print_comparison(minimal, [parity, *chains])
    print_comparison(parity, chains)


if __name__ == "__main__":
    main()
