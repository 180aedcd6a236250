"""
Simple example demonstrating the EventChains pattern.

Run with:
    python -m eventchains.examples.simple_example
"""

import logging
import time

from eventchains import (
    EventChain,
    EventContext,
    FaultTolerance,
    LoggingMiddleware,
    TimingMiddleware,
)
from eventchains.examples.events import ProcessDataEvent, SaveResultEvent, ValidateInputEvent


def build_chain(fault_tolerance=FaultTolerance.STRICT, with_middleware=False):
    chain = (EventChain(fault_tolerance)
        .add_event(ValidateInputEvent())
        .add_event(ProcessDataEvent())
        .add_event(SaveResultEvent()))

    if with_middleware:
        chain.use_middleware(LoggingMiddleware()).use_middleware(TimingMiddleware())

    return chain


def run_case(title, chain, value):
    print()
    print(title)
    print("-" * 60)

    result = chain.execute(EventContext({'input': value}))

    print(f"Result: {'✓ Success' if result.success else '✗ Failed'}")
    if result.error:
        print(f"Error: {result.error}")
    return result


def time_cached_pipeline(chain, iterations=10_000):
    start = time.perf_counter()
    for i in range(iterations):
        chain.execute(EventContext({'input': i}))
    return time.perf_counter() - start


def main():
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s: %(message)s")

    print("=" * 60)
    print("EventChains Simple Example")
    print("=" * 60)

    run_case("Test 1: Basic Chain (Strict Mode)", build_chain(), 21)

    middleware_chain = build_chain(with_middleware=True)
    run_case("Test 2: Chain with Middleware", middleware_chain, 42)
    run_case("Test 3: Failure Handling (Negative Input)", middleware_chain, -10)

    lenient_chain = build_chain(FaultTolerance.LENIENT)
    lenient_chain.use_middleware(LoggingMiddleware())
    run_case("Test 4: Lenient Mode (Continues on Failure)", lenient_chain, -5)

    print()
    print("Test 5: Pipeline Caching (Performance)")
    print("-" * 60)
    logging.disable(logging.CRITICAL)
    perf_chain = (EventChain()
        .add_event(ValidateInputEvent())
        .add_event(ProcessDataEvent()))
    iterations = 10_000
    duration = time_cached_pipeline(perf_chain, iterations)
    logging.disable(logging.NOTSET)
    print(f"Executed {iterations} iterations in {duration:.6f}s")
    print(f"Average: {duration / iterations:.9f}s per execution")

    print()
    print("=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
