"""
Smoke tests for the sample events, the demo and the benchmark harness.
"""

from eventchains import EventContext, FaultTolerance, Middleware
from eventchains.examples import benchmark
from eventchains.examples.events import ProcessDataEvent, SaveResultEvent, ValidateInputEvent
from eventchains.examples.simple_example import build_chain, run_case


class SnapshotMiddleware(Middleware):
    def __init__(self):
        self.after = {}

    def execute(self, context, next_callable):
        result = next_callable(context)
        self.after.update(context.to_dict())
        return result


def test_sample_events_round_trip():
    snapshot = SnapshotMiddleware()
    chain = build_chain().use_middleware(snapshot)

    result = chain.execute(EventContext({'input': 21}))

    assert result.success
    assert snapshot.after['output'] == 42
    assert snapshot.after['saved'] is True


def test_sample_events_missing_values():
    context = EventContext()
    assert ValidateInputEvent().execute(context).error == "Missing input value"
    assert ProcessDataEvent().execute(context).error == "Missing input value"
    assert SaveResultEvent().execute(context).error == "Missing output value"


def test_lenient_demo_chain_reports_every_failure():
    result = build_chain(FaultTolerance.LENIENT).execute(EventContext({'input': -5}))

    assert result.error == "Input must be positive"

    result = build_chain(FaultTolerance.LENIENT).execute(EventContext())

    assert result.error == "Missing input value; Missing input value; Missing output value"


def test_run_case_prints_outcome(capsys):
    result = run_case("Negative", build_chain(with_middleware=True), -10)

    out = capsys.readouterr().out
    assert not result.success
    assert "✗ Failed" in out
    assert "Error: Input must be positive" in out


def test_run_benchmark_counts_successes():
    calls = []

    def work():
        calls.append(1)
        return len(calls) % 2 == 0

    stats = benchmark.run_benchmark("alternating", iterations=10, work=work, warmup=4)

    assert len(calls) == 14
    assert stats.iterations == 10
    assert stats.success_count == 5
    assert stats.min_time <= stats.avg_time <= stats.max_time
    assert stats.ops_per_second > 0


def test_overhead_vs_baseline():
    base = benchmark.BenchmarkStats('base', 1, 1.0, 2.0, 2.0, 2.0, 1)
    slower = benchmark.BenchmarkStats('slower', 1, 1.0, 3.0, 3.0, 3.0, 1)

    assert slower.overhead_vs(base) == 50.0


def test_baselines_agree_with_chain():
    assert benchmark.minimal_execute(42) == 84
    assert benchmark.minimal_execute(-1) is None
    assert benchmark.feature_parity_execute(42) == (True, 84)
    assert benchmark.feature_parity_execute(-1) == (False, "ValidateEvent: Value must be positive")

    for count in (0, 1, 2):
        chain = benchmark.build_benchmark_chain(count)
        assert chain.middleware_count() == count
        assert benchmark.chain_work(chain)() is True
        assert benchmark.chain_work(chain, value=-1)() is False


def test_benchmark_main(capsys):
    benchmark.main(['--iterations', '5', '--warmup', '0'])

    out = capsys.readouterr().out
    assert "PERFORMANCE COMPARISON" in out
    assert "EventChains (2 middleware)" in out
