import pytest

from scucells.kernel import Clock, Signal, Simulator
from scucells.latches import (
    DLatch,
    DLatchClocked,
    DLatchClockedEnable,
    DLatchClockedEnableReset,
    DLatchClockedReset,
    DLatchEnable,
    DLatchEnableReset,
    DLatchReset,
)


def _run_bench(sim, clk, drivers, steps, z):
    """Drive one step per rising edge and sample the output at the next edge."""
    observed = []

    def bench():
        for step in steps:
            for signal, value in zip(drivers, step):
                signal.write(value)
            yield
            observed.append(z.read())
        sim.stop()

    sim.thread(bench, clk.posedge())
    sim.run()
    return observed


def _setup():
    sim = Simulator()
    clk = Clock(sim, "clock", 10, 0.5, 0, True)
    x = Signal(sim, 0, "x")
    z = Signal(sim, 0, "z")
    en = Signal(sim, False, "en")
    reset = Signal(sim, False, "reset")
    return sim, clk, x, z, en, reset


@pytest.mark.parametrize("clocked", [False, True])
def test_plain_latch_follows_input(clocked):
    sim, clk, x, z, _, _ = _setup()
    if clocked:
        DLatchClocked(sim, "d_latch", clk, x, z)
    else:
        DLatch(sim, "d_latch", x, z)
    result = _run_bench(sim, clk, [x], [(10,), (20,), (30,), (40,)], z)
    assert result == [10, 20, 30, 40]


@pytest.mark.parametrize("clocked", [False, True])
def test_zero_latch_always_holds_zero(clocked):
    sim, clk, x, z, _, _ = _setup()
    if clocked:
        DLatchClocked(sim, "d_latch", clk, x, z, zero=True)
    else:
        DLatch(sim, "d_latch", x, z, zero=True)
    result = _run_bench(sim, clk, [x], [(10,), (20,), (30,)], z)
    assert result == [0, 0, 0]


@pytest.mark.parametrize("clocked", [False, True])
def test_enable_latch_holds_when_disabled(clocked):
    sim, clk, x, z, en, _ = _setup()
    if clocked:
        DLatchClockedEnable(sim, "d_latch", clk, en, x, z)
    else:
        DLatchEnable(sim, "d_latch", en, x, z)
    steps = [(True, 10), (False, 20), (True, 30), (False, 40)]
    assert _run_bench(sim, clk, [en, x], steps, z) == [10, 10, 30, 30]


@pytest.mark.parametrize("clocked", [False, True])
def test_reset_latch_clears(clocked):
    sim, clk, x, z, _, reset = _setup()
    if clocked:
        latch = DLatchClockedReset(sim, "d_latch", clk, reset, x, z)
    else:
        latch = DLatchReset(sim, "d_latch", reset, x, z)
    steps = [(False, 10), (True, 20), (False, 30)]
    assert _run_bench(sim, clk, [reset, x], steps, z) == [10, 0, 30]
    assert latch.state == 30


@pytest.mark.parametrize("clocked", [False, True])
def test_enable_reset_latch(clocked):
    sim, clk, x, z, en, reset = _setup()
    if clocked:
        DLatchClockedEnableReset(sim, "d_latch", clk, en, reset, x, z)
    else:
        DLatchEnableReset(sim, "d_latch", en, reset, x, z)
    steps = [
        (True, False, 10),
        (True, True, 20),
        (False, False, 30),
        (True, False, 40),
        (False, True, 50),
    ]
    assert _run_bench(sim, clk, [en, reset, x], steps, z) == [10, 0, 0, 40, 0]


def test_zero_enable_latch_ignores_input():
    sim, clk, x, z, en, _ = _setup()
    DLatchEnable(sim, "d_latch", en, x, z, zero=True)
    steps = [(True, 10), (True, 20)]
    assert _run_bench(sim, clk, [en, x], steps, z) == [0, 0]


def test_latch_without_clock_settles_immediately():
    sim = Simulator()
    x = Signal(sim, 0, "x")
    z = Signal(sim, 0, "z")
    DLatch(sim, "d_latch", x, z)
    x.write(123)
    sim.run()
    assert z.read() == 123


@pytest.mark.parametrize(
    "cls, name",
    [(DLatch, "DLatch"), (DLatchReset, "DLatchReset")],
)
def test_kind_is_class_name(cls, name):
    sim = Simulator()
    x, z, r = Signal(sim, 0), Signal(sim, 0), Signal(sim, False)
    latch = cls(sim, "l", x, z) if cls is DLatch else cls(sim, "l", r, x, z)
    assert latch.kind == name