"""Clocked stimulus benches for every cell, printing one table row per cycle.

Each bench drives a cell with fresh stimulus on a rising clock edge, waits
for the next rising edge and then samples both what it drove and what the
cell produced. Every bench returns ``(header, rows)``; ``format_table``
renders that as tab-separated text.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any, Callable, Mapping, Sequence

from .decoder import Decoder, DecoderEnable
from .full_adder import FullAdder
from .gates import And, Nand, Nor, Not, NotXor, Or, Xor
from .kernel import Clock, Signal, Simulator
from .latches import (
    DLatch,
    DLatchClocked,
    DLatchClockedEnable,
    DLatchClockedEnableReset,
    DLatchClockedReset,
    DLatchEnable,
    DLatchEnableReset,
    DLatchReset,
)
from .mux import Mux
from .registers import Register, RegisterEnable, RegisterEnableReset, RegisterReset

Row = tuple[Any, ...]
Table = tuple[tuple[str, ...], list[Row]]

RAND_MAX = 2**31 - 1
CLOCK_PERIOD = 10

_GATES = {
    "and": And,
    "nand": Nand,
    "nor": Nor,
    "notxor": NotXor,
    "or": Or,
    "xor": Xor,
}
_GATE_KINDS = (*_GATES, "not")

# kind -> (cell class, clocked, has enable, has reset)
_LATCHES = {
    "plain": (DLatch, False, False, False),
    "enable": (DLatchEnable, False, True, False),
    "reset": (DLatchReset, False, False, True),
    "enable_reset": (DLatchEnableReset, False, True, True),
    "clocked": (DLatchClocked, True, False, False),
    "clocked_enable": (DLatchClockedEnable, True, True, False),
    "clocked_reset": (DLatchClockedReset, True, False, True),
    "clocked_enable_reset": (DLatchClockedEnableReset, True, True, True),
}

# kind -> (cell class, has enable, has reset, zero register)
_REGISTERS = {
    "register": (Register, False, False, True),
    "enable": (RegisterEnable, True, False, False),
    "reset": (RegisterReset, False, True, False),
    "enable_reset": (RegisterEnableReset, True, True, False),
}


def _cell(value: Any) -> str:
    return str(int(value)) if isinstance(value, bool) else str(value)


def format_table(header: Sequence[str], rows: Sequence[Row]) -> str:
    """Render a header line, a blank line and one tab-separated line per row."""
    lines = ["\t".join(header), ""]
    lines.extend("\t".join(_cell(value) for value in row) for row in rows)
    return "\n".join(lines) + "\n"


def _setup() -> tuple[Simulator, Clock]:
    sim = Simulator()
    clock = Clock(sim, "clock", CLOCK_PERIOD, 0.5, 0, True)
    return sim, clock


def _run_bench(
    sim: Simulator,
    clock: Clock,
    steps: int,
    drive: Callable[[int], None],
    sample: Callable[[], Row],
) -> list[Row]:
    rows: list[Row] = []

    def stimulus():
        for step in range(steps):
            drive(step)
            yield None
            rows.append(sample())
        sim.stop()

    sim.thread(stimulus, clock.posedge())
    sim.run()
    return rows


def _bit(rng: random.Random) -> bool:
    return bool(rng.randrange(2))


def _word(rng: random.Random) -> int:
    return rng.randint(0, RAND_MAX)


def _lookup(table: Mapping[str, Any], kind: str | None, what: str) -> Any:
    key = kind.lower() if kind is not None else None
    if key not in table:
        choices = ", ".join(table)
        raise ValueError(f"unknown {what} kind {kind!r}; choose from {choices}")
    return table[key]


def full_adder_bench(rng: random.Random) -> Table:
    """Six cycles of random operand and carry bits through a full adder."""
    sim, clock = _setup()
    x, y, c = (Signal(sim, False, f"{n}_sg") for n in ("x", "y", "c_in"))
    z, carry = Signal(sim, False, "z_sg"), Signal(sim, False, "c_out_sg")
    FullAdder(sim, "fullAdder", x, y, c, z, carry)

    def drive(_step: int) -> None:
        x.write(_bit(rng))
        y.write(_bit(rng))
        c.write(_bit(rng))

    rows = _run_bench(
        sim, clock, 6, drive, lambda: (x.read(), y.read(), c.read(), z.read(), carry.read())
    )
    return ("x_in", "y_in", "c_in", "z_out", "c_out"), rows


def mux_bench(rng: random.Random) -> Table:
    """An 8-input mux stepping its control through every input."""
    n, nb = 8, 3
    sim, clock = _setup()
    inputs = [Signal(sim, 0, f"inputs_sg{i}") for i in range(n)]
    ctrl = Signal(sim, 0, "ctrl_sg")
    z = Signal(sim, 0, "z_sg")
    Mux(sim, "mux", inputs, ctrl, z, n_bits=nb)

    def drive(step: int) -> None:
        ctrl.write(step)
        for signal in inputs:
            signal.write(rng.randrange(650))

    def sample() -> Row:
        return (ctrl.read(), *(s.read() for s in inputs), z.read())

    rows = _run_bench(sim, clock, n, drive, sample)
    return ("x_in", *(f"Z{i}" for i in range(n)), "output"), rows


def decoder_bench(rng: random.Random) -> Table:
    """A 4-to-16 decoder fed every control value in turn."""
    n_in, n_out = 4, 16
    sim, clock = _setup()
    x = Signal(sim, 0, "x_sg")
    outputs = [Signal(sim, False, f"z_sg{i}") for i in range(n_out)]
    Decoder(sim, "decoder", x, outputs, n_in=n_in)

    rows = _run_bench(
        sim,
        clock,
        n_out,
        x.write,
        lambda: (x.read(), *(s.read() for s in outputs)),
    )
    return ("x_in", *(f"Z{i}" for i in range(n_out))), rows


def decoder_enable_bench(rng: random.Random) -> Table:
    """A 4-to-16 decoder with a random enable, fed every control value."""
    n_in, n_out = 4, 16
    sim, clock = _setup()
    x = Signal(sim, 0, "x_sg")
    en = Signal(sim, False, "en_sg")
    outputs = [Signal(sim, False, f"z_sg{i}") for i in range(n_out)]
    DecoderEnable(sim, "decoder", en, x, outputs, n_in=n_in)

    def drive(step: int) -> None:
        x.write(step)
        en.write(_bit(rng))

    rows = _run_bench(
        sim,
        clock,
        n_out,
        drive,
        lambda: (x.read(), en.read(), *(s.read() for s in outputs)),
    )
    return ("x_in", "en_in", *(f"Z{i}" for i in range(n_out))), rows


def gate_bench(kind: str, rng: random.Random) -> Table:
    """Six cycles of random bits through a two-input gate or the inverter."""
    key = _lookup(dict.fromkeys(_GATE_KINDS), kind, "gate") and None
    key = kind.lower()
    sim, clock = _setup()
    z = Signal(sim, False, "out_sg")
    if key == "not":
        inputs = [Signal(sim, False, "x_sg")]
        Not(sim, "not1", inputs[0], z)
        header: tuple[str, ...] = ("x", "z")
    else:
        inputs = [Signal(sim, False, f"inputs_sg{i}") for i in range(2)]
        _GATES[key](sim, f"{key}1", inputs, z)
        header = (*(f"x{i}" for i in range(len(inputs))), "z")

    def drive(_step: int) -> None:
        for signal in inputs:
            signal.write(_bit(rng))

    rows = _run_bench(
        sim, clock, 6, drive, lambda: (*(s.read() for s in inputs), z.read())
    )
    return header, rows


def _controlled_bench(
    sim: Simulator,
    clock: Clock,
    rng: random.Random,
    en: Signal | None,
    reset: Signal | None,
    x: Signal,
    z: Signal,
) -> Table:
    controls = [s for s in (en, reset) if s is not None]
    header = tuple(
        label for label, s in (("en_out", en), ("reset_in", reset)) if s is not None
    ) + ("x_out", "z_in")

    def drive(_step: int) -> None:
        for signal in controls:
            signal.write(_bit(rng))
        x.write(_word(rng))

    rows = _run_bench(
        sim, clock, 10, drive, lambda: (*(s.read() for s in controls), x.read(), z.read())
    )
    return header, rows


def latch_bench(kind: str, rng: random.Random) -> Table:
    """Ten cycles of random data (and enable/reset bits) through a latch."""
    cls, clocked, has_enable, has_reset = _lookup(_LATCHES, kind, "latch")
    sim, clock = _setup()
    x, z = Signal(sim, 0, "x_sg"), Signal(sim, 0, "z_sg")
    en = Signal(sim, False, "en_sg") if has_enable else None
    reset = Signal(sim, False, "reset_sg") if has_reset else None
    ports = [p for p in (clock if clocked else None, en, reset) if p is not None]
    cls(sim, "d_latch", *ports, x, z)
    return _controlled_bench(sim, clock, rng, en, reset, x, z)


def register_bench(kind: str, rng: random.Random) -> Table:
    """Ten cycles of random data (and enable/reset bits) through a register."""
    cls, has_enable, has_reset, zero = _lookup(_REGISTERS, kind, "register")
    sim, clock = _setup()
    x, z = Signal(sim, 0, "x_sg"), Signal(sim, 0, "z_sg")
    en = Signal(sim, False, "en_sg") if has_enable else None
    reset = Signal(sim, False, "reset_sg") if has_reset else None
    controls = [p for p in (en, reset) if p is not None]
    cls(sim, "register1", clock, *controls, x, z, zero=zero)
    return _controlled_bench(sim, clock, rng, en, reset, x, z)


_PLAIN_BENCHES = {
    "full-adder": full_adder_bench,
    "mux": mux_bench,
    "decoder": decoder_bench,
    "decoder-enable": decoder_enable_bench,
}
_KINDED_BENCHES = {
    "gate": gate_bench,
    "latch": latch_bench,
    "register": register_bench,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one bench and print its table."""
    parser = argparse.ArgumentParser(
        prog="scucells-bench", description="Run a stimulus bench for one cell."
    )
    parser.add_argument("bench", choices=[*_PLAIN_BENCHES, *_KINDED_BENCHES])
    parser.add_argument(
        "kind",
        nargs="?",
        help="cell kind for gate, latch and register benches",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.bench in _PLAIN_BENCHES:
        if args.kind is not None:
            parser.error(f"the {args.bench} bench takes no kind")
        header, rows = _PLAIN_BENCHES[args.bench](rng)
    else:
        try:
            header, rows = _KINDED_BENCHES[args.bench](args.kind, rng)
        except ValueError as exc:
            parser.error(str(exc))
    sys.stdout.write(format_table(header, rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())