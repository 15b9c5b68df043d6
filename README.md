# scucells

scucells is a small event-driven simulator for digital logic. It comes with a
set of ready-made cells that run on it.

## Modules

- `scucells.kernel` holds the simulation core:
  - `Simulator` is the scheduler. `method(func, *events, initialize=True)`
    registers a process that runs whenever one of its events is notified.
    `thread(gen_func, *events)` registers a generator process. `run(duration=None)`
    advances simulated time, and `stop()` ends a run. The `now` property gives
    the current time.
  - `Signal(sim, initial, name)` is a value channel. A `write()` takes effect
    in the next update phase, and `read()` returns the current value.
    `posedge()` and `negedge()` return the edge events.
  - `Clock(sim, name, period, duty_cycle, start_time, posedge_first)` is a
    free-running boolean signal.
  - `Module` is the base class of every cell. `report_fatal()` raises
    `ScuError`.
- `scucells.gates` provides n-input gates (`Or`, `And`, `Xor`, `Nand`, `Nor`,
  `NotXor`) that share the base class `Gate`, plus the inverter `Not`.
  `Gate.evaluate(values)` computes the output for given input values.
- `scucells.full_adder` provides `FullAdder`, a 1-bit adder wired from two-input
  gates.
- `scucells.mux` provides `Mux`, an N-to-1 multiplexer. Its control width
  `n_bits` defaults to the smallest width that addresses every input.
- `scucells.decoder` provides `Decoder` and `DecoderEnable`. These are N-to-M
  line decoders whose control width is `n_in`. When the enable input of
  `DecoderEnable` is false, every output is false.
- `scucells.latches` provides the level-sensitive latches `DLatch`,
  `DLatchEnable`, `DLatchReset`, `DLatchEnableReset`, `DLatchClocked`,
  `DLatchClockedEnable`, `DLatchClockedReset` and `DLatchClockedEnableReset`.
- `scucells.registers` provides the clocked registers `Register`,
  `RegisterEnable`, `RegisterReset` and `RegisterEnableReset`. Each one loads
  its state when the clock falls or an input changes, and drives the state
  onto its output on the rising edge.
- `scucells.benches` provides stimulus benches for every cell, together with
  `format_table()` and the `scucells-bench` command.

Latches and registers take a `zero` flag. A cell built with `zero=True` always
holds 0. Their current value is available as the `state` property.

Invalid parameters raise `ScuError`. Examples are a gate with fewer than two
inputs, or a multiplexer or decoder whose number of inputs or outputs does not
fit its control width (it must lie between 2**(bits-1)+1 and 2**bits).

## Installation

```
pip install .
```

## Example

```python
from scucells.kernel import Simulator, Signal
from scucells.gates import And

sim = Simulator()
a = Signal(sim, False, "a")
b = Signal(sim, False, "b")
z = Signal(sim, False, "z")
And(sim, "and1", [a, b], z)

a.write(True)
b.write(True)
sim.run(1)
print(z.read())  # True
```

## Test benches

Each bench drives one cell with random stimulus on a 10-unit clock. It prints
one tab-separated row per cycle, showing the values it drove and what the cell
produced.

```
scucells-bench full-adder
scucells-bench mux
scucells-bench decoder
scucells-bench decoder-enable
scucells-bench gate and --seed 1
scucells-bench latch clocked_enable
scucells-bench register enable_reset
```

Kinds for each bench:

- `gate`: `and`, `nand`, `nor`, `notxor`, `or`, `xor`, `not`
- `latch`: `plain`, `enable`, `reset`, `enable_reset`, `clocked`,
  `clocked_enable`, `clocked_reset`, `clocked_enable_reset`
- `register`: `register`, `enable`, `reset`, `enable_reset`. The `register`
  kind builds a zero register, so its output stays 0.

Use `--seed` to make a run repeatable.

## What it does not do

The simulator keeps values in memory only. It does not write waveform or
trace files, and it has no viewer. To record signal values, sample them from
your own processes or read them after `run()`.

## Running the tests

```
pip install .[test]
pytest
```