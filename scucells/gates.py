"""Logic gates with any number (at least two) of inputs, and the inverter."""

from __future__ import annotations

import functools
import operator
from typing import Any, Iterable, Sequence

from .kernel import Module, Signal, Simulator


class Gate(Module):
    """An n-input gate reducing its inputs with one boolean operator."""

    _op = None
    _identity = False
    _invert = False

    def __init__(self, sim: Simulator, name: str, inputs: Sequence[Signal], output: Signal) -> None:
        super().__init__(sim, name)
        if self._op is None:
            raise TypeError("Gate is abstract; use a concrete gate class")
        self.x_in = tuple(inputs)
        self.z_out = output
        if len(self.x_in) < 2:
            self.report_fatal("must have more than one input")
        sim.method(self._operation, *self.x_in)

    def evaluate(self, values: Iterable[Any]) -> bool:
        """Return the gate's output for the given input values."""
        result = functools.reduce(self._op, (bool(v) for v in values), self._identity)
        return not result if self._invert else result

    def _operation(self) -> None:
        self.z_out.write(self.evaluate(s.read() for s in self.x_in))


class Or(Gate):
    """OR gate."""

    _op = staticmethod(operator.or_)
    _identity = False


class And(Gate):
    """AND gate."""

    _op = staticmethod(operator.and_)
    _identity = True


class Xor(Gate):
    """XOR gate: true for an odd number of true inputs."""

    _op = staticmethod(operator.xor)
    _identity = False


class Nand(Gate):
    """NAND gate."""

    _op = staticmethod(operator.and_)
    _identity = True
    _invert = True


class Nor(Gate):
    """NOR gate."""

    _op = staticmethod(operator.or_)
    _identity = False
    _invert = True


class NotXor(Gate):
    """XNOR gate: true for an even number of true inputs."""

    _op = staticmethod(operator.xor)
    _identity = False
    _invert = True


class Not(Module):
    """Inverter."""

    def __init__(self, sim: Simulator, name: str, x_in: Signal, z_out: Signal) -> None:
        super().__init__(sim, name)
        self.x_in = x_in
        self.z_out = z_out
        sim.method(self._operation, x_in)

    def _operation(self) -> None:
        self.z_out.write(not self.x_in.read())