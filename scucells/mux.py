"""N-to-1 multiplexer."""

from __future__ import annotations

from typing import Sequence

from .kernel import Module, Signal, Simulator


def _bits_for(count: int) -> int:
    return max(1, (count - 1).bit_length())


class Mux(Module):
    """Copy the input selected by the control value to the output.

    ``n_bits`` is the width of the control input; by default the smallest
    width that addresses every input. The number of inputs must lie between
    2**(n_bits-1)+1 and 2**n_bits.
    """

    def __init__(
        self,
        sim: Simulator,
        name: str,
        inputs: Sequence[Signal],
        ctrl_in: Signal,
        z_out: Signal,
        n_bits: int | None = None,
    ) -> None:
        super().__init__(sim, name)
        self.x_in = tuple(inputs)
        self.ctrl_in = ctrl_in
        self.z_out = z_out
        n = len(self.x_in)
        nb = _bits_for(n) if n_bits is None else n_bits
        self.n_bits = nb

        if n <= 0 and nb <= 0:
            self.report_fatal(
                "the number of inputs and bits of control port must be positive( >0 )"
            )
        elif n <= 0:
            self.report_fatal("the number of inputs must be positive( >0 )")
        elif nb <= 0:
            self.report_fatal("the number of bits of control port must be positive( >0 )")

        low, high = 2 ** (nb - 1) + 1, 2**nb
        if not low <= n <= high:
            self.report_fatal(
                f"Invalid number of bits or inputs, you have {nb} bits for the control "
                f"input and {n} inputs, and the number of inputs must be between "
                f"{low} and {high}"
            )
        sim.method(self._mux, ctrl_in, *self.x_in)

    def _mux(self) -> None:
        index = int(self.ctrl_in.read()) & ((1 << self.n_bits) - 1)
        if index >= len(self.x_in):
            self.report_fatal(f"control value {index} selects no input")
        self.z_out.write(self.x_in[index].read())