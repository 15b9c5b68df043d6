"""One-bit full adder assembled from two-input gates."""

from __future__ import annotations

from .gates import And, Or, Xor
from .kernel import Module, Signal, Simulator


class FullAdder(Module):
    """z = x ^ y ^ c; carry = (x & (y | c)) | (y & c)."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        x_in: Signal,
        y_in: Signal,
        c_in: Signal,
        z_out: Signal,
        c_out: Signal,
    ) -> None:
        super().__init__(sim, name)
        self.x_in, self.y_in, self.c_in = x_in, y_in, c_in
        self.z_out, self.c_out = z_out, c_out

        xor0_to_xor1 = Signal(sim, False, f"{name}.xor0_to_xor1")
        or0_to_and0 = Signal(sim, False, f"{name}.or0_to_and0")
        and0_to_or1 = Signal(sim, False, f"{name}.and0_to_or1")
        and1_to_or1 = Signal(sim, False, f"{name}.and1_to_or1")

        self._cells = (
            Xor(sim, f"{name}.xor0", (x_in, y_in), xor0_to_xor1),
            Xor(sim, f"{name}.xor1", (xor0_to_xor1, c_in), z_out),
            Or(sim, f"{name}.or0", (y_in, c_in), or0_to_and0),
            And(sim, f"{name}.and0", (x_in, or0_to_and0), and0_to_or1),
            And(sim, f"{name}.and1", (y_in, c_in), and1_to_or1),
            Or(sim, f"{name}.or1", (and0_to_or1, and1_to_or1), c_out),
        )