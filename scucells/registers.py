"""Clocked register cells: plain, with enable and/or reset.

The internal state, initially 0, is loaded whenever the clock falls or one
of the data or control inputs changes; it is driven onto the output only on
the rising clock edge. A register built with ``zero=True`` always holds 0.
"""

from __future__ import annotations

from typing import Any

from .kernel import Module, Signal, Simulator


class _Register(Module):
    """State and behaviour shared by every register kind."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        x_in: Signal,
        z_out: Signal,
        *,
        zero: bool,
        en_in: Signal | None = None,
        reset_in: Signal | None = None,
    ) -> None:
        super().__init__(sim, name)
        self.clk_in = clk_in
        self.x_in = x_in
        self.z_out = z_out
        self.zero = zero
        self.en_in = en_in
        self.reset_in = reset_in
        self._state: Any = 0

        sim.method(self._read_operation, clk_in.posedge())
        sensitivity: list[Any] = [clk_in.negedge()]
        if en_in is not None:
            sensitivity.append(en_in)
        if reset_in is not None:
            sensitivity.append(reset_in)
        sensitivity.append(x_in)
        sim.method(self._write_operation, *sensitivity)

    @property
    def state(self) -> Any:
        """The value the register currently holds."""
        return self._state

    def _read_operation(self) -> None:
        self.z_out.write(self._state)

    def _write_operation(self) -> None:
        if self.reset_in is not None and self.reset_in.read():
            self._state = 0
        elif self.zero:
            self._state = 0
        elif self.en_in is None or self.en_in.read():
            self._state = self.x_in.read()


class Register(_Register):
    """Register loading its input every cycle."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, clk_in, x_in, z_out, zero=zero)


class RegisterEnable(_Register):
    """Register loading its input only while enabled."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        en_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, clk_in, x_in, z_out, zero=zero, en_in=en_in)


class RegisterReset(_Register):
    """Register cleared to 0 while reset is true."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        reset_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, clk_in, x_in, z_out, zero=zero, reset_in=reset_in)


class RegisterEnableReset(_Register):
    """Register with enable; reset clears it whatever the other inputs are."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        en_in: Signal,
        reset_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(
            sim, name, clk_in, x_in, z_out, zero=zero, en_in=en_in, reset_in=reset_in
        )