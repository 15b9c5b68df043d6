"""Level-sensitive latch cells: plain, clocked, with enable and/or reset.

Every latch keeps an internal state, initially 0, and drives it onto its
output each time one of its inputs changes (and, for the clocked kinds, on
each rising clock edge). A latch built with ``zero=True`` always holds 0.
"""

from __future__ import annotations

from typing import Any

from .kernel import Module, Signal, Simulator


class _Latch(Module):
    """State and behaviour shared by every latch kind."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        x_in: Signal,
        z_out: Signal,
        *,
        zero: bool,
        clk_in: Signal | None = None,
        en_in: Signal | None = None,
        reset_in: Signal | None = None,
    ) -> None:
        super().__init__(sim, name)
        self.x_in = x_in
        self.z_out = z_out
        self.zero = zero
        self.clk_in = clk_in
        self.en_in = en_in
        self.reset_in = reset_in
        self._state: Any = 0

        sensitivity: list[Any] = [x_in]
        if en_in is not None:
            sensitivity.append(en_in)
        if clk_in is not None:
            sensitivity.append(clk_in.posedge())
        if reset_in is not None:
            sensitivity.append(reset_in)
        sim.method(self._operation, *sensitivity)

    @property
    def state(self) -> Any:
        """The value the latch currently holds."""
        return self._state

    def _operation(self) -> None:
        if self.zero:
            self._state = 0
        elif self.en_in is None or self.en_in.read():
            self._state = self.x_in.read()
        if self.reset_in is not None and self.reset_in.read():
            self._state = 0
        self.z_out.write(self._state)


class DLatch(_Latch):
    """Latch whose output follows its input at all times."""

    def __init__(
        self, sim: Simulator, name: str, x_in: Signal, z_out: Signal, zero: bool = False
    ) -> None:
        super().__init__(sim, name, x_in, z_out, zero=zero)


class DLatchEnable(_Latch):
    """Latch that takes its input while enabled and holds otherwise."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        en_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, x_in, z_out, zero=zero, en_in=en_in)


class DLatchReset(_Latch):
    """Latch that follows its input and is forced to 0 while reset is true."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        reset_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, x_in, z_out, zero=zero, reset_in=reset_in)


class DLatchEnableReset(_Latch):
    """Latch with enable; reset forces 0 whatever the other inputs are."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        en_in: Signal,
        reset_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(
            sim, name, x_in, z_out, zero=zero, en_in=en_in, reset_in=reset_in
        )


class DLatchClocked(_Latch):
    """Latch that also re-evaluates on each rising clock edge."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        clk_in: Signal,
        x_in: Signal,
        z_out: Signal,
        zero: bool = False,
    ) -> None:
        super().__init__(sim, name, x_in, z_out, zero=zero, clk_in=clk_in)


class DLatchClockedEnable(_Latch):
    """Clocked latch with an enable input."""

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
        super().__init__(sim, name, x_in, z_out, zero=zero, clk_in=clk_in, en_in=en_in)


class DLatchClockedReset(_Latch):
    """Clocked latch with a reset input."""

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
        super().__init__(
            sim, name, x_in, z_out, zero=zero, clk_in=clk_in, reset_in=reset_in
        )


class DLatchClockedEnableReset(_Latch):
    """Clocked latch with enable and reset inputs."""

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
            sim,
            name,
            x_in,
            z_out,
            zero=zero,
            clk_in=clk_in,
            en_in=en_in,
            reset_in=reset_in,
        )