"""N-to-M line decoders, plain and with an enable input."""

from __future__ import annotations

from typing import Sequence

from .kernel import Module, Signal, Simulator


def _bits_for(count: int) -> int:
    return max(1, (count - 1).bit_length())


class Decoder(Module):
    """Drive true on the output whose index equals the control value.

    ``n_in`` is the control width; by default the smallest width that
    addresses every output. The number of outputs must lie between
    2**(n_in-1)+1 and 2**n_in.
    """

    def __init__(
        self,
        sim: Simulator,
        name: str,
        x_in: Signal,
        outputs: Sequence[Signal],
        n_in: int | None = None,
    ) -> None:
        super().__init__(sim, name)
        self.x_in = x_in
        self.z_out = tuple(outputs)
        n_out = len(self.z_out)
        self.n_in = _bits_for(n_out) if n_in is None else n_in
        self._validate(self.n_in, n_out)
        sim.method(self._decode, *self._sensitivity())

    def _validate(self, n_in: int, n_out: int) -> None:
        if n_in <= 0 and n_out <= 0:
            self.report_fatal("the number of inputs and outputs must be positive( >0 )")
        elif n_in <= 0:
            self.report_fatal("the number of inputs must be positive( >0 )")
        elif n_out <= 0:
            self.report_fatal("the number of outputs must be positive( >0 )")
        low, high = 2 ** (n_in - 1) + 1, 2**n_in
        if not low <= n_out <= high:
            self.report_fatal(
                f"Invalid number of outputs, you have {n_in} bits of input and {n_out} "
                f"outputs, and the number of outputs must be between {low} and {high}"
            )

    def _sensitivity(self) -> tuple[Signal, ...]:
        return (self.x_in,)

    def _enabled(self) -> bool:
        return True

    def _decode(self) -> None:
        value = int(self.x_in.read()) & ((1 << self.n_in) - 1)
        enabled = self._enabled()
        for index, out in enumerate(self.z_out):
            out.write(enabled and index == value)


class DecoderEnable(Decoder):
    """Decoder whose outputs are all false while the enable input is false."""

    def __init__(
        self,
        sim: Simulator,
        name: str,
        en_in: Signal,
        x_in: Signal,
        outputs: Sequence[Signal],
        n_in: int | None = None,
    ) -> None:
        self.en_in = en_in
        super().__init__(sim, name, x_in, outputs, n_in)

    def _sensitivity(self) -> tuple[Signal, ...]:
        return (self.x_in, self.en_in)

    def _enabled(self) -> bool:
        return bool(self.en_in.read())