"""Second-order allpass filter giving band-pass and band-reject outputs."""

from __future__ import annotations

import math
from typing import NamedTuple


class SoapOutput(NamedTuple):
    """Band-pass and band-reject responses for one sample."""

    bandpass: float
    bandreject: float


class Soap:
    """Second-order allpass filter mixed with its input.

    ``center_freq`` and ``bandwidth`` are in Hz and are read on every sample.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.center_freq = 400.0
        self.bandwidth = 50.0
        self._din1 = 0.0
        self._din2 = 0.0
        self._dout1 = 0.0
        self._dout2 = 0.0
        self.output = SoapOutput(0.0, 0.0)

    def process(self, x: float) -> SoapOutput:
        """Filter one sample and return both outputs."""
        d = -math.cos(2.0 * math.pi * (self.center_freq / self.sample_rate))
        tf = math.tan(math.pi * (self.bandwidth / self.sample_rate))
        c = (tf - 1.0) / (tf + 1.0)

        allpass = (
            -c * x
            + (d - d * c) * self._din1
            + self._din2
            - (d - d * c) * self._dout1
            + c * self._dout2
        )

        self._din2, self._din1 = self._din1, x
        self._dout2, self._dout1 = self._dout1, allpass

        self.output = SoapOutput(
            bandpass=(x - allpass) * 0.5,
            bandreject=(x + allpass * 0.99) * 0.5,
        )
        return self.output