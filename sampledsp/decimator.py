"""Downsampling and bit-crushing effect."""

from __future__ import annotations

_MAX_BITS_TO_CRUSH = 16


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class Decimator:
    """Sample-and-hold downsampler followed by a bit crusher."""

    def __init__(self) -> None:
        self.downsample_factor = 1.0
        self.smooth_crushing = False
        self._bitcrush_factor = 0.0
        self._bits_to_crush = 0
        self._bit_overflow = 1.0
        self._downsampled = 0.0
        self._inc = 0

    @property
    def bitcrush_factor(self) -> float:
        """Amount of bit crushing, 0..1; also sets the number of bits crushed."""
        return self._bitcrush_factor

    @bitcrush_factor.setter
    def bitcrush_factor(self, value: float) -> None:
        self._bitcrush_factor = value
        self._bits_to_crush = int(value * _MAX_BITS_TO_CRUSH)
        self._bit_overflow = 2.0 - value * 16.0 + self._bits_to_crush

    @property
    def bits_to_crush(self) -> int:
        """Exact number of bits crushed (0..16); setting it disables smooth crushing."""
        return self._bits_to_crush

    @bits_to_crush.setter
    def bits_to_crush(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("bits_to_crush must not be negative")
        self._bits_to_crush = min(int(bits), _MAX_BITS_TO_CRUSH)
        self.smooth_crushing = False

    def process(self, x: float) -> float:
        """Process one sample."""
        threshold = int(self.downsample_factor * self.downsample_factor * 96.0)
        self._inc += 1
        if self._inc > threshold:
            self._inc = 0
            self._downsampled = x

        if self.smooth_crushing:
            scale = 65536.0 * self._bit_overflow
            shift = self._bits_to_crush + 1
        else:
            scale = 65536.0
            shift = self._bits_to_crush
        temp = _to_int32(int(self._downsampled * scale))
        temp = _to_int32((temp >> shift) << shift)
        return temp / scale