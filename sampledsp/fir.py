"""Finite impulse response filter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class FirFilter:
    """Direct-form FIR filter.

    Coefficients are stored tail-first: the last coefficient multiplies the
    newest input. Pass ``reverse=True`` to give an impulse response in its
    natural order. ``max_size`` truncates the response. ``max_block`` bounds
    the length of a block given to :meth:`process_block`. ``None`` means no
    limit for either.
    """

    latency = 0

    def __init__(
        self,
        ir: Sequence[float] = (),
        max_size: int | None = None,
        max_block: int | None = None,
        reverse: bool = False,
    ) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        if max_block is not None and max_block < 0:
            raise ValueError("max_block must not be negative")
        self.max_size = max_size
        self.max_block = max_block
        self._coefs: list[float] = []
        self._history: list[float] = []
        self.set_ir(ir, reverse)

    @property
    def coefficients(self) -> tuple[float, ...]:
        """Active coefficients, tail-first."""
        return tuple(self._coefs)

    def set_ir(self, ir: Sequence[float], reverse: bool = False) -> None:
        """Load new coefficients and clear the filter state."""
        values = [float(c) for c in ir]
        size = len(values)
        if self.max_size is not None:
            size = min(size, self.max_size)
        if reverse:
            values.reverse()
        self._coefs = values[:size]
        self.reset()

    def reset(self) -> None:
        """Clear the filter state, keeping the coefficients."""
        self._history = [0.0] * max(len(self._coefs) - 1, 0)

    def _require_coefs(self) -> None:
        if not self._coefs:
            raise ValueError("filter has no coefficients")

    def _step(self, x: float) -> float:
        window = self._history + [x]
        acc = sum(w * c for w, c in zip(window, self._coefs))
        self._history = window[1:]
        return acc

    def process(self, x: float) -> float:
        """Filter one sample."""
        self._require_coefs()
        return self._step(x)

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples and return the results."""
        block = list(samples)
        if self.max_block is not None and len(block) > self.max_block:
            raise ValueError(
                f"block of {len(block)} samples exceeds max_block {self.max_block}"
            )
        self._require_coefs()
        return [self._step(x) for x in block]