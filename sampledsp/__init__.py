"""Per-sample audio DSP building blocks: filters, envelopes, effects and drum voices."""

__version__ = "0.1.0"