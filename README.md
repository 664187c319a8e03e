# sampledsp

This package provides audio DSP building blocks that process one sample at a time. It is plain Python and has no dependencies. You create a processor once and then call its `process` method for each sample you generate or filter. Settings such as frequency, resonance, accent and decay are plain attributes or properties. Setters clamp each value to the range documented for it.

## Contents

### Filters

- `sampledsp.svf.Svf` is a double-sampled state-variable filter. You set `freq`, `res` and `drive` on it. `process(x)` returns an `SvfOutput` named tuple with the fields `low`, `high`, `band`, `notch` and `peak`. The most recent result is also kept in `svf.output`.
- `sampledsp.onepole.OnePole(frequency, mode)` is a one-pole filter. The frequency is normalised to the sample rate and capped at 0.497. `OnePoleMode.LOW_PASS` or `OnePoleMode.HIGH_PASS` selects the response. It also has `reset()` and `process_block(samples)`.
- `sampledsp.soap.Soap` is a second-order all-pass section with `center_freq` and `bandwidth`, both in Hz. `process(x)` returns a `SoapOutput` with the fields `bandpass` and `bandreject`.
- `sampledsp.ladder.LadderFilter` is a four-pole ladder filter with 4x oversampling. Its settings are `freq`, `res` (0 to 1.8), `passband_gain` (0 to 0.5), `input_drive` (0 to 4) and `mode`. The mode is a `LadderMode`: `LP24`, `LP12`, `BP24`, `BP12`, `HP24` or `HP12`.
- `sampledsp.fir.FirFilter(ir, max_size, max_block, reverse)` is a direct-form FIR filter.
  - Coefficients are stored tail-first. Pass `reverse=True` to give an impulse response in its natural order.
  - `set_ir`, `reset`, `process` and `process_block` are available.
  - `process` and `process_block` raise `ValueError` if the filter has no coefficients.
  - `process_block` also raises `ValueError` if a block is longer than `max_block`.

### Control

- `sampledsp.adenv.AdEnv` is a triggered attack/decay envelope.
  - Call `trigger()` to start it.
  - Use `set_time(segment, seconds)` with an `AdEnvSegment` to set a segment's length.
  - `curve` sets the shape, and `minimum` and `maximum` set the output range.
  - `value`, `current_segment` and `is_running` report its state.
- `sampledsp.adsr.Adsr(sample_rate, block_size=1)` is a gated ADSR envelope.
  - `process(gate)` advances it by one step.
  - Set times with `set_attack_time(seconds, shape)`, `set_decay_time`, `set_release_time` or `set_time(AdsrSegment..., seconds)`.
  - `sustain_level` sets the sustain level, and `retrigger(hard)` forces the attack stage.
- `sampledsp.phasor.Phasor(sample_rate, freq=1.0, initial_phase=0.0)` is a ramp from 0 to 1. `initial_phase` is in radians.
- `sampledsp.crossfade.CrossFade(curve, pos)` mixes two signals with `process(a, b)`. The `CrossfadeCurve` can be `LIN`, `CPOW`, `LOG` or `EXP`.

### Effects

- `sampledsp.autowah.Autowah` is an envelope-following wah. Its settings are `wah` (0 to 1), `dry_wet` (0 to 100) and `level` (0 to 1).
- `sampledsp.decimator.Decimator` combines sample-and-hold downsampling with bit crushing. Its settings are `downsample_factor`, `bitcrush_factor`, `bits_to_crush` (0 to 16) and `smooth_crushing`.
- `sampledsp.wavefolder.Wavefolder(gain, offset)` folds the signal back once its magnitude goes past 1.

### Drums

All drum voices take `process(trigger=False)` and `trig()`. They also have `accent`, `freq` (in Hz), `decay` and `sustain` settings.

- `sampledsp.analogsnare.AnalogSnareDrum` is an 808-style snare built from five resonant modes and band-passed noise. It adds `tone` and `snappy`.
- `sampledsp.hihat.HiHat(sample_rate, vca, resonance, rng)` is an 808-style hi-hat. It adds `tone` and `noisiness`.
  - Its metallic noise comes from `SquareNoise`.
  - `vca` is `linear_vca` (the default) or `swing_vca`.
- `sampledsp.synthsnare.SyntheticSnareDrum` is a 909-style snare. It adds `fm_amount` and `snappy`.

The drum voices take an optional `rng` argument. It is an object with a `random()` method, such as a `random.Random` instance. Pass a seeded one when you need the same output on every run.

## Example

```python
from sampledsp.adsr import Adsr
from sampledsp.svf import Svf
from sampledsp.phasor import Phasor

sample_rate = 48000
env = Adsr(sample_rate)
ramp = Phasor(sample_rate, 110.0)
svf = Svf(sample_rate)
svf.freq = 1200.0
svf.res = 0.4

out = []
for n in range(sample_rate):
    gate = n < sample_rate // 2
    saw = 2.0 * ramp.process() - 1.0
    out.append(svf.process(saw * env.process(gate)).low)
```

## What it does not do

The package only computes samples. It does not play audio, record it, or read or write sound files. It has no command-line program. Feed its output to whichever audio or file library you use.

## Tests

```
pip install -e .[test]
pytest
```