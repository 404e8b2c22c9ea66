# condenser_fx

An audio effect that "condenses" a signal. It follows the level of the
input and records only the passages louder than a threshold into a ring
buffer, with a raised-cosine fade at the start and end of each passage. It
plays that recording back in a loop all the time and mixes it with the dry
input.

Pure Python, no dependencies.

## Installation

```
pip install .
```

## Mono use

```python
from condenser_fx.condenser import Condenser, State

fx = Condenser(
    fs=48000,
    threshold_db=-40.0,   # gate threshold
    dry_wet=0.5,          # 0 = dry only, 1 = recording only (clamped to 0..1)
    fade_ms=10.0,         # fade length at each edge of a recorded passage
    rel_ms=50.0,          # envelope release time
    max_seconds=60,       # ring buffer length
    warmup_sec=0.3,       # record nothing during the first 0.3 s of input
    loop_mode=False,      # True stops recording and only plays the loop
)

out = fx.process([0.0] * 512)   # returns a new list; the input is not changed
print(fx.state)                 # State.IDLE, FADE_IN, RECORD or FADE_OUT
captured = fx.recorded()        # copy of everything recorded so far
```

Every call to `process` returns a block of the same length as its input:
`(1 - dry_wet) * input + dry_wet * loop`. While nothing has been recorded,
the loop part is silence. The warm-up and loop mode only stop recording.
The mix is still applied to every block.

`Condenser.configure(threshold_db, dry_wet, fade_ms, rel_ms, ring_sec,
warmup_sec, loop_mode)` changes the settings between blocks. If the ring
length changes, the recording is cleared. Otherwise the recording is kept.

A block that would write more frames than the ring holds raises
`ValueError`.

## Stereo use

`condenser_fx.plugin` runs two separate condensers, one on the left channel
and one on the right:

```python
from condenser_fx.plugin import CondenserParams, StereoCondenser

params = CondenserParams()      # -40 dB, 0.5 mix, 10 ms fade, 50 ms release,
                                # 60 s loop, 0.3 s warm-up, loop mode off
fx = StereoCondenser(params)
fx.initialize(sample_rate=44100)

left, right = fx.process([[0.0] * 256, [0.0] * 256])

params.loop_mode = True         # applied to both channels on the next process()
fx.reset()                      # rebuild both channels from the current params
```

`StereoCondenser.process` takes a sequence of channels and returns new lists.
The first two channels go through the condensers. Any further channels are
returned unchanged. All channels are returned unchanged until `initialize`
has been called.

The allowed range, default, display name and unit of each numeric
parameter are in `condenser_fx.plugin.PARAM_SPECS`, as `ParamSpec`
entries. `ParamSpec.clamp(value)` limits a value to its range. Values given
to `CondenserParams` when it is created are clamped to these ranges.
Values assigned to its fields later are not clamped.

## What it does not do

The package works on lists of float samples only. It does not read or write
audio files, it does not open sound devices, and it does not load into an
audio host as a plug-in. The caller has to supply the blocks and do
something with the returned output.

## Running the tests

```
pip install .[test]
pytest
```