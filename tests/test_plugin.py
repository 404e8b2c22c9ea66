from condenser_fx.condenser import Condenser
from condenser_fx.plugin import PARAM_SPECS, CondenserParams, ParamSpec, StereoCondenser

RATE = 1000


def _loud(n=40):
    return [0.8 if i % 2 else -0.8 for i in range(n)]


def _params():
    return CondenserParams(warmup_s=0.0, ring_sec=2)


def _reference(params, block):
    c = Condenser(
        RATE,
        params.threshold_db,
        params.dry_wet,
        params.fade_ms,
        params.rel_ms,
        params.ring_sec,
        params.warmup_s,
        params.loop_mode,
    )
    return c.process(block)


def test_defaults_match_documented_values():
    p = CondenserParams()
    assert p.threshold_db == -40.0
    assert p.dry_wet == 0.5
    assert p.fade_ms == 10.0
    assert p.rel_ms == 50.0
    assert p.ring_sec == 60
    assert p.warmup_s == 0.3
    assert p.loop_mode is False


def test_params_are_clamped_to_ranges():
    p = CondenserParams(threshold_db=-100.0, dry_wet=2.0, ring_sec=500, fade_ms=0.0)
    assert p.threshold_db == -80.0
    assert p.dry_wet == 1.0
    assert p.ring_sec == 120
    assert p.fade_ms == 1.0


def test_param_spec_clamp_keeps_values_in_range():
    spec = PARAM_SPECS["rel_ms"]
    assert spec.clamp(250.0) == 250.0
    assert spec.clamp(5000.0) == spec.maximum
    assert ParamSpec("Gain", 0.0, -1.0, 1.0).clamp(-3.0) == -1.0


def test_process_before_initialize_returns_input():
    fx = StereoCondenser(_params())
    left, right = _loud(), [0.1] * 40
    assert fx.process([left, right]) == [left, right]


def test_initialize_creates_both_channels():
    fx = StereoCondenser(_params())
    assert fx.initialize(RATE) is True
    assert fx.left.fs == RATE
    assert fx.right.fs == RATE


def test_channels_match_independent_condensers():
    params = _params()
    fx = StereoCondenser(params)
    fx.initialize(RATE)
    left, right = _loud(), [0.01] * 40
    out = fx.process([left, right])
    assert out[0] == _reference(params, left)
    assert out[1] == _reference(params, right)


def test_extra_channels_are_untouched():
    fx = StereoCondenser(_params())
    fx.initialize(RATE)
    third = [0.3] * 40
    out = fx.process([_loud(), _loud(), third])
    assert out[2] == third
    assert len(out) == 3


def test_reset_discards_recordings():
    fx = StereoCondenser(_params())
    fx.initialize(RATE)
    fx.process([_loud(), _loud()])
    assert len(fx.left.recorded()) > 0
    fx.reset()
    assert fx.left.recorded() == []
    assert fx.right.recorded() == []
    assert fx.left.fs == RATE


def test_parameter_changes_apply_on_next_block():
    params = _params()
    fx = StereoCondenser(params)
    fx.initialize(RATE)
    params.loop_mode = True
    fx.process([_loud(), _loud()])
    assert fx.left.recorded() == []
    assert fx.right.recorded() == []