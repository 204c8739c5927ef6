import numpy as np
import pytest

from stator_winding_layout import (
    InvalidConfiguration, PitchMode, WindingInputs, WindingLayoutError, create_inputs
)
from stator_winding_layout.models.inputs import round_half_up


def test_defaults():
    inputs = create_inputs(24, 4)
    assert inputs.n_phases == 3
    assert inputs.pitch_mode is PitchMode.FULL
    assert inputs.pole_pairs == 2


@pytest.mark.parametrize('mode, expected', [
    ('full', PitchMode.FULL),
    ('SHORT', PitchMode.SHORT),
    (' Short ', PitchMode.SHORT),
    (PitchMode.SHORT, PitchMode.SHORT),
])
def test_pitch_mode_parsing(mode, expected):
    assert WindingInputs(24, 4, pitch_mode=mode).pitch_mode is expected


@pytest.mark.parametrize('kwargs, parameter', [
    (dict(n_slots=5, n_poles=2), 'n_slots'),
    (dict(n_slots=24, n_poles=5), 'n_poles'),
    (dict(n_slots=24, n_poles=0), 'n_poles'),
    (dict(n_slots=24, n_poles=4, n_phases=2), 'n_phases'),
    (dict(n_slots=24.5, n_poles=4), 'n_slots'),
    (dict(n_slots=float('nan'), n_poles=4), 'n_slots'),
    (dict(n_slots=True, n_poles=4), 'n_slots'),
    (dict(n_slots='24', n_poles=4), 'n_slots'),
    (dict(n_slots=-24, n_poles=4), 'n_slots'),
    (dict(n_slots=24, n_poles=4, pitch_mode='half'), 'pitch_mode'),
])
def test_invalid_inputs(kwargs, parameter):
    with pytest.raises(InvalidConfiguration) as excinfo:
        WindingInputs(**kwargs)
    assert excinfo.value.parameter == parameter
    assert excinfo.value.kind == 'invalid_configuration'


def test_error_is_value_error_and_reports_kind():
    with pytest.raises(ValueError) as excinfo:
        WindingInputs(24, 3)
    error = excinfo.value
    assert isinstance(error, WindingLayoutError)
    assert error.to_dict() == {
        'kind': 'invalid_configuration',
        'parameter': 'n_poles',
        'message': 'Pole count must be even, got 3'
    }


def test_pole_pitch_rounding_to_zero_is_rejected():
    # tau = 6/14 rounds to 0 slots
    with pytest.raises(InvalidConfiguration):
        WindingInputs(6, 14)


def test_short_pitch_needs_two_slot_pole_pitch():
    WindingInputs(6, 6, pitch_mode='full')
    with pytest.raises(InvalidConfiguration):
        WindingInputs(6, 6, pitch_mode='short')


@pytest.mark.parametrize('value, expected', [
    (2.5, 3), (2.49, 2), (6.0, 6), (0.5, 1), (7.5, 8),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize('value', [24, 24.0, np.int64(24), np.float64(24.0)])
def test_integer_valued_counts_are_accepted(value):
    inputs = WindingInputs(value, np.int32(4), 3.0)
    assert inputs.n_slots == 24 and type(inputs.n_slots) is int
    assert inputs.n_poles == 4 and type(inputs.n_poles) is int
    assert inputs.n_phases == 3 and type(inputs.n_phases) is int


def test_phase_count_is_not_capped():
    inputs = WindingInputs(270, 2, 27)
    assert inputs.n_phases == 27
