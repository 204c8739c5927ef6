import matplotlib
matplotlib.use('Agg')

import pytest

from stator_winding_layout import generate_winding


@pytest.fixture()
def full_pitch_24():
    """Z=24, 2p=4, m=3, full pitch."""
    return generate_winding(24, 4, 3, pitch_mode='full')


@pytest.fixture()
def short_pitch_24():
    """Z=24, 2p=4, m=3, short pitch by one slot."""
    return generate_winding(24, 4, 3, pitch_mode='short', offset=1)


@pytest.fixture()
def fractional_10():
    """Z=10, 2p=4, m=3: q = 5/6."""
    return generate_winding(10, 4, 3)
