"""
Winding geometry: pole pitch, coil pitch, slots per pole per phase and
slot angle derived from the layout inputs.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple
import math

from ..models.inputs import WindingInputs, PitchMode, as_integer, round_half_up
from ..utils.constants import (
    INTEGER_SLOT, FRACTIONAL_SLOT, FULL_PITCH, SHORT_PITCH
)


def resolve_offset(offset: Any, tau_base: int) -> int:
    """
    Clamp a short-pitch offset.

    Offsets that are not integers in [1, tau_base) silently fall back to 1.
    """
    value = as_integer(offset)
    if value is not None and 1 <= value < tau_base:
        return value
    return 1


def coil_pitch(tau_base: int, pitch_mode: PitchMode, offset: Any) -> Tuple[int, int]:
    """
    Coil pitch y in slots.

    Returns:
        (y, applied offset); the applied offset is 0 at full pitch
    """
    if pitch_mode is PitchMode.SHORT:
        applied = resolve_offset(offset, tau_base)
        return tau_base - applied, applied
    return tau_base, 0


@dataclass(frozen=True)
class WindingGeometry:
    """
    Derived geometry of a winding.

    Attributes:
        inputs: Validated winding inputs
        tau: Pole pitch Z/2p [slots], may be fractional
        tau_base: Pole pitch rounded to the nearest slot
        y: Coil pitch [slots]
        offset: Applied short-pitch offset (0 at full pitch)
        q: Slots per pole per phase Z/(2p*m), may be fractional
        alpha: Electrical angle between adjacent slots [deg]
        beta: Pitch ratio y/tau
    """
    inputs: WindingInputs

    tau: float = field(init=False)
    tau_base: int = field(init=False)
    y: int = field(init=False)
    offset: int = field(init=False)
    q: float = field(init=False)
    alpha: float = field(init=False)
    beta: float = field(init=False)

    def __post_init__(self):
        Z = self.inputs.n_slots
        p2 = self.inputs.n_poles
        m = self.inputs.n_phases

        tau = Z / p2
        tau_base = round_half_up(tau)
        y, offset = coil_pitch(tau_base, self.inputs.pitch_mode, self.inputs.offset)

        object.__setattr__(self, 'tau', tau)
        object.__setattr__(self, 'tau_base', tau_base)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, 'offset', offset)
        object.__setattr__(self, 'q', Z / (p2 * m))
        object.__setattr__(self, 'alpha', 360.0 * (p2 / 2) / Z)
        object.__setattr__(self, 'beta', y / tau)

    @property
    def n_slots(self) -> int:
        return self.inputs.n_slots

    @property
    def n_poles(self) -> int:
        return self.inputs.n_poles

    @property
    def n_phases(self) -> int:
        return self.inputs.n_phases

    @property
    def alpha_rad(self) -> float:
        """Slot angle [rad electrical]."""
        return math.radians(self.alpha)

    @property
    def is_integer_slot(self) -> bool:
        """True when q is an integer."""
        return self.n_slots % (self.n_poles * self.n_phases) == 0

    @property
    def is_integer_pole_pitch(self) -> bool:
        return self.n_slots % self.n_poles == 0

    @property
    def full_pitch_span(self) -> int:
        """Coil pitch regarded as full pitch: tau, or ceil(tau) when fractional."""
        if self.is_integer_pole_pitch:
            return self.n_slots // self.n_poles
        return math.ceil(self.tau)

    @property
    def is_full_pitch(self) -> bool:
        return self.y == self.full_pitch_span

    @property
    def slot_type(self) -> str:
        return INTEGER_SLOT if self.is_integer_slot else FRACTIONAL_SLOT

    @property
    def pitch_type(self) -> str:
        return FULL_PITCH if self.is_full_pitch else SHORT_PITCH

    @property
    def combo_label(self) -> str:
        """One of the four integer/fractional x full/short winding classes."""
        return f"{self.slot_type}, {self.pitch_type}"

    @property
    def pitch_description(self) -> str:
        """Short explanation of how y relates to tau."""
        if self.is_integer_pole_pitch:
            if self.y == self.tau_base:
                return "y = τ"
            return f"y = τ - {self.tau_base - self.y}"
        if self.is_full_pitch:
            return f"y = ceil({self.tau:.2f}) = {self.y}"
        return f"y = floor({self.tau:.2f}) or less = {self.y}"


def calculate_geometry(inputs: WindingInputs) -> WindingGeometry:
    """
    Calculate winding geometry from inputs.

    Args:
        inputs: Validated winding inputs

    Returns:
        WindingGeometry with tau, y, q, alpha and beta
    """
    return WindingGeometry(inputs=inputs)
