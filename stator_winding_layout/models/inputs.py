"""
Input data model for stator winding layouts.
Contains the slot, pole, phase and pitch choices that define a winding.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union
import math
import numbers

from ..utils.constants import MIN_SLOTS, MIN_POLES, MIN_PHASES
from ..utils.errors import InvalidConfiguration


class PitchMode(Enum):
    """Coil pitch selection."""
    FULL = 'full'
    SHORT = 'short'

    @classmethod
    def parse(cls, value: Union['PitchMode', str]) -> 'PitchMode':
        """Accept an enum member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidConfiguration(
            f"Pitch mode must be 'full' or 'short', got {value!r}",
            parameter='pitch_mode'
        )


def as_integer(value: Any) -> Optional[int]:
    """
    Integer value of a number, or None when it is not integer-valued.

    Accepts any integral type (numpy integers included) and integral floats
    such as 2.0. Booleans and strings are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and math.isfinite(value) and float(value).is_integer():
        return int(value)
    return None


@dataclass(frozen=True)
class WindingInputs:
    """
    Winding layout specifications.

    These are the only inputs of a layout run; every other quantity is
    derived from them.

    Attributes:
        n_slots: Number of stator slots Z
        n_poles: Number of poles 2p (must be even)
        n_phases: Number of phases m
        pitch_mode: Full or short pitch
        offset: Short-pitch shortening in slots (ignored at full pitch;
            invalid values fall back to 1)
    """
    n_slots: int
    n_poles: int
    n_phases: int = 3
    pitch_mode: PitchMode = PitchMode.FULL
    offset: Any = 1

    def __post_init__(self):
        object.__setattr__(self, 'pitch_mode', PitchMode.parse(self.pitch_mode))
        self._validate()

    def _validate(self):
        """Validate input parameters."""
        for name in ('n_slots', 'n_poles', 'n_phases'):
            value = getattr(self, name)
            converted = as_integer(value)
            if converted is None or converted <= 0:
                raise InvalidConfiguration(
                    f"{name} must be a positive integer, got {value!r}",
                    parameter=name
                )
            object.__setattr__(self, name, converted)
        if self.n_slots < MIN_SLOTS:
            raise InvalidConfiguration(
                f"Slot count must be >= {MIN_SLOTS}, got {self.n_slots}",
                parameter='n_slots'
            )
        if self.n_poles < MIN_POLES:
            raise InvalidConfiguration(
                f"Pole count must be >= {MIN_POLES}, got {self.n_poles}",
                parameter='n_poles'
            )
        if self.n_poles % 2 != 0:
            raise InvalidConfiguration(
                f"Pole count must be even, got {self.n_poles}",
                parameter='n_poles'
            )
        if self.n_phases < MIN_PHASES:
            raise InvalidConfiguration(
                f"Phase count must be >= {MIN_PHASES}, got {self.n_phases}",
                parameter='n_phases'
            )

        # y = round(tau) - offset must stay positive
        min_span = 2 if self.pitch_mode is PitchMode.SHORT else 1
        if round_half_up(self.n_slots / self.n_poles) < min_span:
            raise InvalidConfiguration(
                f"Pole pitch Z/2p = {self.n_slots / self.n_poles:.3f} slots is too small "
                f"for a {self.pitch_mode.value}-pitch coil",
                parameter=None
            )

    @property
    def pole_pairs(self) -> int:
        """Number of pole pairs p."""
        return self.n_poles // 2

    def __repr__(self) -> str:
        return (
            f"WindingInputs(Z={self.n_slots}, 2p={self.n_poles}, m={self.n_phases}, "
            f"pitch={self.pitch_mode.value}, offset={self.offset!r})"
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def create_inputs(
    n_slots: int,
    n_poles: int,
    n_phases: int = 3,
    pitch_mode: Union[PitchMode, str] = PitchMode.FULL,
    offset: Any = 1
) -> WindingInputs:
    """Create validated winding inputs."""
    return WindingInputs(
        n_slots=n_slots,
        n_poles=n_poles,
        n_phases=n_phases,
        pitch_mode=pitch_mode,
        offset=offset
    )
