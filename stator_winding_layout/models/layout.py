"""
Layout data model: slots, coil sides and coils of a double-layer winding.

All objects are frozen. A layout is assembled once by the allocation engine
and then only read.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Polarity(Enum):
    """Current direction of a coil side."""
    POSITIVE = '+'
    NEGATIVE = '-'

    @property
    def opposite(self) -> 'Polarity':
        return Polarity.NEGATIVE if self is Polarity.POSITIVE else Polarity.POSITIVE

    @classmethod
    def for_pole(cls, pole_index: int) -> 'Polarity':
        """Even pole index -> positive, odd -> negative."""
        return cls.POSITIVE if pole_index % 2 == 0 else cls.NEGATIVE


class Layer(Enum):
    """Physical layer of a slot."""
    TOP = 'top'
    BOTTOM = 'bottom'


@dataclass(frozen=True)
class CoilSide:
    """
    Conductor occupying one layer of one slot.

    Attributes:
        phase: Phase label
        polarity: Current direction in this side
        pole: Pole-pair number (1-based) of the owning coil
        peer_slot: Slot index (1-based) holding the other side of the coil
        coil_id: Id of the owning coil
        layer: Layer this side sits in
    """
    phase: str
    polarity: Polarity
    pole: int
    peer_slot: int
    coil_id: int
    layer: Layer

    @property
    def label(self) -> str:
        """Phase and sign, e.g. 'A+'."""
        return f"{self.phase}{self.polarity.value}"


@dataclass(frozen=True)
class Slot:
    """A stator slot with its top and bottom coil sides."""
    index: int
    top: Optional[CoilSide] = None
    bottom: Optional[CoilSide] = None

    def side(self, layer: Layer) -> Optional[CoilSide]:
        return self.top if layer is Layer.TOP else self.bottom


@dataclass(frozen=True)
class Coil:
    """
    A coil: top side in start_slot, return side in end_slot.

    Attributes:
        id: Unique positive id (creation order)
        phase: Phase label
        pole_index: Pole index 0..2p-1 the coil was generated for
        start_slot: Slot of the top side (1-based)
        end_slot: Slot of the bottom side (1-based)
        polarity: Polarity of the top side
        next_coil_id: Series successor within the phase/pole group
    """
    id: int
    phase: str
    pole_index: int
    start_slot: int
    end_slot: int
    polarity: Polarity
    next_coil_id: Optional[int] = None

    @property
    def pole_pair(self) -> int:
        """Pole-pair number (1-based)."""
        return self.pole_index // 2 + 1

    @property
    def group(self) -> Tuple[str, int]:
        """Series group key (phase, pole index)."""
        return (self.phase, self.pole_index)


@dataclass(frozen=True)
class WindingLayout:
    """
    Complete double-layer layout.

    Attributes:
        slots: Slots 1..Z in index order
        coils: Coils in creation order, grouped by series group
        phases: Phase labels in declared order
        strategy: Allocation strategy that produced the layout
    """
    slots: Tuple[Slot, ...]
    coils: Tuple[Coil, ...]
    phases: Tuple[str, ...]
    strategy: str

    @property
    def n_slots(self) -> int:
        return len(self.slots)

    def slot(self, index: int) -> Slot:
        """Slot by 1-based index."""
        if not 1 <= index <= len(self.slots):
            raise IndexError(f"Slot index must be in [1, {len(self.slots)}], got {index}")
        return self.slots[index - 1]

    def coil_map(self) -> Dict[int, Coil]:
        """Coils keyed by id."""
        return {coil.id: coil for coil in self.coils}

    def coil(self, coil_id: int) -> Coil:
        for coil in self.coils:
            if coil.id == coil_id:
                return coil
        raise KeyError(f"No coil with id {coil_id}")
