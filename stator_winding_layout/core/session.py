"""
Published layout state for interactive consumers.

A session holds the most recent successful result. Each calculation builds
a complete result first and only then replaces the reference, so readers
never see a half-built layout.
"""

from typing import Any, Optional, Union

from ..models.inputs import PitchMode
from ..utils.errors import InvalidConfiguration
from .design_engine import WindingDesignOutputs, generate_winding


class LayoutSession:
    """
    Holds the currently published winding result.

    Usage:
        session = LayoutSession()
        session.calculate(24, 4, pitch_mode='short', offset=1)
        layout = session.current.layout
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._current: Optional[WindingDesignOutputs] = None
        self.last_error: Optional[dict] = None

    @property
    def current(self) -> Optional[WindingDesignOutputs]:
        """Most recently published result (None before the first success)."""
        return self._current

    @property
    def results_visible(self) -> bool:
        """False after a failed calculation: published numbers are stale."""
        return self._current is not None and self.last_error is None

    def calculate(
        self,
        n_slots: int,
        n_poles: int,
        n_phases: int = 3,
        pitch_mode: Union[PitchMode, str] = PitchMode.FULL,
        offset: Any = 1
    ) -> WindingDesignOutputs:
        """
        Compute a new result and publish it.

        On InvalidConfiguration the previous result stays published, the
        error is recorded in last_error and re-raised.
        """
        try:
            outputs = generate_winding(
                n_slots, n_poles, n_phases,
                pitch_mode=pitch_mode,
                offset=offset,
                verbose=self.verbose
            )
        except InvalidConfiguration as error:
            self.last_error = error.to_dict()
            raise

        self._current = outputs
        self.last_error = None
        return outputs
