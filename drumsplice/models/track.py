"""
Track data model for splice patterns.
"""

from dataclasses import dataclass
from typing import List, Tuple

from drumsplice.utils.validation import validate_sample_id, validate_steps

STEPS_PER_TRACK = 16
STEPS_PER_GROUP = 4


@dataclass(frozen=True)
class Track:
    """
    One instrument line of a drum pattern.

    A track references a sample on the drum machine and says on which of
    the 16 steps of the loop that sample is triggered.

    Attributes:
        sample_id: Sample number on the device (0-255)
        sample_name: Sample name as stored in the file (may be empty)
        steps: 16 booleans, True where a note triggers
    """

    sample_id: int
    sample_name: str
    steps: Tuple[bool, ...]

    def __post_init__(self):
        validate_sample_id(self.sample_id)
        validate_steps(self.steps)
        object.__setattr__(self, "steps", tuple(bool(s) for s in self.steps))

    @property
    def active_steps(self) -> List[int]:
        """Indices (0-15) of the steps that trigger a note."""
        return [i for i, on in enumerate(self.steps) if on]

    @property
    def step_groups(self) -> List[Tuple[bool, ...]]:
        """The steps split into four beats of four steps."""
        return [
            self.steps[i : i + STEPS_PER_GROUP]
            for i in range(0, STEPS_PER_TRACK, STEPS_PER_GROUP)
        ]

    @property
    def is_silent(self) -> bool:
        return not any(self.steps)

    def grid(self, on: str = "x", off: str = "-") -> str:
        """
        Render the steps as "|x---|----|x---|----|".

        Args:
            on: Character for a triggered step
            off: Character for a silent step
        """
        groups = ("".join(on if s else off for s in group) for group in self.step_groups)
        return "|" + "|".join(groups) + "|"

    def to_dict(self) -> dict:
        return {
            "sample_id": self.sample_id,
            "sample_name": self.sample_name,
            "steps": list(self.steps),
        }

    def __str__(self) -> str:
        return f"({self.sample_id}) {self.sample_name}\t{self.grid()}"
