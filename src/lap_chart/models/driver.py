"""Driver and colour models for lap charts.

A driver's colour is either a single solid colour or a primary/secondary
pair drawn as two overlaid strokes.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Solid:
    """A single colour value, e.g. ``"red"`` or ``"#ff8700"``."""

    value: str

    @property
    def primary(self) -> str:
        return self.value


@dataclass(frozen=True)
class DualTone:
    """A livery colour pair.

    Attributes:
        primary: Colour of the main stroke or marker fill.
        secondary: Colour of the thinner overlaid stripe or marker ring.
    """

    primary: str
    secondary: str


Colour = Union[Solid, DualTone]


def parse_colour(colour: Union[Colour, str, Sequence[str]]) -> Colour:
    """Convert a caller supplied colour into a :data:`Colour`.

    Args:
        colour: An existing ``Solid``/``DualTone``, a colour string, or a
            ``(primary, secondary)`` pair

    Returns:
        Tagged colour value

    Raises:
        ValueError: If a sequence is given that is not a pair
    """
    if isinstance(colour, (Solid, DualTone)):
        return colour
    if isinstance(colour, str):
        return Solid(colour)

    values = list(colour)
    if len(values) == 1:
        return Solid(str(values[0]))
    if len(values) != 2:
        raise ValueError(f"Colour pair must have exactly two values, got {len(values)}")
    return DualTone(str(values[0]), str(values[1]))


@dataclass(frozen=True)
class Driver:
    """Immutable driver row of a lap chart.

    Attributes:
        name: Display name.
        colour: Solid or dual-tone colour.
        positions: 1-based rank for each lap, in lap order. Index 0 is the
            starting grid.
    """

    name: str
    colour: Colour
    positions: Tuple[int, ...]

    @property
    def laps(self) -> int:
        return len(self.positions)

    @property
    def start_position(self) -> int:
        return self.positions[0]

    @property
    def finish_position(self) -> int:
        return self.positions[-1]
