import dataclasses
import enum
import math


@dataclasses.dataclass(frozen=True)
class Vector3:
    """
    Acceleration in gravity units.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __truediv__(self, divisor):
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other):
        return (self - other).length()

    def row(self, label=""):
        # fixed-width console row for measurement tables
        return f"{label:>7} {self.x:>5.2f} {self.y:>5.2f} {self.z:>5.2f}"


class FlapState(enum.Enum):
    # value is the calibration file tag
    CLOSED = "C"
    INSIDE = "I"
    OUTSIDE = "O"

    @property
    def tag(self):
        return self.value

    @property
    def label(self):
        return self.name.capitalize()


@dataclasses.dataclass(frozen=True)
class ReferenceSet:
    """
    Calibrated reference vectors, one per flap state. All three are
    required, so a half-calibrated set cannot be constructed.
    """
    closed: Vector3
    inside: Vector3
    outside: Vector3

    def __post_init__(self):
        for field in dataclasses.fields(self):
            if not isinstance(getattr(self, field.name), Vector3):
                raise TypeError(f"ReferenceSet.{field.name} must be a Vector3")

    def __getitem__(self, state):
        return getattr(self, state.name.lower())

    @classmethod
    def from_mapping(cls, vectors):
        # KeyError names the first missing state
        return cls(
            closed=vectors[FlapState.CLOSED],
            inside=vectors[FlapState.INSIDE],
            outside=vectors[FlapState.OUTSIDE],
        )
