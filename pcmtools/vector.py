"""Three-dimensional vectors and the angle between them."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Parse the longest numeric prefix of text; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    token = match.group(1)
    body = token.lower().lstrip("+-")
    sign = -1.0 if token.startswith("-") else 1.0
    if body.startswith("0x"):
        try:
            return float.fromhex(token)
        except OverflowError:
            return sign * math.inf
    return float(token)


@dataclass(frozen=True)
class Vect3:
    """A point or direction in three dimensions."""

    x: float
    y: float
    z: float

    def dot(self, other: Vect3) -> float:
        """Return the dot product with other."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle(self, other: Vect3) -> float:
        """Return the angle to other in radians, or NaN when undefined."""
        dot = self.dot(other)
        denominator = math.sqrt(self.dot(self) * other.dot(other))
        if denominator == 0:
            cosine = math.nan if dot == 0 else math.copysign(math.inf, dot)
        else:
            cosine = dot / denominator
        if not -1.0 <= cosine <= 1.0:
            return math.nan
        return math.acos(cosine)


def main(argv: list[str] | None = None) -> int:
    """Print the angle between the vectors given as six numbers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 6:
        print("Usage: vector Ax Ay Az Bx By Bz", file=sys.stderr)
        return 1
    values = [_atof(arg) for arg in args]
    a = Vect3(*values[:3])
    b = Vect3(*values[3:])
    print(f"{a.angle(b):f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())