from dataclasses import dataclass


@dataclass(frozen=True)
class NormalPoint:
    x: int
    y: int


@dataclass(frozen=True)
class PointAtInfinity:
    pass


Point = NormalPoint | PointAtInfinity

INFINITY = PointAtInfinity()
