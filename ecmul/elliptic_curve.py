from dataclasses import dataclass

from .exceptions import InvalidScalarError
from .modular import mod_inverse, normalize
from .point import INFINITY, NormalPoint, Point, PointAtInfinity
from .validation import is_on_curve, validate_parameters


@dataclass(frozen=True)
class EllipticCurve:
    # y^2 = x^3 + ax + b (mod p)
    a: int
    b: int
    p: int

    # Construction does not check the parameters, call validate() for that
    def validate(self) -> None:
        validate_parameters(self.a, self.b, self.p)

    def is_valid(self, p: Point) -> bool:
        return is_on_curve(p, self.a, self.b, self.p)

    def negate(self, p: Point) -> Point:
        if isinstance(p, PointAtInfinity):
            return p
        return NormalPoint(normalize(p.x, self.p), normalize(-p.y, self.p))

    # https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication
    def add(self, p: Point, q: Point) -> Point:
        if isinstance(p, PointAtInfinity):
            return q
        if isinstance(q, PointAtInfinity):
            return p

        x1, y1 = normalize(p.x, self.p), normalize(p.y, self.p)
        x2, y2 = normalize(q.x, self.p), normalize(q.y, self.p)

        # q = -p, or the tangent at a point of order 2 is vertical
        if x1 == x2 and (y1 != y2 or y1 == 0):
            return INFINITY

        def get_lambda() -> int:
            if x1 != x2:
                return normalize((y2 - y1) * mod_inverse(x2 - x1, self.p), self.p)
            return normalize((3 * x1 * x1 + self.a) * mod_inverse(2 * y1, self.p), self.p)

        lam = get_lambda()
        r_x = normalize(lam * lam - x1 - x2, self.p)
        return NormalPoint(r_x, normalize(lam * (x1 - r_x) - y1, self.p))

    def double(self, p: Point) -> Point:
        return self.add(p, p)

    def multiply(self, p: Point, k: int) -> Point:
        if isinstance(k, bool) or not isinstance(k, int):
            msg = f'Expected int scalar, but got: {type(k)}'
            raise TypeError(msg)
        if k < 0:
            raise InvalidScalarError(k)

        res: Point = INFINITY
        while k:
            if k & 1:
                res = self.add(res, p)

            p = self.double(p)
            k >>= 1
        return res


def add(p: Point, q: Point, curve: EllipticCurve) -> Point:
    return curve.add(p, q)


def scalar_multiply(n: int, p: Point, curve: EllipticCurve) -> Point:
    return curve.multiply(p, n)
