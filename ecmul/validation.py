import logging

from .exceptions import InvalidCurveError
from .modular import normalize
from .point import Point, PointAtInfinity

logger = logging.getLogger(__name__)


def is_on_curve(p: Point, a: int, b: int, m: int) -> bool:
    # the point at infinity lies on every curve
    if isinstance(p, PointAtInfinity):
        return True

    left = normalize(p.y * p.y, m)
    right = normalize(p.x * p.x * p.x + a * p.x + b, m)
    return left == right


# Primality of p is not checked, it stays the caller's responsibility
def validate_parameters(a: int, b: int, p: int) -> None:
    if p <= 3:  # noqa: PLR2004
        raise InvalidCurveError(a, b, p, 'modulus should be greater than 3')

    discriminant = normalize(4 * a**3 + 27 * b**2, p)
    if discriminant == 0:
        raise InvalidCurveError(a, b, p, 'curve is singular (4a^3 + 27b^2 = 0)')

    logger.debug('Curve y^2 = x^3 + %dx + %d (mod %d) passed validation', a, b, p)
