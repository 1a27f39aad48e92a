from .curves import NAMED_CURVES, NamedCurve, p256, reference_curve, reference_point, reference_scalar, secp256k1
from .elliptic_curve import EllipticCurve, add, scalar_multiply
from .exceptions import ECMulError, InvalidCurveError, InvalidModulusError, InvalidScalarError, NoInverseExistsError
from .modular import mod_inverse, normalize
from .point import INFINITY, NormalPoint, Point, PointAtInfinity
from .validation import is_on_curve, validate_parameters

__all__ = [
    'INFINITY',
    'NAMED_CURVES',
    'ECMulError',
    'EllipticCurve',
    'InvalidCurveError',
    'InvalidModulusError',
    'InvalidScalarError',
    'NamedCurve',
    'NoInverseExistsError',
    'NormalPoint',
    'Point',
    'PointAtInfinity',
    'add',
    'is_on_curve',
    'mod_inverse',
    'normalize',
    'p256',
    'reference_curve',
    'reference_point',
    'reference_scalar',
    'scalar_multiply',
    'secp256k1',
    'validate_parameters',
]
