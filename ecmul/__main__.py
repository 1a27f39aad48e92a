import logging
import sys
from argparse import ArgumentParser

from .curves import NAMED_CURVES, reference_curve, reference_point, reference_scalar
from .elliptic_curve import EllipticCurve, scalar_multiply
from .exceptions import ECMulError, InvalidModulusError
from .point import NormalPoint, PointAtInfinity
from .validation import is_on_curve

logger = logging.getLogger('ecmul')


def _int(value: str) -> int:
    # accepts decimal as well as 0x / 0o / 0b prefixed values
    return int(value, 0)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='ecmul', description='Compute nP on a curve y^2 = x^3 + ax + b (mod p)')
    parser.add_argument('--curve', choices=sorted(NAMED_CURVES), help='named curve, P defaults to its generator')
    parser.add_argument('-a', type=_int, help='coefficient a')
    parser.add_argument('-b', type=_int, help='coefficient b')
    parser.add_argument('-p', type=_int, help='field modulus')
    parser.add_argument('-x', type=_int, help='x coordinate of P')
    parser.add_argument('-y', type=_int, help='y coordinate of P')
    parser.add_argument('-n', type=_int, default=reference_scalar, help='scalar (default: %(default)s)')
    parser.add_argument('--validate', action='store_true', help='reject singular curves before computing')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    base: EllipticCurve = NAMED_CURVES[args.curve] if args.curve else reference_curve
    curve = EllipticCurve(
        base.a if args.a is None else args.a,
        base.b if args.b is None else args.b,
        base.p if args.p is None else args.p,
    )

    default_point = NAMED_CURVES[args.curve].G if args.curve else reference_point
    if (args.x is None) != (args.y is None):
        parser.error('-x and -y should be given together')
    point = default_point if args.x is None else NormalPoint(args.x, args.y)

    try:
        # normalize cannot reduce modulo 0 or a negative number
        if curve.p < 2:  # noqa: PLR2004
            raise InvalidModulusError(curve.p)
        if args.validate:
            curve.validate()
        result = scalar_multiply(args.n, point, curve)
    except ECMulError as e:
        logger.error('Failed to compute %dP on y^2 = x^3 + %dx + %d (mod %d): %s', args.n, curve.a, curve.b, curve.p, e)  # noqa: TRY400
        return 1

    if isinstance(result, PointAtInfinity):
        print(f'{args.n}P is the point at infinity')  # noqa: T201
    else:
        print(f'{args.n}P = ({result.x}, {result.y})')  # noqa: T201
        print(f'Is the point on the curve? {str(is_on_curve(result, curve.a, curve.b, curve.p)).lower()}')  # noqa: T201
    return 0


if __name__ == '__main__':
    sys.exit(main())
