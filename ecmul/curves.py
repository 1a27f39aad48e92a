from dataclasses import dataclass

from .elliptic_curve import EllipticCurve
from .point import NormalPoint


@dataclass(frozen=True)
class NamedCurve(EllipticCurve):
    name: str
    G: NormalPoint
    n: int


# Small curve used for manual verification, 2 * (205, 130) = (79, 178)
reference_curve = EllipticCurve(4, 4, 313)
reference_point = NormalPoint(205, 130)
reference_scalar = 2

# https://en.bitcoin.it/wiki/Secp256k1
secp256k1 = NamedCurve(
    0,
    7,
    (1 << 256) - (1 << 32) - (1 << 9) - (1 << 8) - (1 << 7) - (1 << 6) - (1 << 4) - 1,
    'secp256k1',
    NormalPoint(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798, 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
    ),
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)

# FIPS 186-4, D.1.2.3
p256 = NamedCurve(
    -3,
    0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    'p256',
    NormalPoint(
        0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296, 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5
    ),
    0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
)

NAMED_CURVES: dict[str, NamedCurve] = {c.name: c for c in (secp256k1, p256)}
