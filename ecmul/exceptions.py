class ECMulError(Exception):
    pass


class NoInverseExistsError(ECMulError, ValueError):
    value: int
    modulus: int

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f'{value} has no modular inverse modulo {modulus}')


class InvalidScalarError(ECMulError, ValueError):
    scalar: int

    def __init__(self, scalar: int):
        self.scalar = scalar
        super().__init__(f'Scalar must be non-negative, but got: {scalar}')


class InvalidCurveError(ECMulError, ValueError):
    a: int
    b: int
    p: int

    def __init__(self, a: int, b: int, p: int, reason: str):
        self.a = a
        self.b = b
        self.p = p
        super().__init__(f'Invalid curve y^2 = x^3 + {a}x + {b} (mod {p}): {reason}')


class InvalidModulusError(ECMulError, ValueError):
    modulus: int

    def __init__(self, modulus: int):
        self.modulus = modulus
        super().__init__(f'Modulus should be at least 2, but got: {modulus}')
