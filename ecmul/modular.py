from .exceptions import InvalidModulusError, NoInverseExistsError


def normalize(value: int, m: int) -> int:
    # python's % is already floored, so the result is in [0, m) for m > 0
    return value % m


# https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm#Computing_multiplicative_inverses_in_modular_structures
def mod_inverse(a: int, m: int) -> int:
    if m < 2:  # noqa: PLR2004
        raise InvalidModulusError(m)

    t, new_t = 0, 1
    r, new_r = m, normalize(a, m)
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r

    # r is gcd(a, m) here
    if r != 1:
        raise NoInverseExistsError(a, m)
    return normalize(t, m)
