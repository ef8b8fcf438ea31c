"""GF(2^8) arithmetic with the AES reduction polynomial x^8 + x^4 + x^3 + x + 1."""

# 0x11b without the x^8 term
REDUCTION = 0x1b


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ REDUCTION) & 0xff if a & 0x80 else (a << 1) & 0xff


def gf_mul(a: int, b: int) -> int:
    """
    Multiply two field elements (peasant's algorithm).

    Args:
        a: Field element 0..255
        b: Field element 0..255

    Returns:
        Product a*b reduced modulo the AES polynomial
    """
    p = 0
    for _ in range(8):
        if b & 1:
            p ^= a
        a = xtime(a)
        b >>= 1
    return p & 0xff
