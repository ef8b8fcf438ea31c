"""Exceptions raised by the cipher engine."""


class CipherError(Exception):
    """Base class for cipher engine errors."""


class MalformedCiphertext(CipherError, ValueError):
    """Wire text cannot be decoded.

    Raised for a non-numeric token, a value outside the accepted range, or
    (AES) a token count that is not a multiple of the block size.
    """


class EmptyKeyError(CipherError, ValueError):
    """A repeating-key transform was given an empty key."""
