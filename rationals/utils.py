# coding: utf-8

import logging
import math
import struct


INT_WIDTHS = (8, 16, 32, 64)


def int_bounds(bits):
    """Range [lo, hi] of a signed two's complement integer of given width."""
    if bits not in INT_WIDTHS:
        raise ValueError("Unsupported integer width: {}".format(bits))
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def check_range(x, bits, what='value'):
    """Return x if it fits into signed bits-wide integer, raise OverflowError otherwise."""
    lo, hi = int_bounds(bits)
    if not lo <= x <= hi:
        logging.debug('%s %d does not fit int%d', what, x, bits)
        raise OverflowError("{} {} does not fit int{}".format(what, x, bits))
    return x


def trunc_div(n, d):
    """Integer quotient n/d rounded toward zero (python // rounds toward -inf)."""
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def ratio_to_float32(n, d):
    """
    Nearest float32 to the exact quotient n/d, as python float.

    We compute a truncated quotient with at least 32 significant bits and
    set its lowest bit if the division was inexact (round-to-odd).
    The result is exactly representable as float64 and rounds to the same
    float32 as the exact quotient.
    """
    if n == 0:
        return 0.0
    neg = (n < 0) != (d < 0)
    n, d = abs(n), abs(d)

    shift = n.bit_length() - d.bit_length() - 32
    if shift >= 0:
        q, r = divmod(n, d << shift)
    else:
        q, r = divmod(n << -shift, d)
    if r:
        q |= 1

    x = math.ldexp(q, shift)
    x = struct.unpack('<f', struct.pack('<f', x))[0]
    return -x if neg else x


def lowest_terms(n, d):
    """Pair (n, d) reduced by gcd, with positive d; plain ints, no width check."""
    if d < 0:
        n, d = -n, -d
    g = math.gcd(n, d)
    return n // g, d // g
