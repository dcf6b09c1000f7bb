import logging

from .utils import check_range, trunc_div, ratio_to_float32, lowest_terms


def is_int(x):
    """Plain int; bool is not accepted as a number here."""
    return isinstance(x, int) and not isinstance(x, bool)


def is_operand(x):
    return isinstance(x, Rational) or is_int(x)


class InvalidArgumentException(ValueError):
    """Operation would divide by zero."""


class NullOperandException(TypeError):
    """Rational operand is None."""


class Rational:
    """
    Exact ratio of two fixed-width signed integers.

    Attributes numerator and denominator are public and may be assigned,
    so every operation checks its operands again before computing.
    Values are not reduced and signs are not normalized automatically:
    Rational(2, 4) keeps (2, 4), and Rational(-1, -1) keeps (-1, -1).
    Equality and ordering compare values, not representations.

    Operations never modify operands; they return new instances.
    Results that do not fit the integer width raise OverflowError.
    """

    bits = 64

    def __init__(self, numerator, denominator=1):
        if not is_int(numerator) or not is_int(denominator):
            raise TypeError("Rational components must be integers")
        if denominator == 0:
            logging.debug('zero denominator for numerator %d', numerator)
            raise InvalidArgumentException("Cannot create a Rational with zero denominator")
        self.numerator = check_range(numerator, self.bits, 'numerator')
        self.denominator = check_range(denominator, self.bits, 'denominator')

    @classmethod
    def convert(cls, x):
        """Promote int n to n/1; Rational is returned as is."""
        if isinstance(x, Rational):
            return x
        elif x is None:
            raise NullOperandException("Rational operand is None")
        elif is_int(x):
            return cls(x, 1)
        else:
            raise TypeError("Can't convert {!r} to Rational".format(x))

    def _check(self):
        if self.denominator == 0:
            logging.debug('operand %d/0 has zero denominator', self.numerator)
            raise InvalidArgumentException("Rational has zero denominator")
        return self

    def _operands(self, other):
        other = self.convert(other)
        self._check()
        other._check()
        return self.numerator, self.denominator, other.numerator, other.denominator

    #
    # arithmetic
    #

    def add(self, other):
        a, b, c, d = self._operands(other)
        return type(self)(a * d + b * c, b * d)

    def subtract(self, other):
        a, b, c, d = self._operands(other)
        return type(self)(a * d - b * c, b * d)

    def multiply(self, other):
        a, b, c, d = self._operands(other)
        return type(self)(a * c, b * d)

    def divide(self, other):
        other = self.convert(other)
        self._check()
        return self.multiply(other.inverse())

    def negate(self):
        self._check()
        return type(self)(-self.numerator, self.denominator)

    def inverse(self):
        self._check()
        if self.numerator == 0:
            logging.debug('inverse of zero: 0/%d', self.denominator)
            raise InvalidArgumentException("Zero has no inverse")
        return type(self)(self.denominator, self.numerator)

    def abs(self):
        self._check()
        return type(self)(abs(self.numerator), abs(self.denominator))

    def pow(self, exponent):
        """
        Integer power; x**0 is 1/1 for any valid x, including zero.

        Negative exponent gives the inverse of the positive power,
        so zero to a negative power raises InvalidArgumentException.
        """
        self._check()
        if not is_int(exponent):
            raise TypeError("Exponent must be an integer")
        check_range(exponent, 32, 'exponent')
        if exponent == 0:
            return type(self)(1, 1)
        base = self if exponent > 0 else self.inverse()
        exponent = abs(exponent)
        return type(self)(
            self._power(base.numerator, exponent),
            self._power(base.denominator, exponent),
        )

    def _power(self, x, exponent):
        # |x| >= 2 overflows for such exponents; do not build the huge int
        if abs(x) > 1 and exponent >= self.bits:
            logging.debug('%d**%d overflows int%d', x, exponent, self.bits)
            raise OverflowError("{}**{} does not fit int{}".format(x, exponent, self.bits))
        return x ** exponent

    def reduce(self):
        """Lowest terms with positive denominator."""
        self._check()
        return type(self)(*lowest_terms(self.numerator, self.denominator))

    def signum(self):
        self._check()
        if self.numerator == 0:
            return 0
        return 1 if (self.numerator < 0) == (self.denominator < 0) else -1

    def is_zero(self):
        self._check()
        return self.numerator == 0

    #
    # comparison
    #

    def _values(self, other):
        # ints are compared as n/1 without promotion, so any int is accepted
        if is_int(other):
            c, d = other, 1
        else:
            other = self.convert(other)._check()
            c, d = other.numerator, other.denominator
        self._check()
        return self.numerator, self.denominator, c, d

    def compare_to(self, other):
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        a, b, c, d = self._values(other)
        lhs, rhs = a * d, c * b
        result = (lhs > rhs) - (lhs < rhs)
        return -result if b * d < 0 else result

    def __eq__(self, other):
        if not is_operand(other):
            return NotImplemented
        a, b, c, d = self._values(other)
        return a * d == c * b

    def __lt__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self):
        # equal values must hash equally, and n/1 as n
        self._check()
        n, d = lowest_terms(self.numerator, self.denominator)
        if d == 1:
            return hash(n)
        return hash((n, d))

    #
    # conversions
    #

    def _to_int(self, bits):
        self._check()
        return check_range(trunc_div(self.numerator, self.denominator), bits, 'quotient')

    def to_int8(self):
        return self._to_int(8)

    def to_int16(self):
        return self._to_int(16)

    def to_int32(self):
        return self._to_int(32)

    def to_int64(self):
        return self._to_int(64)

    def to_float32(self):
        self._check()
        return ratio_to_float32(self.numerator, self.denominator)

    def to_float64(self):
        self._check()
        return self.numerator / self.denominator

    def __int__(self):
        return self.to_int64()

    def __float__(self):
        return self.to_float64()

    def __bool__(self):
        return not self.is_zero()

    #
    # operators
    #

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __invert__(self):
        return self.inverse()

    def __add__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not is_int(other):
            return NotImplemented
        return self.convert(other).add(self)

    def __sub__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not is_int(other):
            return NotImplemented
        return self.convert(other).subtract(self)

    def __mul__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not is_int(other):
            return NotImplemented
        return self.convert(other).multiply(self)

    def __truediv__(self, other):
        if not is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not is_int(other):
            return NotImplemented
        return self.convert(other).divide(self)

    def __pow__(self, exponent):
        if not is_int(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __repr__(self):
        return 'Rational({}, {})'.format(self.numerator, self.denominator)
