#
# Arbitrary-precision decimal floating point: a BigInt mantissa scaled by a power of ten
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import logging
import math
import re

from .bigint import BigInt, convert_for_arith as convert_int_for_arith
from .context import (
    get_context, InvalidArgs, InvalidString, DomainError, DivideByZero, Overflow, OutOfMemory,
    OP_ADD, OP_SUBTRACT, OP_MULTIPLY, OP_DIVIDE, OP_FROM_FLOAT, OP_FROM_STRING, OP_SQRT,
    OP_EXP, OP_LOG, OP_LOG10, OP_LOG2, OP_POW, OP_SIN, OP_COS, OP_TAN, OP_ASIN, OP_ACOS,
    OP_ATAN, OP_ATAN2, OP_SINH, OP_COSH, OP_TANH,
)
from .textformat import DefaultDecFormat


__all__ = ('BigFloat', )

logger = logging.getLogger(__name__)

# Significant digits used when a double is converted to text
DOUBLE_DIGITS = 15
# Integral exponents up to this magnitude are raised exactly by pow()
EXACT_POW_LIMIT = 10000


class BigFloat:
    '''A BigFloat has value

            (-1)^sign * mantissa * 10^exponent

    where the mantissa is a non-negative BigInt and the exponent a Python integer.  Zero
    is canonical: a zero mantissa has a positive sign and a zero exponent.  Otherwise the
    representation is not normalized, so 1 may be held as (1, 0) or (10, -1); equality
    and comparison are by value.

    precision is the number of significant decimal digits the value carries.  It is the
    target for division, square roots and the transcendental functions; addition,
    subtraction and multiplication keep every digit.  Results take the larger precision
    of their operands.
    '''

    __slots__ = ('mantissa', 'exponent', 'precision', 'sign')

    def __init__(self, mantissa=0, exponent=0, precision=None):
        '''Return mantissa * 10^exponent.  mantissa is an int or a BigInt and carries the
        sign.'''
        mantissa = convert_int_for_arith(mantissa)
        if mantissa is None:
            raise TypeError('mantissa must be an int or a BigInt')
        if not isinstance(exponent, int):
            raise TypeError('exponent must be an integer')
        self._set(mantissa.negative, mantissa.copy_abs(), exponent, precision_or_default(precision))

    def _set(self, sign, mantissa, exponent, precision):
        if mantissa.is_zero():
            sign = False
            exponent = 0
        self.sign = sign
        self.mantissa = mantissa
        self.exponent = exponent
        self.precision = precision

    @classmethod
    def _from_parts(cls, sign, mantissa, exponent, precision):
        '''mantissa is a non-negative BigInt.'''
        result = cls.__new__(cls)
        result._set(sign, mantissa, exponent, precision)
        return result

    @classmethod
    def _from_signed(cls, mantissa, exponent, precision):
        '''mantissa is a signed BigInt.'''
        return cls._from_parts(mantissa.negative, mantissa.copy_abs(), exponent, precision)

    ##
    ## Constructors
    ##

    @classmethod
    def zero(cls, precision=None):
        return cls._from_parts(False, BigInt.zero(), 0, precision_or_default(precision))

    @classmethod
    def from_int(cls, value, precision=None):
        return cls.from_bigint(BigInt.from_int(value), precision)

    @classmethod
    def from_bigint(cls, value, precision=None):
        '''Return the BigInt value with exponent 0.'''
        return cls._from_signed(value, 0, precision_or_default(precision))

    @classmethod
    def from_string(cls, text, precision=None, context=None):
        '''Convert text to a BigFloat.  Leading whitespace, a sign, a decimal point and an
        exponent are all optional, but at least one digit is required.  Digits after the
        point lower the exponent, so "1.5e2" has mantissa 15 and exponent 1.'''
        if not isinstance(text, str):
            raise TypeError('from_string requires a string')
        match = FLOAT_REGEX.fullmatch(text.lstrip())
        if match is None:
            return InvalidString((OP_FROM_STRING, text), f'invalid number: {text!r}'
                                 ).signal(context)

        fraction = match.group(3) or ''
        if match.group(4) is None:
            digits = (match.group(2) or '') + fraction
        else:
            digits = match.group(4)
        exponent = int(match.group(6) or 0) - len(fraction)
        mantissa = BigInt.from_string(digits, context=context)
        return cls._from_parts(match.group(0).startswith('-'), mantissa, exponent,
                               precision_or_default(precision, context))

    @classmethod
    def from_float(cls, value, precision=None, context=None):
        '''Convert a double to a BigFloat through its text to 15 significant digits.  Infinities
        signal Overflow and NaNs signal InvalidArgs.'''
        if not isinstance(value, (int, float)):
            raise TypeError('from_float requires a float')
        value = float(value)
        op_tuple = (OP_FROM_FLOAT, value)
        if math.isnan(value):
            return InvalidArgs(op_tuple, 'cannot convert a NaN').signal(context)
        if math.isinf(value):
            return Overflow(op_tuple, 'cannot convert an infinity').signal(context)
        return cls.from_string(f'{value:.{DOUBLE_DIGITS}g}', precision, context)

    @classmethod
    def from_value(cls, value, precision=None, context=None):
        '''Return a BigFloat derived from value, which can be a BigFloat, BigInt, int, float
        or str.'''
        if isinstance(value, BigFloat):
            result = value.copy()
            if precision is not None:
                result.set_precision(precision, context)
            return result
        if isinstance(value, BigInt):
            return cls.from_bigint(value, precision)
        if isinstance(value, int):
            return cls.from_int(value, precision)
        if isinstance(value, float):
            return cls.from_float(value, precision, context)
        if isinstance(value, str):
            return cls.from_string(value, precision, context)
        raise TypeError(f'from_value cannot convert values of type {type(value)}')

    def copy(self):
        '''Return an independent copy.'''
        return BigFloat._from_parts(self.sign, self.mantissa.copy(), self.exponent,
                                    self.precision)

    def set_precision(self, precision, context=None):
        '''Set the precision in place.  A non-positive precision selects the context's.'''
        if precision is not None and precision <= 0:
            precision = None
        self.precision = precision_or_default(precision, context)

    ##
    ## Non-computational operations
    ##

    def is_zero(self):
        return self.mantissa.is_zero()

    def is_negative(self):
        return self.sign

    def is_integral(self):
        return self.exponent >= 0 or not self._truncate()[1]

    def signed_mantissa(self):
        '''Return the mantissa as a BigInt carrying the sign.'''
        return self.mantissa.copy_negate() if self.sign else self.mantissa.copy_abs()

    def negate(self):
        '''Flip the sign in place.  Zero stays positive.'''
        if not self.is_zero():
            self.sign = not self.sign

    def absolute(self):
        '''Clear the sign in place.'''
        self.sign = False

    def copy_abs(self):
        return BigFloat._from_parts(False, self.mantissa.copy(), self.exponent, self.precision)

    def copy_negate(self):
        return BigFloat._from_parts(not self.sign, self.mantissa.copy(), self.exponent,
                                    self.precision)

    def sign_value(self):
        '''Return -1, 0 or 1 as a BigFloat.'''
        if self.is_zero():
            return BigFloat.zero(self.precision)
        return BigFloat.from_int(-1 if self.sign else 1, self.precision)

    def compare(self, rhs):
        '''Return -1, 0 or 1 as self is less than, equal to or greater than rhs.  The
        mantissas are compared once the exponents are aligned.'''
        rhs = self._operand(rhs)
        if self.is_zero() or rhs.is_zero():
            if rhs.is_zero():
                return 0 if self.is_zero() else -1 if self.sign else 1
            return 1 if rhs.sign else -1
        if self.sign != rhs.sign:
            return -1 if self.sign else 1
        result = self._compare_magnitude(rhs)
        return -result if self.sign else result

    def _compare_magnitude(self, rhs):
        '''Compare the absolute values of two non-zero BigFloats.'''
        # The power of ten of the leading digit decides unless they are equal, in which
        # case aligning scales by fewer digits than the longer mantissa has
        lhs_leading = self.exponent + self.mantissa.decimal_digits()
        rhs_leading = rhs.exponent + rhs.mantissa.decimal_digits()
        if lhs_leading != rhs_leading:
            return 1 if lhs_leading > rhs_leading else -1
        exponent = min(self.exponent, rhs.exponent)
        return scale_up(self.mantissa, self.exponent - exponent).compare(
            scale_up(rhs.mantissa, rhs.exponent - exponent))

    def min(self, rhs):
        rhs = self._operand(rhs)
        return (rhs if self.compare(rhs) > 0 else self).copy()

    def max(self, rhs):
        rhs = self._operand(rhs)
        return (rhs if self.compare(rhs) < 0 else self).copy()

    def normalize(self):
        '''Return an equal value with trailing zeroes stripped from the mantissa.'''
        mantissa, exponent = strip_trailing_zeroes(self.mantissa.copy(), self.exponent)
        return BigFloat._from_parts(self.sign, mantissa, exponent, self.precision)

    def round_to_precision(self, precision=None):
        '''Return the value rounded half-even to precision significant digits, by default
        the value's own precision.'''
        precision = precision or self.precision
        mantissa, exponent = round_half_even(self.mantissa.copy(), self.exponent, precision)
        return BigFloat._from_parts(self.sign, mantissa, exponent, self.precision)

    ##
    ## Arithmetic
    ##

    def _aligned(self, rhs):
        '''Return a (lhs_mantissa, rhs_mantissa, exponent) triple of signed mantissas scaled
        to the smaller of the two exponents.'''
        exponent = min(self.exponent, rhs.exponent)
        return (scale_up(self.signed_mantissa(), self.exponent - exponent),
                scale_up(rhs.signed_mantissa(), rhs.exponent - exponent),
                exponent)

    def add(self, rhs, context=None):
        '''Return self + rhs.'''
        return self._add_sub((OP_ADD, self, rhs), rhs, False, context)

    def subtract(self, rhs, context=None):
        '''Return self - rhs.'''
        return self._add_sub((OP_SUBTRACT, self, rhs), rhs, True, context)

    def _add_sub(self, op_tuple, rhs, is_subtract, context):
        rhs = self._operand(rhs)
        try:
            lhs_mantissa, rhs_mantissa, exponent = self._aligned(rhs)
        except MemoryError:
            return OutOfMemory(op_tuple, 'exponents too far apart').signal(context)
        if is_subtract:
            mantissa = lhs_mantissa.subtract(rhs_mantissa)
        else:
            mantissa = lhs_mantissa.add(rhs_mantissa)
        return BigFloat._from_signed(mantissa, exponent, max(self.precision, rhs.precision))

    def multiply(self, rhs, context=None):
        '''Return self * rhs.'''
        rhs = self._operand(rhs)
        try:
            mantissa = self.mantissa.multiply(rhs.mantissa)
        except MemoryError:
            return OutOfMemory((OP_MULTIPLY, self, rhs), 'product too large').signal(context)
        return BigFloat._from_parts(self.sign ^ rhs.sign, mantissa,
                                    self.exponent + rhs.exponent,
                                    max(self.precision, rhs.precision))

    def divide(self, rhs, context=None):
        '''Return self / rhs correctly rounded half-even to the result's precision.'''
        rhs = self._operand(rhs)
        if rhs.is_zero():
            return DivideByZero((OP_DIVIDE, self, rhs), 'division by zero').signal(context)
        precision = max(self.precision, rhs.precision)
        if self.is_zero():
            return BigFloat.zero(precision)

        # Scale the dividend so the quotient has a digit beyond precision to round with
        shift = max(0, precision + 1 + rhs.mantissa.decimal_digits()
                    - self.mantissa.decimal_digits())
        quotient, remainder = scale_up(self.mantissa, shift).divide(rhs.mantissa)
        mantissa, exponent = round_half_even(quotient, self.exponent - rhs.exponent - shift,
                                             precision, not remainder.is_zero())
        mantissa, exponent = strip_trailing_zeroes(mantissa, exponent)
        return BigFloat._from_parts(self.sign ^ rhs.sign, mantissa, exponent, precision)

    def sqrt(self, context=None):
        '''Return the square root correctly rounded half-even to the value's precision.'''
        if self.sign:
            return DomainError((OP_SQRT, self), 'square root of a negative number'
                               ).signal(context)
        if self.is_zero():
            return BigFloat.zero(self.precision)

        # The scaled radicand needs an even exponent and enough digits for the root to
        # have more than precision digits
        shift = max(0, 2 * self.precision + 2 - self.mantissa.decimal_digits())
        if (self.exponent - shift) % 2:
            shift += 1
        radicand = scale_up(self.mantissa, shift)
        root = radicand.isqrt()
        is_inexact = not root.multiply(root).equals(radicand)
        mantissa, exponent = round_half_even(root, (self.exponent - shift) // 2,
                                             self.precision, is_inexact)
        mantissa, exponent = strip_trailing_zeroes(mantissa, exponent)
        return BigFloat._from_parts(False, mantissa, exponent, self.precision)

    def pow(self, exponent, context=None):
        '''Return self raised to exponent.  Integral exponents of moderate size are computed
        exactly; others are delegated to double precision.'''
        exponent = self._operand(exponent)
        precision = max(self.precision, exponent.precision)
        if exponent.copy_abs().compare(EXACT_POW_LIMIT) <= 0:
            integral, is_inexact = exponent._truncate()
            if not is_inexact:
                count = integral.to_int64()
                mantissa = self.mantissa.power(abs(count), context)
                result = BigFloat._from_parts(self.sign and count % 2 == 1, mantissa,
                                              self.exponent * abs(count), precision)
                if count < 0:
                    return BigFloat.from_int(1, precision).divide(result, context)
                return result
        return self._delegate((OP_POW, self, exponent), math.pow, (self, exponent),
                              precision, context)

    ##
    ## Integral rounding
    ##

    def _truncate(self):
        '''Return a (BigInt, is_inexact) pair: the value truncated towards zero, and whether
        a non-zero fraction was discarded.'''
        if self.exponent >= 0:
            integral = scale_up(self.mantissa, self.exponent)
            is_inexact = False
        elif -self.exponent > self.mantissa.decimal_digits():
            # The magnitude is below one
            return BigInt.zero(), not self.is_zero()
        else:
            integral, remainder = self.mantissa.divide(BigInt.power_of_ten(-self.exponent))
            is_inexact = not remainder.is_zero()
        # A zero exponent leaves integral as the mantissa itself
        integral = integral.copy()
        if self.sign:
            integral.negate()
        return integral, is_inexact

    def to_bigint(self):
        '''Return the value truncated towards zero as a BigInt.'''
        return self._truncate()[0]

    def _floor(self):
        integral, is_inexact = self._truncate()
        if is_inexact and self.sign:
            integral = integral.subtract(1)
        return integral

    def _ceil(self):
        integral, is_inexact = self._truncate()
        if is_inexact and not self.sign:
            integral = integral.add(1)
        return integral

    def _round(self):
        # Half away from zero
        if -self.exponent > self.mantissa.decimal_digits():
            # The magnitude is below a tenth
            return BigInt.zero()
        half = BigFloat._from_parts(self.sign, BigInt.from_int(5), -1, self.precision)
        return self.add(half)._truncate()[0]

    def floor(self):
        return BigFloat.from_bigint(self._floor(), self.precision)

    def ceil(self):
        return BigFloat.from_bigint(self._ceil(), self.precision)

    def trunc(self):
        return BigFloat.from_bigint(self._truncate()[0], self.precision)

    def round(self):
        '''Round to an integer, halfway cases away from zero.'''
        return BigFloat.from_bigint(self._round(), self.precision)

    ##
    ## Functions delegated to double precision
    ##

    def _delegate(self, op_tuple, func, operands, precision, context):
        '''Evaluate func on the operands converted to doubles and convert the result back.
        The result is correct only to double precision.'''
        logger.debug('%s delegated to double precision', op_tuple[0])
        try:
            result = func(*(arg.to_float() for arg in operands))
        except ValueError:
            return DomainError(op_tuple, f'argument outside the domain of {op_tuple[0]}'
                               ).signal(context)
        except OverflowError:
            return Overflow(op_tuple, f'{op_tuple[0]} overflows double precision'
                            ).signal(context)
        if not math.isfinite(result):
            return Overflow(op_tuple, f'{op_tuple[0]} result is not finite').signal(context)
        return BigFloat.from_float(result, precision, context)

    def _unary(self, op_name, func, context):
        return self._delegate((op_name, self), func, (self, ), self.precision, context)

    def _logarithm(self, op_name, func, context):
        if self.sign or self.is_zero():
            return DomainError((op_name, self), 'logarithm of a non-positive number'
                               ).signal(context)
        return self._unary(op_name, func, context)

    def _inverse_trig(self, op_name, func, context):
        if self.copy_abs().compare(1) > 0:
            return DomainError((op_name, self), f'{op_name} argument outside [-1, 1]'
                               ).signal(context)
        return self._unary(op_name, func, context)

    def exp(self, context=None):
        return self._unary(OP_EXP, math.exp, context)

    def log(self, context=None):
        '''Natural logarithm.'''
        return self._logarithm(OP_LOG, math.log, context)

    def log10(self, context=None):
        return self._logarithm(OP_LOG10, math.log10, context)

    def log2(self, context=None):
        return self._logarithm(OP_LOG2, math.log2, context)

    def sin(self, context=None):
        return self._unary(OP_SIN, math.sin, context)

    def cos(self, context=None):
        return self._unary(OP_COS, math.cos, context)

    def tan(self, context=None):
        return self._unary(OP_TAN, math.tan, context)

    def asin(self, context=None):
        return self._inverse_trig(OP_ASIN, math.asin, context)

    def acos(self, context=None):
        return self._inverse_trig(OP_ACOS, math.acos, context)

    def atan(self, context=None):
        return self._unary(OP_ATAN, math.atan, context)

    def atan2(self, rhs, context=None):
        '''Return the arc tangent of self / rhs in the quadrant given by their signs.'''
        rhs = self._operand(rhs)
        return self._delegate((OP_ATAN2, self, rhs), math.atan2, (self, rhs),
                              max(self.precision, rhs.precision), context)

    def sinh(self, context=None):
        return self._unary(OP_SINH, math.sinh, context)

    def cosh(self, context=None):
        return self._unary(OP_COSH, math.cosh, context)

    def tanh(self, context=None):
        return self._unary(OP_TANH, math.tanh, context)

    ##
    ## Conversions
    ##

    def to_string(self):
        '''Return the raw text of the representation: the signed mantissa followed by ".0"
        when the exponent is zero or by "e<exponent>" otherwise.  Zero is "0.0".'''
        if self.is_zero():
            return '0.0'
        suffix = '.0' if self.exponent == 0 else f'e{self.exponent}'
        return f'{"-" if self.sign else ""}{self.mantissa.to_string()}{suffix}'

    def to_decimal_string(self, precision=None, text_format=None):
        '''Return the value as decimal text controlled by text_format, DefaultDecFormat if
        None.  If precision is given the value is first rounded half-even to that many
        significant digits.'''
        text_format = text_format or DefaultDecFormat
        value = self if precision is None else self.round_to_precision(precision)
        return text_format.format_decimal(value.sign, value.mantissa.to_string(), value.exponent,
                                          precision or self.precision)

    def to_float(self):
        '''Convert to a double through the decimal text.'''
        return float(self.to_string())

    def __float__(self):
        return self.to_float()

    def __int__(self):
        return int(self._truncate()[0])

    def __trunc__(self):
        return int(self._truncate()[0])

    def __floor__(self):
        return int(self._floor())

    def __ceil__(self):
        return int(self._ceil())

    def __round__(self, ndigits=None):
        if ndigits is None:
            return int(self._round())
        scale = BigFloat._from_parts(False, BigInt.from_int(1), ndigits, self.precision)
        unscale = BigFloat._from_parts(False, BigInt.from_int(1), -ndigits, self.precision)
        return BigFloat.from_bigint(self.multiply(scale)._round(), self.precision
                                    ).multiply(unscale)

    def __bool__(self):
        return not self.is_zero()

    def __repr__(self):
        return f"BigFloat('{self.to_string()}')"

    def __str__(self):
        return self.to_string()

    ##
    ## Python operators
    ##

    # Mutable through negate(), absolute() and set_precision()
    __hash__ = None

    def _operand(self, value):
        result = convert_for_arith(value, self.precision)
        if result is None:
            raise TypeError(f'unsupported operand type for BigFloat: {type(value).__name__}')
        return result

    def __abs__(self):
        return self.copy_abs()

    def __neg__(self):
        return self.copy_negate()

    def __pos__(self):
        return self.copy()

    def __eq__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __ge__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __gt__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __add__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other, modulo=None):
        other = convert_for_arith(other, self.precision)
        if other is None or modulo is not None:
            return NotImplemented
        return self.pow(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rtruediv__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __rpow__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return other.pow(self)


def precision_or_default(precision, context=None):
    '''Return precision, or the context's precision if it is None.'''
    if precision is None:
        return (context or get_context()).precision
    if not isinstance(precision, int) or precision <= 0:
        raise ValueError(f'precision must be a positive integer: {precision!r}')
    return precision


def scale_up(mantissa, count):
    '''Return mantissa * 10^count for count >= 0.'''
    if count == 0:
        return mantissa
    return mantissa.multiply(BigInt.power_of_ten(count))


def round_half_even(mantissa, exponent, precision, is_inexact=False):
    '''Round a non-negative BigInt mantissa to at most precision significant digits.
    is_inexact indicates non-zero digits have already been discarded below the mantissa.
    Returns a (mantissa, exponent) pair.
    '''
    excess = mantissa.decimal_digits() - precision
    if excess <= 0:
        return mantissa, exponent

    quotient, remainder = mantissa.divide(BigInt.power_of_ten(excess))
    half = BigInt.power_of_ten(excess - 1).multiply(5)
    comparison = remainder.compare(half)
    if comparison > 0 or (comparison == 0 and (is_inexact or quotient.is_odd())):
        quotient = quotient.add(1)
        # Rounding up 99...9 gives a power of ten with one digit too many
        if quotient.decimal_digits() > precision:
            quotient = quotient.divide(10)[0]
            excess += 1
    return quotient, exponent + excess


def strip_trailing_zeroes(mantissa, exponent):
    '''Return a (mantissa, exponent) pair of equal value with trailing zero digits moved
    from the mantissa into the exponent.'''
    if mantissa.is_zero():
        return mantissa, 0
    digits = mantissa.to_string()
    stripped = digits.rstrip('0')
    if len(stripped) == len(digits):
        return mantissa, exponent
    return BigInt.from_string(stripped), exponent + len(digits) - len(stripped)


def convert_for_arith(value, precision=None):
    '''Convert value to something capable of doing arithmetic with a BigFloat.

    BigFloats are returned unmodified.  ints, BigInts and floats are converted with the
    given precision.  Otherwise None is returned.
    '''
    if isinstance(value, BigFloat):
        return value
    if isinstance(value, BigInt):
        return BigFloat.from_bigint(value, precision)
    if isinstance(value, int):
        return BigFloat.from_int(value, precision)
    if isinstance(value, float):
        return BigFloat.from_float(value, precision)
    return None


FLOAT_REGEX = re.compile(
    # sign[opt]
    '[-+]?'
    # (dec-integer[opt].fraction or dec-integer.[opt])
    '(([0-9]*)\\.([0-9]+)|([0-9]+)\\.?)'
    # e sign[opt]dec-exponent   [opt]
    '(e([-+]?[0-9]+))?',
    re.ASCII | re.IGNORECASE
)
