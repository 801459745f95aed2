#
# Sign-magnitude arbitrary-precision integers held as base 10^9 digits
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import operator
import re
from functools import lru_cache
from itertools import zip_longest

from .context import (
    get_context, InvalidBase, InvalidString, NegativeOperand, DomainError, DivideByZero,
    Overflow, OutOfMemory,
    OP_DIVIDE, OP_MODULO, OP_POWER, OP_AND, OP_OR, OP_XOR, OP_NOT, OP_SHIFT_LEFT,
    OP_SHIFT_RIGHT, OP_FACTORIAL, OP_ISQRT, OP_FROM_STRING, OP_TO_STRING_BASE,
)


__all__ = ('BigInt', 'BASE', 'BASE_DIGITS', 'INT64_MIN', 'INT64_MAX')


# The radix of a digit.  The parser groups decimal text into chunks of BASE_DIGITS
# characters and the formatter pads every non-leading digit to that width, so the two
# must change together.
BASE = 10 ** 9
BASE_DIGITS = 9

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)

# Exponents up to this are raised by repeated multiplication, larger ones by squaring
ITERATIVE_POWER_LIMIT = 1000

DIGIT_CHARS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
DIGIT_VALUES = {char: value for value, char in enumerate(DIGIT_CHARS)}
DECIMAL_REGEX = re.compile('[0-9]+', re.ASCII)


class BigInt:
    '''Internal Representation
       -----------------------

    A BigInt stores its magnitude as a list of base 10^9 digits, least significant first,
    and its sign as a separate boolean.  Every value escaping an operation is normalized:
    the most significant digit is non-zero unless the value is zero, and zero is exactly
    the single digit 0 with a positive sign.  So there is only one representation of each
    integer and

            value = (-1)^negative * sum(digits[i] * 10^(9 * i)).

    Operations return new values.  negate() and absolute() are the only methods that
    change a value in place, so BigInts are not hashable.
    '''

    __slots__ = ('digits', 'negative')

    def __init__(self, digits=None, negative=False):
        '''Validate and create an integer from little-endian base 10^9 digits.'''
        if digits is None:
            digits = [0]
        else:
            digits = list(digits)
            for digit in digits:
                if not isinstance(digit, int):
                    raise TypeError('digits must be integers')
                if not 0 <= digit < BASE:
                    raise ValueError(f'digit {digit:,d} out of range')
            trim(digits)
        self.digits = digits
        self.negative = bool(negative) and not is_zero_magnitude(digits)

    @classmethod
    def _from_magnitude(cls, digits, negative):
        '''Wrap an already-normalized magnitude without validating it.'''
        result = cls.__new__(cls)
        result.digits = digits
        result.negative = negative and not is_zero_magnitude(digits)
        return result

    ##
    ## Constructors
    ##

    @classmethod
    def zero(cls):
        return cls._from_magnitude([0], False)

    @classmethod
    def from_int(cls, value):
        '''Return a BigInt equal to the Python integer value.'''
        if not isinstance(value, int):
            raise TypeError('from_int requires an integer')
        negative = value < 0
        value = abs(value)
        digits = []
        while value:
            value, digit = divmod(value, BASE)
            digits.append(digit)
        return cls._from_magnitude(digits or [0], negative)

    @classmethod
    def from_string(cls, text, base=10, context=None):
        '''Parse optional leading whitespace, an optional sign and one or more digits of the
        given base.  Letters stand for digit values from 10 and are case-insensitive.'''
        if not isinstance(text, str):
            raise TypeError('from_string requires a string')
        op_tuple = (OP_FROM_STRING, text, base)
        if not 2 <= base <= 36:
            return InvalidBase(op_tuple, f'base {base} is outside [2, 36]').signal(context)

        string = text.lstrip()
        negative = False
        if string[:1] in ('+', '-'):
            negative = string[0] == '-'
            string = string[1:]
        if not string:
            return InvalidString(op_tuple, f'no digits in {text!r}').signal(context)

        if base == 10:
            if not DECIMAL_REGEX.fullmatch(string):
                return InvalidString(op_tuple, f'invalid integer: {text!r}').signal(context)
            # Chunks of BASE_DIGITS characters from the right make one digit each
            string = string.lstrip('0')
            digits = [int(string[max(0, end - BASE_DIGITS):end])
                      for end in range(len(string), 0, -BASE_DIGITS)]
        else:
            digits = [0]
            for char in string:
                value = DIGIT_VALUES.get(char.upper(), base)
                if value >= base:
                    return InvalidString(op_tuple, f'invalid base-{base} integer: {text!r}'
                                         ).signal(context)
                digits = multiply_add_small(digits, base, value)

        return cls._from_magnitude(trim(digits), negative)

    @classmethod
    def from_value(cls, value, context=None):
        '''Return a BigInt derived from value.  Values of type int, str and BigInt are
        accepted, and passed on to from_int, from_string and copy respectively.'''
        if isinstance(value, BigInt):
            return value.copy()
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, str):
            return cls.from_string(value, context=context)
        raise TypeError(f'from_value cannot convert values of type {type(value)}')

    @classmethod
    def power_of_ten(cls, exponent):
        '''Return 10^exponent for a non-negative exponent, built directly from its digits.'''
        if exponent < 0:
            raise ValueError('exponent must be non-negative')
        high, low = divmod(exponent, BASE_DIGITS)
        return cls._from_magnitude([0] * high + [10 ** low], False)

    def copy(self):
        '''Return an independent copy.'''
        return BigInt._from_magnitude(list(self.digits), self.negative)

    ##
    ## Non-computational operations
    ##

    def is_zero(self):
        return is_zero_magnitude(self.digits)

    def is_negative(self):
        return self.negative

    def is_odd(self):
        # BASE is even so parity is that of the lowest digit
        return bool(self.digits[0] & 1)

    def decimal_digits(self):
        '''Return the number of decimal digits in the magnitude.  Zero has one.'''
        return (len(self.digits) - 1) * BASE_DIGITS + len(str(self.digits[-1]))

    def compare(self, rhs):
        '''Return -1, 0 or 1 as self is less than, equal to or greater than rhs.'''
        rhs = operand(rhs)
        if self.negative != rhs.negative:
            return -1 if self.negative else 1
        result = compare_magnitude(self.digits, rhs.digits)
        return -result if self.negative else result

    def equals(self, rhs):
        return self.compare(rhs) == 0

    def less_than(self, rhs):
        return self.compare(rhs) < 0

    def greater_than(self, rhs):
        return self.compare(rhs) > 0

    ##
    ## Sign operations
    ##

    def negate(self):
        '''Flip the sign in place.  Zero stays positive.'''
        if not self.is_zero():
            self.negative = not self.negative

    def absolute(self):
        '''Clear the sign in place.'''
        self.negative = False

    def copy_abs(self):
        return BigInt._from_magnitude(self.digits, False)

    def copy_negate(self):
        return BigInt._from_magnitude(self.digits, not self.negative)

    ##
    ## Arithmetic
    ##

    def add(self, rhs):
        '''Return self + rhs.'''
        return self._add_sub(operand(rhs), False)

    def subtract(self, rhs):
        '''Return self - rhs.'''
        return self._add_sub(operand(rhs), True)

    def _add_sub(self, rhs, is_subtract):
        rhs_negative = rhs.negative ^ is_subtract
        if self.negative == rhs_negative:
            return BigInt._from_magnitude(add_magnitude(self.digits, rhs.digits),
                                          self.negative)

        # Opposite signs: subtract the smaller magnitude from the larger, whose sign wins
        comparison = compare_magnitude(self.digits, rhs.digits)
        if comparison == 0:
            return BigInt.zero()
        if comparison > 0:
            return BigInt._from_magnitude(subtract_magnitude(self.digits, rhs.digits),
                                          self.negative)
        return BigInt._from_magnitude(subtract_magnitude(rhs.digits, self.digits),
                                      rhs_negative)

    def multiply(self, rhs):
        '''Return self * rhs.'''
        rhs = operand(rhs)
        return BigInt._from_magnitude(multiply_magnitude(self.digits, rhs.digits),
                                      self.negative ^ rhs.negative)

    def divide(self, rhs, context=None):
        '''Return a (quotient, remainder) pair.  The quotient is truncated towards zero and
        the remainder takes the sign of the dividend, so that self = q * rhs + r and
        |r| < |rhs|.
        '''
        rhs = operand(rhs)
        if rhs.is_zero():
            return DivideByZero((OP_DIVIDE, self, rhs), 'integer division by zero'
                                ).signal(context)
        quotient, remainder = divmod_magnitude(self.digits, rhs.digits)
        return (BigInt._from_magnitude(quotient, self.negative ^ rhs.negative),
                BigInt._from_magnitude(remainder, self.negative))

    def modulo(self, rhs, context=None):
        '''Return self - trunc(self / rhs) * rhs, which has the sign of self.'''
        rhs = operand(rhs)
        if rhs.is_zero():
            return DivideByZero((OP_MODULO, self, rhs), 'integer modulo by zero'
                                ).signal(context)
        _, remainder = divmod_magnitude(self.digits, rhs.digits)
        return BigInt._from_magnitude(remainder, self.negative)

    def floordiv_mod(self, rhs, context=None):
        '''Return a (quotient, remainder) pair with Python's floor semantics: the quotient
        is rounded towards minus infinity and the remainder has the sign of rhs.'''
        rhs = operand(rhs)
        quotient, remainder = self.divide(rhs, context)
        if not remainder.is_zero() and remainder.negative != rhs.negative:
            quotient = quotient.subtract(_ONE)
            remainder = remainder.add(rhs)
        return quotient, remainder

    def power(self, exponent, context=None):
        '''Return self raised to a non-negative integer exponent.  The result is negative
        if and only if self is negative and the exponent odd.'''
        exponent = operand(exponent)
        op_tuple = (OP_POWER, self, exponent)
        if exponent.negative:
            return NegativeOperand(op_tuple, 'negative exponent').signal(context)
        try:
            digits = power_magnitude(self.digits, exponent)
        except MemoryError:
            return OutOfMemory(op_tuple, 'power result too large').signal(context)
        return BigInt._from_magnitude(digits, self.negative and exponent.is_odd())

    def gcd(self, rhs):
        '''Return the non-negative greatest common divisor by Euclid's algorithm.
        gcd(a, 0) is |a|.'''
        rhs = operand(rhs)
        return BigInt._from_magnitude(gcd_magnitude(self.digits, rhs.digits), False)

    def lcm(self, rhs):
        '''Return the non-negative least common multiple |self * rhs| / gcd(self, rhs).  The
        result is zero if either operand is zero.'''
        rhs = operand(rhs)
        if self.is_zero() or rhs.is_zero():
            return BigInt.zero()
        product = multiply_magnitude(self.digits, rhs.digits)
        quotient, _ = divmod_magnitude(product, gcd_magnitude(self.digits, rhs.digits))
        return BigInt._from_magnitude(quotient, False)

    def factorial(self, context=None):
        '''Return self!.  Negative operands signal NegativeOperand; operands above the
        context's factorial_limit signal Overflow.'''
        context = context or get_context()
        op_tuple = (OP_FACTORIAL, self)
        if self.negative:
            return NegativeOperand(op_tuple, 'factorial of a negative number').signal(context)
        if self.compare(context.factorial_limit) > 0:
            return Overflow(op_tuple, f'factorial argument {self} exceeds the limit '
                            f'{context.factorial_limit}').signal(context)

        digits = [1]
        for factor in range(2, self.to_int64() + 1):
            digits = multiply_small(digits, factor)
        return BigInt._from_magnitude(digits, False)

    def isqrt(self, context=None):
        '''Return the floor of the square root of a non-negative value.'''
        if self.negative:
            return DomainError((OP_ISQRT, self), 'square root of a negative number'
                               ).signal(context)
        return BigInt._from_magnitude(isqrt_magnitude(self.digits), False)

    def is_prime(self):
        '''Return True if the value is prime, by trial division up to its square root.'''
        if self.negative or compare_magnitude(self.digits, [2]) < 0:
            return False
        if compare_magnitude(self.digits, [3]) <= 0:
            return True
        if not self.is_odd():
            return False
        limit = BigInt._from_magnitude(isqrt_magnitude(self.digits), False).to_int64()
        for divisor in range(3, limit + 1, 2):
            if divmod_small(self.digits, divisor)[1] == 0:
                return False
        return True

    ##
    ## Bitwise operations.  These act digit by digit on the base 10^9 digits and require
    ## non-negative operands.
    ##

    def bit_and(self, rhs, context=None):
        return self._bitwise(OP_AND, operand(rhs), lambda a, b: a & b, context)

    def bit_or(self, rhs, context=None):
        return self._bitwise(OP_OR, operand(rhs), lambda a, b: a | b, context)

    def bit_xor(self, rhs, context=None):
        return self._bitwise(OP_XOR, operand(rhs), lambda a, b: a ^ b, context)

    def _bitwise(self, op_name, rhs, digit_op, context):
        if self.negative or rhs.negative:
            return NegativeOperand((op_name, self, rhs), 'bitwise operation on a negative '
                                   'operand').signal(context)
        digits = [digit_op(a, b) for a, b in zip_longest(self.digits, rhs.digits,
                                                         fillvalue=0)]
        # An OR or XOR of two digits can reach BASE; carry it upwards
        return BigInt._from_magnitude(propagate_carries(digits), False)

    def bit_not(self, context=None):
        '''Complement every digit within the digit mask BASE - 1.'''
        if self.negative:
            return NegativeOperand((OP_NOT, self), 'bitwise operation on a negative '
                                   'operand').signal(context)
        digits = [~digit & (BASE - 1) for digit in self.digits]
        return BigInt._from_magnitude(trim(digits), False)

    def shift_left(self, bits, context=None):
        '''Return self * 2^bits.  bits is an int or a BigInt.'''
        bits = operator.index(bits)
        if bits < 0:
            return NegativeOperand((OP_SHIFT_LEFT, self, bits), 'negative shift count'
                                   ).signal(context)
        if bits == 0 or self.is_zero():
            return self.copy()
        return BigInt._from_magnitude(multiply_magnitude(self.digits, power_of_two(bits)),
                                      self.negative)

    def shift_right(self, bits, context=None):
        '''Return self / 2^bits truncated towards zero; the floor for non-negative values.'''
        bits = operator.index(bits)
        if bits < 0:
            return NegativeOperand((OP_SHIFT_RIGHT, self, bits), 'negative shift count'
                                   ).signal(context)
        if bits == 0 or self.is_zero():
            return self.copy()
        quotient, _ = divmod_magnitude(self.digits, power_of_two(bits))
        return BigInt._from_magnitude(quotient, self.negative)

    ##
    ## Conversions
    ##

    def to_string(self):
        '''Return the decimal text of the value.'''
        if self.is_zero():
            return '0'
        parts = ['-'] if self.negative else []
        parts.append(str(self.digits[-1]))
        parts.extend(f'{digit:0{BASE_DIGITS}d}' for digit in reversed(self.digits[:-1]))
        return ''.join(parts)

    def to_string_base(self, base, context=None):
        '''Return the text of the value in the given base in [2, 36].  Digits from 10 are
        the upper case letters.'''
        if not isinstance(base, int) or not 2 <= base <= 36:
            return InvalidBase((OP_TO_STRING_BASE, self, base),
                               f'base {base} is outside [2, 36]').signal(context)
        if base == 10 or self.is_zero():
            return self.to_string()

        chars = []
        digits = self.digits
        while not is_zero_magnitude(digits):
            digits, remainder = divmod_small(digits, base)
            chars.append(DIGIT_CHARS[remainder])
        if self.negative:
            chars.append('-')
        return ''.join(reversed(chars))

    def to_int64(self):
        '''Return the value as a machine integer, saturating at the signed 64-bit range.'''
        magnitude = 0
        for digit in reversed(self.digits):
            magnitude = magnitude * BASE + digit
            if magnitude > INT64_MAX + 1:
                break
        if self.negative:
            return max(-magnitude, INT64_MIN)
        return min(magnitude, INT64_MAX)

    def __int__(self):
        magnitude = 0
        for digit in reversed(self.digits):
            magnitude = magnitude * BASE + digit
        return -magnitude if self.negative else magnitude

    __index__ = __int__

    def __float__(self):
        return float(int(self))

    def __bool__(self):
        return not self.is_zero()

    def __repr__(self):
        return f"BigInt('{self.to_string()}')"

    def __str__(self):
        return self.to_string()

    ##
    ## Python operators
    ##

    # Mutable through negate() and absolute()
    __hash__ = None

    def __abs__(self):
        return self.copy_abs()

    def __neg__(self):
        return self.copy_negate()

    def __pos__(self):
        return self.copy()

    def __eq__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __ge__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __gt__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __add__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.floordiv_mod(other)[0]

    def __mod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.floordiv_mod(other)[1]

    def __divmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.floordiv_mod(other)

    def __pow__(self, other, modulo=None):
        other = convert_for_arith(other)
        if other is None or modulo is not None:
            return NotImplemented
        return self.power(other)

    def __and__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.bit_and(other)

    def __or__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.bit_or(other)

    def __xor__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.bit_xor(other)

    def __lshift__(self, other):
        if not isinstance(other, (int, BigInt)):
            return NotImplemented
        return self.shift_left(other)

    def __rshift__(self, other):
        if not isinstance(other, (int, BigInt)):
            return NotImplemented
        return self.shift_right(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rfloordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.floordiv_mod(self)[0]

    def __rmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.floordiv_mod(self)[1]

    def __rdivmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.floordiv_mod(self)

    def __rpow__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.power(self)

    def __rand__(self, other):
        return self.__and__(other)

    def __ror__(self, other):
        return self.__or__(other)

    def __rxor__(self, other):
        return self.__xor__(other)


#
# Magnitude helpers.  A magnitude is a list of base 10^9 digits, least significant first.
# Unless stated otherwise arguments must be normalized and results are normalized.
#

def trim(digits):
    '''Remove high zero digits in place, leaving at least one digit.  Returns digits.'''
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits):
    return len(digits) == 1 and digits[0] == 0


def compare_magnitude(lhs, rhs):
    '''Return -1, 0 or 1 comparing two magnitudes.'''
    if len(lhs) != len(rhs):
        return 1 if len(lhs) > len(rhs) else -1
    for lhs_digit, rhs_digit in zip(reversed(lhs), reversed(rhs)):
        if lhs_digit != rhs_digit:
            return 1 if lhs_digit > rhs_digit else -1
    return 0


def add_magnitude(lhs, rhs):
    if len(lhs) < len(rhs):
        lhs, rhs = rhs, lhs
    result = []
    carry = 0
    for index, digit in enumerate(lhs):
        total = digit + carry
        if index < len(rhs):
            total += rhs[index]
        if total >= BASE:
            result.append(total - BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0
    if carry:
        result.append(carry)
    return result


def subtract_magnitude(lhs, rhs):
    '''Return lhs - rhs.  lhs must be at least rhs.'''
    result = []
    borrow = 0
    for index, digit in enumerate(lhs):
        diff = digit - borrow
        if index < len(rhs):
            diff -= rhs[index]
        if diff < 0:
            result.append(diff + BASE)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0
    assert not borrow
    return trim(result)


def multiply_magnitude(lhs, rhs):
    '''Schoolbook multiplication.'''
    if is_zero_magnitude(lhs) or is_zero_magnitude(rhs):
        return [0]
    result = [0] * (len(lhs) + len(rhs))
    for i, lhs_digit in enumerate(lhs):
        if lhs_digit == 0:
            continue
        carry = 0
        for j, rhs_digit in enumerate(rhs):
            carry, result[i + j] = divmod(result[i + j] + lhs_digit * rhs_digit + carry, BASE)
        result[i + len(rhs)] = carry
    return trim(result)


def multiply_small(digits, factor):
    '''Return the magnitude multiplied by a non-negative Python integer.'''
    return multiply_add_small(digits, factor, 0)


def multiply_add_small(digits, factor, addend):
    '''Return digits * factor + addend for non-negative Python integers factor and addend.'''
    result = []
    carry = addend
    for digit in digits:
        carry, low = divmod(digit * factor + carry, BASE)
        result.append(low)
    while carry:
        carry, low = divmod(carry, BASE)
        result.append(low)
    return trim(result)


def divmod_small(digits, divisor):
    '''Divide a magnitude by a positive Python integer.  Return (quotient, remainder) where
    the remainder is a Python integer.'''
    quotient = [0] * len(digits)
    remainder = 0
    for index in range(len(digits) - 1, -1, -1):
        quotient[index], remainder = divmod(remainder * BASE + digits[index], divisor)
    return trim(quotient), remainder


def divmod_magnitude(lhs, rhs):
    '''Return a (quotient, remainder) pair of magnitudes for a non-zero rhs.

    This is schoolbook long division producing one base 10^9 quotient digit per step, as
    in Knuth's Algorithm D (TAOCP vol. 2, 4.3.1).  Each trial quotient digit comes from
    the leading digits and is at most one too large after the pre-test.
    '''
    if compare_magnitude(lhs, rhs) < 0:
        return [0], list(lhs)
    if len(rhs) == 1:
        quotient, remainder = divmod_small(lhs, rhs[0])
        return quotient, [remainder]

    # Scale both so the divisor's leading digit is at least BASE / 2.  This does not
    # change the quotient, and the remainder is scaled back at the end.
    scale = BASE // (rhs[-1] + 1)
    u = multiply_small(lhs, scale)
    if len(u) == len(lhs):
        u.append(0)
    v = multiply_small(rhs, scale)
    n = len(v)
    v_top, v_next = v[-1], v[-2]

    quotient = [0] * (len(lhs) - n + 1)
    for j in range(len(quotient) - 1, -1, -1):
        q_hat, r_hat = divmod(u[j + n] * BASE + u[j + n - 1], v_top)
        while q_hat >= BASE or q_hat * v_next > r_hat * BASE + u[j + n - 2]:
            q_hat -= 1
            r_hat += v_top
            if r_hat >= BASE:
                break

        # Subtract q_hat * v from u[j:j + n + 1]
        carry = 0
        borrow = 0
        for i in range(n):
            carry, low = divmod(q_hat * v[i] + carry, BASE)
            diff = u[i + j] - low - borrow
            if diff < 0:
                u[i + j] = diff + BASE
                borrow = 1
            else:
                u[i + j] = diff
                borrow = 0
        diff = u[j + n] - carry - borrow

        if diff < 0:
            # q_hat was one too large; add v back
            u[j + n] = diff + BASE
            q_hat -= 1
            carry = 0
            for i in range(n):
                total = u[i + j] + v[i] + carry
                if total >= BASE:
                    u[i + j] = total - BASE
                    carry = 1
                else:
                    u[i + j] = total
                    carry = 0
            u[j + n] = (u[j + n] + carry) % BASE
        else:
            u[j + n] = diff
        quotient[j] = q_hat

    remainder, _ = divmod_small(trim(u[:n]), scale)
    return trim(quotient), remainder


def power_magnitude(digits, exponent):
    '''Return the magnitude raised to a non-negative BigInt exponent.'''
    if exponent.is_zero():
        return [1]
    if is_zero_magnitude(digits) or digits == [1]:
        return list(digits)

    result = [1]
    count = exponent.to_int64()
    if count <= ITERATIVE_POWER_LIMIT:
        for _ in range(count):
            result = multiply_magnitude(result, digits)
        return result

    # Exponentiation by squaring, halving the exponent and testing the bit shifted out
    exp_digits = exponent.digits
    while True:
        exp_digits, is_odd = divmod_small(exp_digits, 2)
        if is_odd:
            result = multiply_magnitude(result, digits)
        if is_zero_magnitude(exp_digits):
            return result
        digits = multiply_magnitude(digits, digits)


def gcd_magnitude(lhs, rhs):
    '''Euclid's algorithm.'''
    while not is_zero_magnitude(rhs):
        lhs, rhs = rhs, divmod_magnitude(lhs, rhs)[1]
    return list(lhs)


def isqrt_magnitude(digits):
    '''Return the floor of the square root by Newton's iteration.'''
    if is_zero_magnitude(digits):
        return [0]
    # 10^ceil(d/2) is at least the root of a d-digit number, and the iteration decreases
    # monotonically from above until it reaches the floor of the root.
    ndigits = (len(digits) - 1) * BASE_DIGITS + len(str(digits[-1]))
    root = BigInt.power_of_ten((ndigits + 1) // 2).digits
    while True:
        quotient, _ = divmod_magnitude(digits, root)
        estimate, _ = divmod_small(add_magnitude(root, quotient), 2)
        if compare_magnitude(estimate, root) >= 0:
            return root
        root = estimate


def propagate_carries(digits):
    '''Normalize a list of non-negative digits, some of which may be BASE or more.'''
    result = []
    carry = 0
    for digit in digits:
        carry, low = divmod(digit + carry, BASE)
        result.append(low)
    while carry:
        carry, low = divmod(carry, BASE)
        result.append(low)
    return trim(result)


@lru_cache(maxsize=64)
def _power_of_two_digits(bits):
    return tuple(power_magnitude([2], BigInt.from_int(bits)))


def power_of_two(bits):
    '''Return the magnitude 2^bits.'''
    return list(_power_of_two_digits(bits))


def convert_for_arith(value):
    '''Convert value to something capable of doing arithmetic with a BigInt.

    BigInts are returned unmodified and Python ints are converted.  Otherwise None is
    returned.
    '''
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt.from_int(value)
    return None


def operand(value):
    '''As for convert_for_arith() but raise TypeError for unsupported types.'''
    result = convert_for_arith(value)
    if result is None:
        raise TypeError(f'unsupported operand type for BigInt: {type(value).__name__}')
    return result


_ONE = BigInt.from_int(1)
