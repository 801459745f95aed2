#
# Arbitrary-precision complex numbers as pairs of BigFloats
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from .bigfloat import (
    BigFloat, FLOAT_REGEX, convert_for_arith as convert_float_for_arith, precision_or_default,
    strip_trailing_zeroes,
)
from .context import InvalidString, DivideByZero, OP_DIVIDE, OP_FROM_STRING


__all__ = ('BigComplex', )


class BigComplex:
    '''A complex number real + imag * i whose parts are BigFloats of matching precision.'''

    __slots__ = ('real', 'imag')

    def __init__(self, real=0, imag=0, precision=None):
        '''real and imag can be anything BigFloat.from_value() accepts.'''
        self._set(BigFloat.from_value(real, precision), BigFloat.from_value(imag, precision))

    def _set(self, real, imag):
        precision = max(real.precision, imag.precision)
        real.set_precision(precision)
        imag.set_precision(precision)
        self.real = real
        self.imag = imag

    @classmethod
    def _from_parts(cls, real, imag):
        '''real and imag are BigFloats owned by the result.'''
        result = cls.__new__(cls)
        result._set(real, imag)
        return result

    ##
    ## Constructors
    ##

    @classmethod
    def zero(cls, precision=None):
        return cls._from_parts(BigFloat.zero(precision), BigFloat.zero(precision))

    @classmethod
    def from_floats(cls, real, imag, precision=None, context=None):
        '''Return a complex number from a pair of doubles.'''
        return cls._from_parts(BigFloat.from_float(real, precision, context),
                               BigFloat.from_float(imag, precision, context))

    @classmethod
    def from_complex(cls, value, precision=None, context=None):
        '''Convert a Python complex.'''
        value = complex(value)
        return cls.from_floats(value.real, value.imag, precision, context)

    @classmethod
    def from_string(cls, text, precision=None, context=None):
        '''Parse text of the form "<real>", "i", "-i", "<imag>i", "<real>+<imag>i",
        "<real>-<imag>i" or "<real>+i".  Leading whitespace and whitespace around the
        operator are permitted.'''
        if not isinstance(text, str):
            raise TypeError('from_string requires a string')
        parts = split_complex_text(text)
        if parts is None or not all(FLOAT_REGEX.fullmatch(part) for part in parts):
            return InvalidString((OP_FROM_STRING, text), f'invalid complex number: {text!r}'
                                 ).signal(context)
        precision = precision_or_default(precision, context)
        real_text, imag_text = parts
        return cls._from_parts(BigFloat.from_string(real_text, precision, context),
                               BigFloat.from_string(imag_text, precision, context))

    @classmethod
    def from_value(cls, value, precision=None, context=None):
        '''Return a BigComplex derived from value, which can be a BigComplex, complex, str, or
        anything BigFloat.from_value() accepts as the real part.'''
        if isinstance(value, BigComplex):
            return cls(value.real, value.imag, precision)
        if isinstance(value, complex):
            return cls.from_complex(value, precision, context)
        if isinstance(value, str):
            return cls.from_string(value, precision, context)
        return cls(value, 0, precision)

    def copy(self):
        '''Return an independent copy.'''
        return BigComplex._from_parts(self.real.copy(), self.imag.copy())

    @property
    def precision(self):
        return self.real.precision

    ##
    ## Operations
    ##

    def is_zero(self):
        return self.real.is_zero() and self.imag.is_zero()

    def equals(self, rhs):
        '''Return True if both parts are equal in value.'''
        rhs = self._operand(rhs)
        return self.real.compare(rhs.real) == 0 and self.imag.compare(rhs.imag) == 0

    def add(self, rhs, context=None):
        rhs = self._operand(rhs)
        return BigComplex._from_parts(self.real.add(rhs.real, context),
                                      self.imag.add(rhs.imag, context))

    def subtract(self, rhs, context=None):
        rhs = self._operand(rhs)
        return BigComplex._from_parts(self.real.subtract(rhs.real, context),
                                      self.imag.subtract(rhs.imag, context))

    def multiply(self, rhs, context=None):
        '''(a + bi)(c + di) = (ac - bd) + (ad + bc)i.'''
        rhs = self._operand(rhs)
        real = self.real.multiply(rhs.real, context).subtract(
            self.imag.multiply(rhs.imag, context), context)
        imag = self.real.multiply(rhs.imag, context).add(
            self.imag.multiply(rhs.real, context), context)
        return BigComplex._from_parts(real, imag)

    def divide(self, rhs, context=None):
        '''Return self * conjugate(rhs) / |rhs|^2.'''
        rhs = self._operand(rhs)
        denominator = rhs.norm(context)
        if denominator.is_zero():
            return DivideByZero((OP_DIVIDE, self, rhs), 'complex division by zero'
                                ).signal(context)
        numerator = self.multiply(rhs.conjugate(), context)
        return BigComplex._from_parts(numerator.real.divide(denominator, context),
                                      numerator.imag.divide(denominator, context))

    def conjugate(self):
        return BigComplex._from_parts(self.real.copy(), self.imag.copy_negate())

    def norm(self, context=None):
        '''Return real^2 + imag^2 as a BigFloat.'''
        return self.real.multiply(self.real, context).add(
            self.imag.multiply(self.imag, context), context)

    def absolute(self, context=None):
        '''Return the modulus sqrt(real^2 + imag^2) as a BigFloat.'''
        return self.norm(context).sqrt(context)

    ##
    ## Conversions
    ##

    def to_string(self):
        '''Return "<real>" if the imaginary part is zero, "i" or "-i" for the imaginary
        units, "<imag>i" for other imaginary numbers, and "<real> + <imag>i" or
        "<real> - <|imag|>i" otherwise.'''
        if self.imag.is_zero():
            return self.real.to_string()
        if self.real.is_zero():
            if is_unit(self.imag):
                return '-i' if self.imag.sign else 'i'
            return f'{self.imag.to_string()}i'
        operator = '-' if self.imag.sign else '+'
        return f'{self.real.to_string()} {operator} {self.imag.copy_abs().to_string()}i'

    def __complex__(self):
        return complex(self.real.to_float(), self.imag.to_float())

    def __bool__(self):
        return not self.is_zero()

    def __repr__(self):
        return f"BigComplex('{self.to_string()}')"

    def __str__(self):
        return self.to_string()

    ##
    ## Python operators
    ##

    __hash__ = None

    def _operand(self, value):
        result = convert_for_arith(value, self.precision)
        if result is None:
            raise TypeError(f'unsupported operand type for BigComplex: {type(value).__name__}')
        return result

    def __abs__(self):
        return self.absolute()

    def __neg__(self):
        return BigComplex._from_parts(self.real.copy_negate(), self.imag.copy_negate())

    def __pos__(self):
        return self.copy()

    def __eq__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        other = convert_for_arith(other, self.precision)
        if other is None:
            return NotImplemented
        return not self.equals(other)

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


def is_unit(value):
    '''Return True if the BigFloat value is 1 or -1.'''
    mantissa, exponent = strip_trailing_zeroes(value.mantissa, value.exponent)
    return exponent == 0 and mantissa.digits == [1]


def operator_index(string):
    '''Return the index of the operator joining the real and imaginary parts, or None.  A
    sign at the start or directly after an exponent character is not an operator.'''
    for index in range(len(string) - 1, 0, -1):
        if string[index] in '+-' and string[index - 1] not in 'eE':
            return index
    return None


def split_complex_text(text):
    '''Split complex text into (real, imag) number texts, or return None if it is malformed.
    The texts still need checking as floating point numbers.'''
    string = text.lstrip()
    if not string.endswith('i'):
        return string, '0'

    string = string[:-1]
    index = operator_index(string)
    if index is None:
        real, sign, imag = '0', '', string
        # A bare sign or nothing at all is a unit
        if imag in ('', '+', '-'):
            sign, imag = imag, '1'
    else:
        real = string[:index].rstrip()
        sign = string[index]
        imag = string[index + 1:].strip() or '1'
        if imag[0] in '+-':
            return None
    return real, sign + imag


def convert_for_arith(value, precision=None):
    '''Convert value to something capable of doing arithmetic with a BigComplex.

    BigComplex values are returned unmodified and Python complex numbers are converted.
    Values convertible to BigFloat become the real part.  Otherwise None is returned.
    '''
    if isinstance(value, BigComplex):
        return value
    if isinstance(value, complex):
        return BigComplex.from_complex(value, precision)
    real = convert_float_for_arith(value, precision)
    if real is None:
        return None
    return BigComplex._from_parts(real.copy(), BigFloat.zero(real.precision))
