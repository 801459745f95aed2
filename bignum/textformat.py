#
# Decimal text output control for BigFloat
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import attr


__all__ = ('TextFormat', 'DefaultDecFormat', 'PositionalFormat', 'ScientificFormat')


@attr.s(slots=True, kw_only=True, eq=False)
class TextFormat:
    '''Controls how a decimal value digits * 10^exponent is written out.'''

    # Exponent style.  0 never writes an exponent; the digits are padded with zeroes
    # around the point instead.  A positive value always writes one, zero-padded to at
    # least that many digits.  A negative value writes one only where printf's %g would,
    # zero-padded to at least its absolute value.
    exp_digits = attr.ib(default=1)
    # Write '+' before non-negative exponents
    force_exp_sign = attr.ib(default=True)
    # Write '+' before non-negative values
    force_leading_sign = attr.ib(default=False)
    # Write '.0' after a significand that would otherwise have no point, e.g. "5.0", "1.0e2"
    force_point = attr.ib(default=False)
    # Write 'E' rather than 'e'
    upper_case = attr.ib(default=False)
    # Drop trailing zero digits from the significand
    rstrip_zeroes = attr.ib(default=False)

    def exponent_text(self, exponent):
        '''Return the exponent as written after the 'e'.'''
        if exponent < 0:
            sign = '-'
        else:
            sign = '+' if self.force_exp_sign else ''
        return sign + str(abs(exponent)).rjust(abs(self.exp_digits), '0')

    def shows_exponent(self, leading_exponent, precision):
        '''Return True if a value whose leading digit has power of ten leading_exponent is
        written in scientific notation.'''
        if self.exp_digits < 0:
            return not -4 <= leading_exponent < precision
        return self.exp_digits > 0

    def format_decimal(self, sign, digits, exponent, precision=None):
        '''Return the text of (-1)^sign * digits * 10^exponent.

        digits is a string of decimal digits, so exponent is the power of ten of its last
        digit, just as for a BigFloat's mantissa.  precision is the number of significant
        digits the value carries and only matters to the %g rule; it defaults to the
        length of digits.  Zero is always written positionally.
        '''
        precision = precision or len(digits)
        digits = digits.lstrip('0')
        if not digits:
            return self._signed(sign, '0.0' if self.force_point else '0')

        if self.rstrip_zeroes:
            significant = digits.rstrip('0')
            exponent += len(digits) - len(significant)
            digits = significant

        leading_exponent = exponent + len(digits) - 1
        if self.shows_exponent(leading_exponent, precision):
            text = self._scientific(digits, leading_exponent)
        else:
            text = self._positional(digits, exponent)
        return self._signed(sign, text)

    def _scientific(self, digits, leading_exponent):
        if len(digits) > 1:
            significand = f'{digits[0]}.{digits[1:]}'
        else:
            significand = digits + '.0' if self.force_point else digits
        return f'{significand}e{self.exponent_text(leading_exponent)}'

    def _positional(self, digits, exponent):
        if exponent >= 0:
            text = digits + '0' * exponent
            return text + '.0' if self.force_point else text
        # Number of digits before the point
        point = len(digits) + exponent
        if point > 0:
            return f'{digits[:point]}.{digits[point:]}'
        return f'0.{"0" * -point}{digits}'

    def _signed(self, sign, text):
        if sign:
            text = '-' + text
        elif self.force_leading_sign:
            text = '+' + text
        return text.upper() if self.upper_case else text


# Default format for decimal output
DefaultDecFormat = TextFormat(exp_digits=-2, force_point=True)

# Never shows an exponent
PositionalFormat = TextFormat(exp_digits=0)

# Always shows an exponent, like the printf 'e' format specifier
ScientificFormat = TextFormat(exp_digits=2, rstrip_zeroes=True, force_point=True)
