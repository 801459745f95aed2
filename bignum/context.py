#
# Status codes, signals and the per-thread arithmetic context
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import copy
import logging
import threading
from enum import IntEnum, IntFlag


__all__ = ('Status', 'Flags', 'error_string', 'HandlerKind',
           'Context', 'DefaultContext', 'get_context', 'set_context', 'local_context',
           'DEFAULT_PRECISION', 'FACTORIAL_LIMIT',
           'BignumError', 'InvalidArgs', 'InvalidString', 'InvalidBase', 'NegativeOperand',
           'DomainError', 'DivideByZero', 'Overflow', 'Underflow', 'OutOfMemory',
           'OP_ADD', 'OP_SUBTRACT', 'OP_MULTIPLY', 'OP_DIVIDE', 'OP_MODULO', 'OP_POWER',
           'OP_AND', 'OP_OR', 'OP_XOR', 'OP_NOT', 'OP_SHIFT_LEFT', 'OP_SHIFT_RIGHT',
           'OP_GCD', 'OP_LCM', 'OP_FACTORIAL', 'OP_ISQRT',
           'OP_FROM_INT', 'OP_FROM_FLOAT', 'OP_FROM_STRING', 'OP_TO_STRING_BASE',
           'OP_SQRT', 'OP_EXP', 'OP_LOG', 'OP_LOG10', 'OP_LOG2', 'OP_POW',
           'OP_SIN', 'OP_COS', 'OP_TAN', 'OP_ASIN', 'OP_ACOS', 'OP_ATAN', 'OP_ATAN2',
           'OP_SINH', 'OP_COSH', 'OP_TANH')

logger = logging.getLogger(__name__)

# The default number of significant decimal digits carried by a new BigFloat
DEFAULT_PRECISION = 64
# The largest argument factorial() accepts
FACTORIAL_LIMIT = 100000


# Operation names, used as the first member of a signal's op_tuple
OP_ADD = 'add'
OP_SUBTRACT = 'subtract'
OP_MULTIPLY = 'multiply'
OP_DIVIDE = 'divide'
OP_MODULO = 'modulo'
OP_POWER = 'power'
OP_AND = 'and'
OP_OR = 'or'
OP_XOR = 'xor'
OP_NOT = 'not'
OP_SHIFT_LEFT = 'shift_left'
OP_SHIFT_RIGHT = 'shift_right'
OP_GCD = 'gcd'
OP_LCM = 'lcm'
OP_FACTORIAL = 'factorial'
OP_ISQRT = 'isqrt'
OP_FROM_INT = 'from_int'
OP_FROM_FLOAT = 'from_float'
OP_FROM_STRING = 'from_string'
OP_TO_STRING_BASE = 'to_string_base'
OP_SQRT = 'sqrt'
OP_EXP = 'exp'
OP_LOG = 'log'
OP_LOG10 = 'log10'
OP_LOG2 = 'log2'
OP_POW = 'pow'
OP_SIN = 'sin'
OP_COS = 'cos'
OP_TAN = 'tan'
OP_ASIN = 'asin'
OP_ACOS = 'acos'
OP_ATAN = 'atan'
OP_ATAN2 = 'atan2'
OP_SINH = 'sinh'
OP_COSH = 'cosh'
OP_TANH = 'tanh'


class Status(IntEnum):
    '''The outcome of an operation.  Every signal carries exactly one of these.'''
    OK = 0
    MEMORY = 1
    DIVIDE_BY_ZERO = 2
    INVALID_ARGS = 3
    OVERFLOW = 4
    UNDERFLOW = 5

    def message(self):
        '''Return a human-readable description of the status.'''
        return _status_messages[self]

    def flag(self):
        '''Return the sticky flag raised in a context when this status is signalled.'''
        return _status_flags[self]


# Sticky status flags accumulated by a context.
class Flags(IntFlag):
    MEMORY      = 0x01
    DIV_BY_ZERO = 0x02
    INVALID     = 0x04
    OVERFLOW    = 0x08
    UNDERFLOW   = 0x10


_status_messages = {
    Status.OK: 'Success',
    Status.MEMORY: 'Memory allocation failed',
    Status.DIVIDE_BY_ZERO: 'Division by zero',
    Status.INVALID_ARGS: 'Invalid arguments',
    Status.OVERFLOW: 'Arithmetic overflow',
    Status.UNDERFLOW: 'Arithmetic underflow',
}

_status_flags = {
    Status.OK: Flags(0),
    Status.MEMORY: Flags.MEMORY,
    Status.DIVIDE_BY_ZERO: Flags.DIV_BY_ZERO,
    Status.INVALID_ARGS: Flags.INVALID,
    Status.OVERFLOW: Flags.OVERFLOW,
    Status.UNDERFLOW: Flags.UNDERFLOW,
}


def error_string(status):
    '''Return the human-readable string for a status.  Unknown codes are reported as such
    rather than raising.'''
    try:
        return Status(status).message()
    except ValueError:
        return 'Unknown error'


#
# Signals
#

class BignumError(ArithmeticError):
    '''All errors signalled by this package subclass from this.

    BignumError expects two arguments:

         def __init__(self, op_tuple, message):

    op_tuple is a tuple of the operation name and the operands causing the signal.
    message is a short description of what went wrong.

    Exceptions derived from BignumError must have a linear inheritance from it through
    the first base class if an exception has multiple base classes.  See, for example,
    DivideByZero.
    '''

    status = Status.OK

    @property
    def op_tuple(self):
        return self.args[0]

    @property
    def message(self):
        return self.args[1]

    def __str__(self):
        return f'{self.status.message()}: {self.message}'

    def signal(self, context=None):
        '''Call to signal an exception.  The status flag is raised in the context, then the
        exception is handled according to the handler the context has for it.'''
        context = context or get_context()
        kind, handler = context.handler(self.__class__)
        context.flags |= self.status.flag()
        logger.debug('%s signalled by %s: %s', self.__class__.__name__,
                     self.op_tuple[0], self.message)

        if kind == HandlerKind.SUBSTITUTE_VALUE:
            return handler(self, context)
        raise self


class InvalidArgs(BignumError, ValueError):
    '''An operand or argument is not acceptable to the operation.'''

    status = Status.INVALID_ARGS


class InvalidString(InvalidArgs):
    '''Signalled when text cannot be parsed as a number.'''


class InvalidBase(InvalidArgs):
    '''Signalled when a radix lies outside [2, 36].'''


class NegativeOperand(InvalidArgs):
    '''Signalled when an operation defined only for non-negative operands gets a negative
    one: the bitwise operations, factorial and the exponent of power.'''


class DomainError(InvalidArgs):
    '''Signalled when an operand lies outside the domain of a mathematical function, for
    example the square root of a negative number.'''


class DivideByZero(BignumError, ZeroDivisionError):
    '''A divide or modulo operation with a zero divisor.'''

    status = Status.DIVIDE_BY_ZERO


class Overflow(BignumError, OverflowError):
    '''Signalled when a result would exceed a configured or representable limit.'''

    status = Status.OVERFLOW


class Underflow(BignumError):
    '''Reserved.  No operation currently signals underflow.'''

    status = Status.UNDERFLOW


class OutOfMemory(BignumError, MemoryError):
    '''Signalled when building a result exhausts memory.'''

    status = Status.MEMORY


class HandlerKind(IntEnum):
    '''Indicates how a signalled exception should be handled.'''
    # Raise the exception.  This is the default.
    RAISE = 0

    # Substitute a value for the operation's result.  A handler must be provided with
    # signature
    #
    #    def handler(exception, context):
    #
    # The value returned by the handler becomes the operation's result.
    SUBSTITUTE_VALUE = 1

    def requires_handler(self):
        return self == HandlerKind.SUBSTITUTE_VALUE


class Context:
    '''The execution context for operations.  Carries the default BigFloat precision, the
    factorial safety cap, the sticky status flags and the signal handlers.'''

    __slots__ = ('precision', 'factorial_limit', 'flags', 'handlers')

    def __init__(self, *, precision=DEFAULT_PRECISION, factorial_limit=FACTORIAL_LIMIT,
                 flags=0):
        if not isinstance(precision, int) or precision <= 0:
            raise ValueError(f'precision must be a positive integer: {precision!r}')
        if not isinstance(factorial_limit, int) or factorial_limit < 0:
            raise ValueError(f'factorial_limit must be a non-negative integer: '
                             f'{factorial_limit!r}')
        self.precision = precision
        self.factorial_limit = factorial_limit
        self.flags = Flags(flags)
        self.handlers = {}

    def copy(self):
        '''Return a (deep) copy of the context.'''
        # A deep copy is needed because handlers is a mutable container
        return copy.deepcopy(self)

    def set_handler(self, exc_classes, kind, handler=None):
        classes = (exc_classes, ) if not isinstance(exc_classes, (tuple, list)) else exc_classes
        if not all(isinstance(exc_class, type) and issubclass(exc_class, BignumError)
                   for exc_class in classes):
            raise TypeError('all exception classes must be subclasses of BignumError')
        if not isinstance(kind, HandlerKind):
            raise TypeError('kind must be a HandlerKind instance')
        if (handler is not None) ^ kind.requires_handler():
            if handler is None:
                raise ValueError(f'handler not given for kind {kind!r}')
            else:
                raise ValueError(f'handler given for kind {kind!r}')
        pair = (kind, handler)
        for exc_class in classes:
            self.handlers[exc_class] = pair

    def handler(self, exc_class):
        '''Return a (handler_kind, callback) pair for a signal class.'''
        if not (isinstance(exc_class, type) and issubclass(exc_class, BignumError)):
            raise TypeError('exc_class must be a subclass of BignumError')

        for cls in exc_class.mro():
            handler = self.handlers.get(cls)
            if handler:
                return handler

        return HandlerKind.RAISE, None

    def clear_flags(self):
        self.flags = Flags(0)

    def __repr__(self):
        return (f'<Context precision={self.precision} '
                f'factorial_limit={self.factorial_limit} flags={self.flags!r}>')


#
# Exported functions
#

DefaultContext = Context()
tls = threading.local()


def get_context():
    try:
        return tls.context
    except AttributeError:
        tls.context = DefaultContext.copy()
        return tls.context


def set_context(context):
    '''Sets the current thread's context to context (not a copy of it).'''
    tls.context = context


class LocalContext:
    '''A context manager that will set the current context for the active thread to a copy of
    context on entry to the with-statement and restore the previous context on exit.  If
    no context is specified a copy of the current context is taken instead.
    '''

    def __init__(self, context=None):
        self.saved_context = None
        self.context_to_set = context

    def __enter__(self):
        self.saved_context = get_context()
        context = (self.context_to_set or self.saved_context).copy()
        set_context(context)
        return context

    def __exit__(self, etype, value, traceback):
        set_context(self.saved_context)


local_context = LocalContext
