import logging
import threading

import pytest

from bignum import *


def contexts_equal(lhs, rhs):
    return (lhs.flags == rhs.flags and lhs.precision == rhs.precision
            and lhs.factorial_limit == rhs.factorial_limit)


def substitute_zero(exception, context):
    return BigInt.zero()


class TestStatus:

    @pytest.mark.parametrize('status, message', (
        (Status.OK, 'Success'),
        (Status.MEMORY, 'Memory allocation failed'),
        (Status.DIVIDE_BY_ZERO, 'Division by zero'),
        (Status.INVALID_ARGS, 'Invalid arguments'),
        (Status.OVERFLOW, 'Arithmetic overflow'),
        (Status.UNDERFLOW, 'Arithmetic underflow'),
    ))
    def test_error_string(self, status, message):
        assert error_string(status) == message
        assert error_string(int(status)) == message
        assert status.message() == message

    @pytest.mark.parametrize('status', (-1, 6, 100))
    def test_error_string_unknown(self, status):
        assert error_string(status) == 'Unknown error'

    def test_members(self):
        assert [status.name for status in Status] == [
            'OK', 'MEMORY', 'DIVIDE_BY_ZERO', 'INVALID_ARGS', 'OVERFLOW', 'UNDERFLOW']

    @pytest.mark.parametrize('exc, status, flag, builtin', (
        (InvalidArgs, Status.INVALID_ARGS, Flags.INVALID, ValueError),
        (InvalidString, Status.INVALID_ARGS, Flags.INVALID, ValueError),
        (InvalidBase, Status.INVALID_ARGS, Flags.INVALID, ValueError),
        (NegativeOperand, Status.INVALID_ARGS, Flags.INVALID, ValueError),
        (DomainError, Status.INVALID_ARGS, Flags.INVALID, ValueError),
        (DivideByZero, Status.DIVIDE_BY_ZERO, Flags.DIV_BY_ZERO, ZeroDivisionError),
        (Overflow, Status.OVERFLOW, Flags.OVERFLOW, OverflowError),
        (Underflow, Status.UNDERFLOW, Flags.UNDERFLOW, ArithmeticError),
        (OutOfMemory, Status.MEMORY, Flags.MEMORY, MemoryError),
    ))
    def test_signal_classes(self, exc, status, flag, builtin):
        assert issubclass(exc, BignumError)
        assert issubclass(exc, builtin)
        assert exc.status == status
        assert status.flag() == flag


class TestContext:

    def test_default_context(self):
        assert DefaultContext.precision == DEFAULT_PRECISION == 64
        assert DefaultContext.factorial_limit == FACTORIAL_LIMIT == 100000
        assert DefaultContext.flags == 0

    @pytest.mark.parametrize('precision', (0, -1, 1.5, None))
    def test_bad_precision(self, precision):
        with pytest.raises(ValueError):
            Context(precision=precision)

    def test_bad_factorial_limit(self):
        with pytest.raises(ValueError):
            Context(factorial_limit=-1)

    def test_copy(self, context):
        context.flags = Flags.OVERFLOW
        context.set_handler(DivideByZero, HandlerKind.SUBSTITUTE_VALUE, substitute_zero)
        c = context.copy()
        assert contexts_equal(c, context)
        assert c.handlers is not context.handlers
        assert c.handlers == context.handlers

    def test_get_context(self):
        context = get_context()
        assert context is not DefaultContext
        assert get_context() is context

        def target():
            thread_context = get_context()
            assert contexts_equal(thread_context, DefaultContext)
            assert thread_context not in (context, DefaultContext)
            event.set()

        event = threading.Event()
        thread = threading.Thread(target=target)
        thread.start()
        event.wait()
        thread.join()

    def test_set_context(self):
        context1 = get_context()
        context = Context(precision=30, flags=Flags.INVALID)
        assert not contexts_equal(context, context1)

        set_context(context)
        try:
            context2 = get_context()
            assert context2 is context
            assert context2.precision == 30 and context2.flags == Flags.INVALID
        finally:
            set_context(context1)

    def test_local_context_omitted(self):
        context = get_context()
        context_copy = context.copy()
        try:
            context.flags ^= Flags.INVALID

            with local_context() as ctx:
                assert get_context() is ctx
                assert ctx is not context
                assert contexts_equal(ctx, context)
                assert not contexts_equal(ctx, context_copy)

            assert get_context() is context
        finally:
            set_context(context_copy)

    def test_local_context(self):
        context = get_context()
        new_context = Context(precision=20, flags=Flags.DIV_BY_ZERO)
        with local_context(new_context) as ctx:
            assert get_context() is ctx
            assert ctx not in (context, new_context)
            assert contexts_equal(ctx, new_context)

        assert get_context() is context

    def test_local_context_timing(self, context):
        # The saved context is taken on entry, not on construction
        my_context = Context(precision=10, flags=Flags.INVALID)
        manager = local_context(my_context)
        my_context.flags |= Flags.DIV_BY_ZERO
        set_context(my_context)
        with manager as ctx:
            assert get_context() is ctx
            assert ctx is not my_context
            assert contexts_equal(ctx, my_context)
            assert not contexts_equal(ctx, context)
        assert get_context() is my_context

    def test_repr(self):
        c = Context(precision=32, factorial_limit=50, flags=Flags.OVERFLOW)
        assert repr(c) == (
            '<Context precision=32 factorial_limit=50 flags=<Flags.OVERFLOW: 8>>'
        )

    def test_clear_flags(self, context):
        context.flags = Flags.INVALID | Flags.OVERFLOW
        context.clear_flags()
        assert context.flags == 0

    def test_handler_bad(self):
        context = Context()
        with pytest.raises(TypeError):
            context.handler(SyntaxError)
        with pytest.raises(TypeError):
            context.handler(ZeroDivisionError)

    def test_handler_default(self):
        context = Context()
        assert context.handler(DivideByZero) == (HandlerKind.RAISE, None)

    def test_set_handler_inherited(self):
        context = Context()
        context.set_handler(InvalidArgs, HandlerKind.SUBSTITUTE_VALUE, substitute_zero)
        assert context.handler(InvalidString) == (HandlerKind.SUBSTITUTE_VALUE,
                                                  substitute_zero)
        assert context.handler(NegativeOperand) == (HandlerKind.SUBSTITUTE_VALUE,
                                                    substitute_zero)
        assert context.handler(DivideByZero) == (HandlerKind.RAISE, None)

    def test_set_handler_list(self):
        context = Context()
        context.set_handler([DivideByZero, Overflow], HandlerKind.SUBSTITUTE_VALUE,
                            substitute_zero)
        context.set_handler(Overflow, HandlerKind.RAISE)
        assert context.handler(DivideByZero) == (HandlerKind.SUBSTITUTE_VALUE,
                                                 substitute_zero)
        assert context.handler(Overflow) == (HandlerKind.RAISE, None)

    @pytest.mark.parametrize('exc', (ZeroDivisionError, (DivideByZero, ValueError)))
    def test_set_handler_bad(self, exc):
        context = Context()
        with pytest.raises(TypeError) as e:
            context.set_handler(exc, HandlerKind.RAISE)
        assert 'of BignumError' in str(e.value)

    @pytest.mark.parametrize('kind', (2, None))
    def test_set_handler_bad_kind(self, kind):
        context = Context()
        with pytest.raises(TypeError) as e:
            context.set_handler(DivideByZero, kind)
        assert 'HandlerKind instance' in str(e.value)

    def test_set_handler_unwanted_handler(self):
        context = Context()
        with pytest.raises(ValueError) as e:
            context.set_handler(Overflow, HandlerKind.RAISE, substitute_zero)
        assert 'handler given' in str(e.value)

    def test_set_handler_missing_handler(self):
        context = Context()
        with pytest.raises(ValueError) as e:
            context.set_handler(DivideByZero, HandlerKind.SUBSTITUTE_VALUE)
        assert 'handler not given' in str(e.value)


class TestSignals:

    def test_raise_sets_flag(self, quiet_context):
        with pytest.raises(DivideByZero) as e:
            BigInt.from_int(1).divide(BigInt.zero())
        assert quiet_context.flags == Flags.DIV_BY_ZERO
        assert e.value.op_tuple[0] == OP_DIVIDE
        assert str(e.value).startswith('Division by zero: ')

    def test_flags_are_sticky(self, quiet_context):
        with pytest.raises(InvalidString):
            BigInt.from_string('12a')
        with pytest.raises(NegativeOperand):
            BigInt.from_int(-1).factorial()
        with pytest.raises(DivideByZero):
            BigInt.from_int(1).modulo(0)
        assert quiet_context.flags == Flags.INVALID | Flags.DIV_BY_ZERO

    def test_substitute_value(self, quiet_context):
        quiet_context.set_handler(DivideByZero, HandlerKind.SUBSTITUTE_VALUE,
                                  lambda exception, context: 'substituted')
        assert BigInt.from_int(5).modulo(0) == 'substituted'
        assert quiet_context.flags == Flags.DIV_BY_ZERO

    def test_explicit_context(self, quiet_context):
        context = Context()
        context.set_handler(InvalidString, HandlerKind.SUBSTITUTE_VALUE, substitute_zero)
        assert BigInt.from_string('', context=context) == 0
        assert context.flags == Flags.INVALID
        assert quiet_context.flags == 0

    def test_catch_as_builtin(self, quiet_context):
        with pytest.raises(ValueError):
            BigInt.from_string('  ')
        with pytest.raises(ZeroDivisionError):
            BigFloat.from_int(1) / 0
        with pytest.raises(OverflowError):
            BigInt.from_int(FACTORIAL_LIMIT + 1).factorial()

    def test_signal_logged(self, quiet_context, caplog):
        with caplog.at_level(logging.DEBUG, logger='bignum'):
            with pytest.raises(InvalidBase):
                BigInt.from_int(255).to_string_base(37)
        assert any('InvalidBase' in record.getMessage() for record in caplog.records)
