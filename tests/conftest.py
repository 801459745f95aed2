import pytest

from bignum import Context, DefaultContext, local_context


# Test functions with an explicit context and a None context
@pytest.fixture
def context():
    with local_context(DefaultContext) as context:
        yield context


# A fresh context with default settings and no flags
@pytest.fixture
def quiet_context():
    with local_context(Context()) as context:
        yield context
