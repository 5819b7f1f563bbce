import pytest

from vending.machine import VendingMachine
from vending.utils import token_source


@pytest.fixture
def machine():
    return VendingMachine()


@pytest.fixture
def machine_paid_with():
    """Builds a machine whose input source yields the given tokens, then runs dry."""

    def build(tokens, **load):
        return VendingMachine(read_token=token_source(tokens), **load)

    return build
