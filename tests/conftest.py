import pytest

from logics.calculator import Calculator
from logics.computation import OperatorKind
from tests.helpers import type_keys


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def divide_by_zero(calc):
    type_keys(calc, "5")
    calc.select_operation(OperatorKind.DIVIDE)
    type_keys(calc, "0")
    calc.calculate()
    return calc
