import pytest

from positionLedger import LiquidityMath
from positionLedger.utilities import *
from shared_tests import tryExceptHandler

# addDelta


def test_addDelta_1plus0():
    print("1 + 0")
    assert LiquidityMath.addDelta(1, 0) == 1


def test_addDelta_1minus1():
    print("1 + -1")
    assert LiquidityMath.addDelta(1, -1) == 0


def test_addDelta_1plus1():
    print("1 + 1")
    assert LiquidityMath.addDelta(1, 1) == 2


def test_addDelta_maxLiquidity():
    print("reaches MAX_UINT128 exactly")
    assert LiquidityMath.addDelta(MAX_UINT128 - 15, 15) == MAX_UINT128


def test_addDelta_overflow():
    print("2**128-15 + 15 overflows")
    tryExceptHandler(LiquidityMath.addDelta, "LA", 2**128 - 15, 15)


def test_addDelta_0minus1_underflows():
    print("0 + -1 underflows")
    tryExceptHandler(LiquidityMath.addDelta, "LS", 0, -1)


def test_addDelta_3minus4_underflows():
    print("3 + -4 underflows")
    tryExceptHandler(LiquidityMath.addDelta, "LS", 3, -4)


def test_addDelta_raisesTypedErrors():
    with pytest.raises(LiquidityUnderflow):
        LiquidityMath.addDelta(0, -1)
    with pytest.raises(LiquidityOverflow):
        LiquidityMath.addDelta(MAX_UINT128, 1)


def test_addDelta_minInt128():
    print("MAX_UINT128 + MIN_INT128")
    assert LiquidityMath.addDelta(MAX_UINT128, MIN_INT128) == MAX_UINT128 - 2**127


def test_addDelta_rejectsOutOfRangeDelta():
    tryExceptHandler(LiquidityMath.addDelta, "OF or UF of INT128", 0, MAX_INT128 + 1)


def test_addDelta_rejectsOutOfRangeLiquidity():
    tryExceptHandler(LiquidityMath.addDelta, "OF or UF of UINT128", MAX_UINT128 + 1, 0)
