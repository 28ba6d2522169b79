from positionLedger.utilities import (
    MAX_UINT128,
    LiquidityOverflow,
    LiquidityUnderflow,
    checkInputTypes,
)

### @title Math library for liquidity

### @notice Add a signed liquidity delta to liquidity and revert if it overflows or underflows
### @param x The liquidity before change
### @param y The delta by which liquidity should be changed
### @return z The liquidity delta
def addDelta(x, y):
    checkInputTypes(uint128=x, int128=y)

    if y < 0:
        z = x - abs(y)
        if z < 0:
            raise LiquidityUnderflow("LS")
    else:
        z = x + y
        if z > MAX_UINT128:
            raise LiquidityOverflow("LA")
    return z
