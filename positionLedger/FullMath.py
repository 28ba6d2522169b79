from positionLedger.utilities import checkUInt256

### @title Contains 512-bit math functions
### @notice Facilitates multiplication and division that can have overflow of an intermediate value without any loss of precision
### @dev Python integers are unbounded, so the intermediate product never overflows. Only the result is bounded.


### @notice Calculates floor(a×b÷denominator) with full precision. Throws if result overflows a uint256 or denominator == 0
### @param a The multiplicand
### @param b The multiplier
### @param denominator The divisor
### @return result The 256-bit result
def mulDiv(a, b, denominator):
    assert denominator > 0, "FullMath denominator"
    result = (a * b) // denominator
    checkUInt256(result)
    return result
