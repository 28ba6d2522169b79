from web3 import Web3

FixedPoint128_Q128 = 0x100000000000000000000000000000000

# MAX type values
MAX_UINT128 = 2**128 - 1
MAX_UINT256 = 2**256 - 1
MIN_INT24 = -(2**23)
MAX_INT24 = 2**23 - 1
MIN_INT128 = -(2**127)
MAX_INT128 = 2**127 - 1


### Revert reasons. They subclass AssertionError so that callers catching a revert
### the way the width checks below raise them keep working.
class PositionError(AssertionError):
    pass


class InvalidState(PositionError):
    pass


class LiquidityUnderflow(PositionError):
    pass


class LiquidityOverflow(PositionError):
    pass


def checkUInt128(number):
    assert type(number) == int, "Not an integer"
    assert number >= 0 and number <= MAX_UINT128, "OF or UF of UINT128"


def checkInt128(number):
    assert type(number) == int, "Not an integer"
    assert number >= MIN_INT128 and number <= MAX_INT128, "OF or UF of INT128"


def checkUInt256(number):
    assert type(number) == int, "Not an integer"
    assert number >= 0 and number <= MAX_UINT256, "OF or UF of UINT256"


def checkInt24(number):
    assert type(number) == int, "Not an integer"
    assert number >= MIN_INT24 and number <= MAX_INT24, "OF or UF of INT24"


def checkAddress(owner):
    if isinstance(owner, (bytes, bytearray)):
        assert len(owner) == 20, "Invalid address"
    else:
        assert Web3.is_address(owner), "Invalid address"
        # is_address no longer verifies the checksum of mixed-case addresses
        digits = owner[2:]
        assert (
            digits in (digits.lower(), digits.upper()) or Web3.is_checksum_address(owner)
        ), "Invalid address"


# Mimic unchecked Solidity casts: keep the low bits and drop the rest
def toUint256(number):
    return number & MAX_UINT256


def toUint128(number):
    return number & MAX_UINT128


# General checkInput function for all functions that take input parameters
def checkInputTypes(**kwargs):
    if "address" in kwargs:
        loopChecking(kwargs.get("address"), checkAddress)
    if "int24" in kwargs:
        loopChecking(kwargs.get("int24"), checkInt24)
    if "uint256" in kwargs:
        loopChecking(kwargs.get("uint256"), checkUInt256)
    if "uint128" in kwargs:
        loopChecking(kwargs.get("uint128"), checkUInt128)
    if "int128" in kwargs:
        loopChecking(kwargs.get("int128"), checkInt128)


def loopChecking(values, fcn):
    # Strings and bytes are single values even though they are iterable
    if isinstance(values, (str, bytes, bytearray)):
        fcn(values)
        return
    try:
        iter(values)
    except TypeError:
        # Not iterable
        fcn(values)
    else:
        # Iterable
        for item in values:
            fcn(item)
