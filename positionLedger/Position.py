import logging
from dataclasses import dataclass

from eth_abi.packed import encode_packed
from web3 import Web3

from positionLedger import LiquidityMath
from positionLedger.FullMath import mulDiv
from positionLedger.utilities import (
    FixedPoint128_Q128,
    MAX_UINT128,
    InvalidState,
    checkInputTypes,
    toUint128,
    toUint256,
)

logger = logging.getLogger(__name__)

### @title Position
### @notice Positions represent an owner address' liquidity between a lower and upper tick boundary
### @dev Positions store additional state for tracking fees owed to the position


@dataclass
class PositionInfo:
    ## the amount of liquidity owned by this position => uint128
    liquidity: int = 0
    ## fee growth per unit of liquidity as of the last update to liquidity or fees owed => uint256
    feeGrowthInside0LastX128: int = 0
    feeGrowthInside1LastX128: int = 0
    ## the fees owed to the position owner in token0#token1 => uint128
    tokensOwed0: int = 0
    tokensOwed1: int = 0


### @notice Returns the key of a position, keccak256(abi.encodePacked(owner, tickLower, tickUpper))
### @param owner The address of the position owner
### @param tickLower The lower tick boundary of the position
### @param tickUpper The upper tick boundary of the position
### @return key The 32-byte key under which the position is stored
### @dev Owner and ticks must fit the address and int24 types so the packed encoding stays unique.
###      This is a type check only, the tick range itself is not validated.
def getKey(owner, tickLower, tickUpper):
    checkInputTypes(address=owner, int24=(tickLower, tickUpper))
    return Web3.keccak(
        encode_packed(["address", "int24", "int24"], [owner, tickLower, tickUpper])
    )


### @notice Returns the Info struct of a position, given an owner and position boundaries
### @param self The mapping containing all user positions
### @param owner The address of the position owner
### @param tickLower The lower tick boundary of the position
### @param tickUpper The upper tick boundary of the position
### @return position The position info struct of the given owners' position
def get(self, owner, tickLower, tickUpper):
    key = getKey(owner, tickLower, tickUpper)

    # A Solidity mapping returns a zeroed struct for unknown keys. Here we insert it explicitly
    # so that later updates through the returned reference land in the mapping.
    if key not in self:
        logger.debug(
            "New position %s for owner %s [%d, %d]", key.hex(), owner, tickLower, tickUpper
        )
        self[key] = PositionInfo()
    return self[key]


### @notice Reverts unless the position has been created and holds some state
### @dev Does not insert the position in the mapping when it is missing
def assertPositionExists(self, owner, tickLower, tickUpper):
    key = getKey(owner, tickLower, tickUpper)
    assert self.get(key, PositionInfo()) != PositionInfo(), "Position doesn't exist"


### @notice Credits accumulated fees to a user's position
### @param self The individual position to update
### @param liquidityDelta The change in pool liquidity as a result of the position update
### @param feeGrowthInside0X128 The all-time fee growth in token0, per unit of liquidity, inside the position's tick boundaries
### @param feeGrowthInside1X128 The all-time fee growth in token1, per unit of liquidity, inside the position's tick boundaries
def update(self, liquidityDelta, feeGrowthInside0X128, feeGrowthInside1X128):
    checkInputTypes(
        int128=liquidityDelta, uint256=(feeGrowthInside0X128, feeGrowthInside1X128)
    )

    if liquidityDelta == 0:
        ## disallow pokes for 0 liquidity positions
        if self.liquidity == 0:
            raise InvalidState("NP")
        liquidityNext = self.liquidity
    else:
        liquidityNext = LiquidityMath.addDelta(self.liquidity, liquidityDelta)

    ## calculate accumulated fees. The fee growth counters can wrap, so the difference is taken mod 2**256
    tokensOwed0 = mulDiv(
        toUint256(feeGrowthInside0X128 - self.feeGrowthInside0LastX128),
        self.liquidity,
        FixedPoint128_Q128,
    )
    tokensOwed1 = mulDiv(
        toUint256(feeGrowthInside1X128 - self.feeGrowthInside1LastX128),
        self.liquidity,
        FixedPoint128_Q128,
    )

    # Mimic uint128(tokensOwed) in Solidity
    tokensOwed0 = toUint128(tokensOwed0)
    tokensOwed1 = toUint128(tokensOwed1)

    ## update the position
    if liquidityDelta != 0:
        self.liquidity = liquidityNext
    self.feeGrowthInside0LastX128 = feeGrowthInside0X128
    self.feeGrowthInside1LastX128 = feeGrowthInside1X128

    if tokensOwed0 > 0 or tokensOwed1 > 0:
        ## overflow is acceptable, have to withdraw before you hit MAX_UINT128 fees
        if (
            self.tokensOwed0 + tokensOwed0 > MAX_UINT128
            or self.tokensOwed1 + tokensOwed1 > MAX_UINT128
        ):
            logger.warning("tokensOwed wrapped around MAX_UINT128")
        self.tokensOwed0 = toUint128(self.tokensOwed0 + tokensOwed0)
        self.tokensOwed1 = toUint128(self.tokensOwed1 + tokensOwed1)

    logger.debug(
        "Position updated: liquidityDelta=%d liquidity=%d owed=(%d, %d)",
        liquidityDelta,
        self.liquidity,
        self.tokensOwed0,
        self.tokensOwed1,
    )
