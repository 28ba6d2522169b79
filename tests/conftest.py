import pytest

from positionLedger import Position
from positionLedger.Position import PositionInfo

ALICE = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
BOB = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"


@pytest.fixture
def accounts():
    return ALICE, BOB


# Mapping of all positions, as the pool contract storage would hold it
@pytest.fixture
def positions():
    return {}


@pytest.fixture
def position(positions):
    return Position.get(positions, ALICE, -60, 60)


# Position with 1000 liquidity minted when all fee growths were zero
@pytest.fixture
def fundedPosition(position):
    Position.update(position, 1000, 0, 0)
    assert position == PositionInfo(1000, 0, 0, 0, 0)
    return position
