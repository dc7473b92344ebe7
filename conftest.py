from datetime import datetime, timedelta

import pytest

from parkinglot.models.parking_lot import ParkingLot


class FakeClock:
    """테스트용 수동 시계"""

    def __init__(self, start=datetime(2024, 1, 1, 9, 0, 0)):
        self.now = start

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def parking_lot(clock):
    lot = ParkingLot(clock=clock)
    lot.initialize_floors(3)
    return lot
