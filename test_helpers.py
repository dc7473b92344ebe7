from datetime import datetime, timedelta

import numpy as np

from parkinglot.config import MIN_ARRIVAL_INTERVAL, MAX_ARRIVAL_INTERVAL, VEHICLE_MIX
from parkinglot.utils.helpers import (
    calculate_fee, elapsed_whole_hours, generate_license_plate,
    sample_interarrival_time, sample_parking_duration, sample_vehicle_type
)

ENTRY = datetime(2024, 1, 1, 9, 0, 0)


def test_elapsed_whole_hours_truncates():
    assert elapsed_whole_hours(ENTRY, ENTRY) == 0
    assert elapsed_whole_hours(ENTRY, ENTRY + timedelta(minutes=59, seconds=59)) == 0
    assert elapsed_whole_hours(ENTRY, ENTRY + timedelta(hours=1)) == 1
    assert elapsed_whole_hours(ENTRY, ENTRY + timedelta(hours=5, minutes=59)) == 5


def test_elapsed_whole_hours_clock_backwards():
    assert elapsed_whole_hours(ENTRY, ENTRY - timedelta(hours=3)) == 0


def test_calculate_fee():
    assert calculate_fee(ENTRY, ENTRY + timedelta(hours=3, minutes=10)) == 30
    assert calculate_fee(ENTRY, ENTRY + timedelta(hours=3), hourly_rate=7) == 21


def test_samplers_respect_bounds():
    rng = np.random.default_rng(0)
    for _ in range(200):
        interval = sample_interarrival_time(rng)
        assert MIN_ARRIVAL_INTERVAL <= interval <= MAX_ARRIVAL_INTERVAL
        assert sample_parking_duration(rng) > 0
        assert sample_vehicle_type(rng) in VEHICLE_MIX


def test_sample_vehicle_type_single_choice():
    rng = np.random.default_rng(1)
    assert {sample_vehicle_type(rng, {"TRUCK": 1.0}) for _ in range(20)} == {"TRUCK"}


def test_generate_license_plate():
    assert generate_license_plate(7) == "SIM0007"
