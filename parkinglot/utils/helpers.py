"""
요금 계산과 시뮬레이션 샘플링에 필요한 유틸리티 함수들을 제공하는 모듈
"""
from datetime import datetime, timedelta
from typing import Dict, Optional

import numpy as np

from parkinglot.config import (
    HOURLY_RATE, ARRIVAL_MEAN, MIN_ARRIVAL_INTERVAL, MAX_ARRIVAL_INTERVAL,
    PARKING_DURATION_SHAPE, PARKING_DURATION_SCALE,
    MIN_PARKING_DURATION, MAX_PARKING_DURATION, VEHICLE_MIX
)

ONE_HOUR = timedelta(hours=1)


def elapsed_whole_hours(entry_time: datetime, exit_time: datetime) -> int:
    """
    입차부터 출차까지 경과한 시간을 정수 시간으로 계산합니다 (내림).

    Args:
        entry_time: 입차 시각
        exit_time: 출차 시각

    Returns:
        int: 경과 시간 (시간), 시계가 거꾸로 간 경우 0
    """
    elapsed = exit_time - entry_time
    if elapsed < timedelta(0):
        return 0
    return elapsed // ONE_HOUR


def calculate_fee(entry_time: datetime, exit_time: datetime, hourly_rate: int = HOURLY_RATE) -> int:
    """
    주차 요금을 계산합니다. 1시간 미만은 버리며 최소 요금은 없습니다.

    Args:
        entry_time: 입차 시각
        exit_time: 출차 시각
        hourly_rate: 시간당 요금

    Returns:
        int: 주차 요금
    """
    return elapsed_whole_hours(entry_time, exit_time) * hourly_rate


def sample_interarrival_time(rng: Optional[np.random.Generator] = None) -> float:
    """
    차량 간 도착 시간 간격을 샘플링합니다.

    Returns:
        float: 도착 시간 간격 (초)
    """
    rng = rng if rng is not None else np.random.default_rng()
    # 평균 ARRIVAL_MEAN 분의 지수분포에서 샘플링
    seconds = rng.exponential(ARRIVAL_MEAN) * 60
    return float(max(MIN_ARRIVAL_INTERVAL, min(MAX_ARRIVAL_INTERVAL, seconds)))


def sample_parking_duration(rng: Optional[np.random.Generator] = None) -> float:
    """
    차량의 주차 시간을 감마분포에서 샘플링합니다.

    Returns:
        float: 주차 시간 (초)
    """
    rng = rng if rng is not None else np.random.default_rng()
    minutes = rng.gamma(PARKING_DURATION_SHAPE, PARKING_DURATION_SCALE)
    return float(max(MIN_PARKING_DURATION, min(MAX_PARKING_DURATION, minutes * 60)))


def sample_vehicle_type(rng: Optional[np.random.Generator] = None,
                        mix: Dict[str, float] = VEHICLE_MIX) -> str:
    """
    차종 구성 비율에 따라 차종을 샘플링합니다.

    Returns:
        str: "CAR", "BIKE", "TRUCK" 중 하나
    """
    rng = rng if rng is not None else np.random.default_rng()
    types = list(mix.keys())
    weights = np.array(list(mix.values()), dtype=float)
    return str(rng.choice(types, p=weights / weights.sum()))


def generate_license_plate(index: int) -> str:
    """시뮬레이션 차량 번호판 생성 (예: SIM0001)"""
    return f"SIM{index:04d}"
