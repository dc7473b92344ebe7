"""
주차장 입출차 시뮬레이션을 실행하는 모듈
"""
from datetime import datetime, timedelta
from typing import Dict, Optional

import numpy as np
import simpy

from parkinglot.config import NUM_VEHICLES, SEED
from parkinglot.models.parking_lot import ParkingLot
from parkinglot.models.vehicle import Vehicle
from parkinglot.utils.helpers import (
    sample_interarrival_time, sample_parking_duration,
    sample_vehicle_type, generate_license_plate
)
from parkinglot.utils.logger import SimulationLogger


class SimulationClock:
    """SimPy 시뮬레이션 시간(초)을 datetime 으로 변환하는 시계"""

    def __init__(self, env: simpy.Environment, start_time: datetime):
        self.env = env
        self.start_time = start_time

    def __call__(self) -> datetime:
        return self.start_time + timedelta(seconds=self.env.now)


class ParkingSimulation:
    """주차장 입출차 시뮬레이션을 실행하는 클래스"""

    def __init__(self,
                 env: simpy.Environment,
                 parking_lot: ParkingLot,
                 logger: SimulationLogger,
                 vehicle_count: int = NUM_VEHICLES,
                 random_seed: int = SEED,
                 start_time: Optional[datetime] = None):
        """
        시뮬레이션 객체를 초기화합니다.

        Args:
            env: SimPy 환경
            parking_lot: 층이 초기화된 주차장
            logger: 이벤트 로깅을 위한 로거 객체
            vehicle_count: 생성할 차량 수
            random_seed: 난수 생성을 위한 시드
            start_time: 시뮬레이션 시작 시각 (기본값: 오늘 0시)
        """
        self.env = env
        self.parking_lot = parking_lot
        self.logger = logger
        self.vehicle_count = vehicle_count
        self.rng = np.random.default_rng(random_seed)

        if start_time is None:
            start_time = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        self.start_time = start_time
        self.logger.start_time = start_time

        # 주차장 시계를 시뮬레이션 시간에 맞추고 로거 연결
        self.parking_lot.clock = SimulationClock(env, start_time)
        self.parking_lot.set_logger(logger)

        # 시뮬레이션 통계
        self.stats = {
            "generated": 0,
            "successful_parks": 0,
            "failed_parks": 0,
            "completed_exits": 0,
            "total_revenue": 0
        }

        # 현재 주차 중인 차량 (ticket_id -> Vehicle)
        self.active_vehicles: Dict[str, Vehicle] = {}

    def vehicle_process(self, vehicle: Vehicle):
        """차량 한 대의 입차 -> 주차 -> 출차 프로세스"""
        ticket = self.parking_lot.park_vehicle(vehicle)
        if ticket is None:
            self.stats["failed_parks"] += 1
            return

        self.stats["successful_parks"] += 1
        self.active_vehicles[ticket.ticket_id] = vehicle

        # 주차 시간 동안 대기
        yield self.env.timeout(sample_parking_duration(self.rng))

        fee = self.parking_lot.checkout(ticket.ticket_id)
        del self.active_vehicles[ticket.ticket_id]
        self.stats["completed_exits"] += 1
        self.stats["total_revenue"] += fee

    def arrival_process(self):
        """차량을 지수 분포 간격으로 생성하는 프로세스"""
        for index in range(1, self.vehicle_count + 1):
            yield self.env.timeout(sample_interarrival_time(self.rng))
            vehicle = Vehicle(
                license_plate=generate_license_plate(index),
                vehicle_type=sample_vehicle_type(self.rng)
            )
            self.stats["generated"] += 1
            self.env.process(self.vehicle_process(vehicle))

    def run(self, until: float) -> None:
        """
        시뮬레이션을 실행합니다.

        Args:
            until: 시뮬레이션 종료 시간 (초)
        """
        self.env.process(self.arrival_process())
        self.env.run(until=until)

    def print_summary(self) -> None:
        """시뮬레이션 결과 요약 출력"""
        print("\n=== 시뮬레이션 결과 ===")
        print(f"생성된 차량: {self.stats['generated']}대")
        print(f"주차 성공: {self.stats['successful_parks']}대")
        print(f"주차 실패: {self.stats['failed_parks']}대")
        print(f"출차 완료: {self.stats['completed_exits']}대")
        print(f"주차 중인 차량: {len(self.active_vehicles)}대")
        print(f"요금 수입: ${self.stats['total_revenue']}")

        print("\n층별 현황:")
        for floor_number, info in self.parking_lot.get_status().items():
            print(f"  - {floor_number}층: {info['occupied_spots']}/{info['total_spots']} 사용 중")

        print()
        self.logger.print_summary()
