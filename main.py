#!/usr/bin/env python3
"""
주차장 시뮬레이터 메인 실행 파일

사용법:
    python main.py              # 기본 시나리오 (입차 1대 -> 출차)
    python main.py --simulate   # 입출차 시뮬레이션


기본 시나리오는 3개 층을 초기화하고 빈 주차면을 출력한 뒤 차량 한 대를
주차하고 바로 출차시켜 요금을 출력합니다.
"""
import argparse
import os
import sys
from datetime import datetime

import simpy

from parkinglot.config import (
    NUM_FLOORS, NUM_VEHICLES, SEED, SIM_TIME,
    DEMO_LICENSE_PLATE, DEMO_VEHICLE_TYPE
)
from parkinglot.models.parking_lot import ParkingLot
from parkinglot.models.vehicle import Vehicle
from parkinglot.simulation.parking_simulation import ParkingSimulation
from parkinglot.utils.logger import SimulationLogger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='주차장 시뮬레이터')
    parser.add_argument("--simulate", action="store_true", help="입출차 시뮬레이션 실행")
    parser.add_argument("--floors", type=int, default=NUM_FLOORS, help=f"층 수 (기본값: {NUM_FLOORS})")
    parser.add_argument("--vehicles", type=int, default=NUM_VEHICLES, help=f"생성할 차량 수 (기본값: {NUM_VEHICLES})")
    parser.add_argument("--time", type=int, default=SIM_TIME, help="시뮬레이션 시간 (초, 기본값: 24시간)")
    parser.add_argument("--seed", type=int, default=SEED, help=f"랜덤 시드 (기본값: {SEED})")
    parser.add_argument("--results-dir", type=str, default=None, help="결과 저장 디렉토리")
    parser.add_argument("--no-save-csv", action="store_true", help="CSV 저장 안 함")
    parser.add_argument("--plots", action="store_true", help="결과 그래프 저장")
    return parser.parse_args(argv)


def create_output_directory(prefix: str) -> str:
    """
    결과 파일을 저장할 디렉토리를 생성합니다.

    Args:
        prefix: 디렉토리 이름 접두사

    Returns:
        생성된 디렉토리 경로
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = f"results_{prefix}_{timestamp}"

    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
        print(f"[INFO] 결과 저장 디렉토리 생성: {output_dir}")

    return output_dir


def run_demo(parking_lot: ParkingLot, num_floors: int = NUM_FLOORS) -> None:
    """기본 시나리오: 층 초기화 -> 빈 주차면 출력 -> 입차 -> 출차 요금 출력"""
    parking_lot.initialize_floors(num_floors)

    print("Initial available spots:")
    parking_lot.display_all_available_spots()

    car = Vehicle(DEMO_LICENSE_PLATE, DEMO_VEHICLE_TYPE)
    ticket = parking_lot.park_vehicle(car)

    if ticket:
        print(f"\nVehicle parked at spot: {ticket.spot_id}\nTicket ID: {ticket.ticket_id}")

        fee = parking_lot.unpark_vehicle(ticket.ticket_id)
        print(f"\nUnparking vehicle. Fee: ${fee}")
    else:
        print("No available spot!")


def run_simulation(args) -> None:
    """입출차 시뮬레이션 실행"""
    results_dir = args.results_dir
    if not args.no_save_csv or args.plots:
        results_dir = results_dir or create_output_directory("parking")
        os.makedirs(results_dir, exist_ok=True)

    logger = SimulationLogger(
        log_file=os.path.join(results_dir, "simulation_log.csv") if results_dir and not args.no_save_csv else None,
        stats_file=os.path.join(results_dir, "simulation_stats.json") if results_dir else None
    )

    parking_lot = ParkingLot()
    parking_lot.initialize_floors(args.floors)

    print("\n=== 시뮬레이션 설정 ===")
    print(f"  - 층 수: {args.floors}")
    print(f"  - 총 주차면: {len(parking_lot.spots)}면")
    print(f"  - 차량 수: {args.vehicles}대")
    print(f"  - 시뮬레이션 시간: {args.time}초")

    env = simpy.Environment()
    sim = ParkingSimulation(
        env=env,
        parking_lot=parking_lot,
        logger=logger,
        vehicle_count=args.vehicles,
        random_seed=args.seed
    )
    sim.run(until=args.time)
    sim.print_summary()

    if results_dir:
        logger.save_stats()
    if args.plots:
        logger.generate_plots(results_dir)
        print(f"\n[INFO] 그래프가 '{results_dir}' 디렉토리에 저장되었습니다.")
    if logger.log_file:
        print(f"\n[INFO] 결과가 {logger.log_file}에 저장되었습니다.")


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.simulate:
        run_simulation(args)
    else:
        run_demo(ParkingLot.get_instance(), args.floors)

    return 0


if __name__ == "__main__":
    sys.exit(main())
