from datetime import datetime

import simpy

from parkinglot.models.parking_lot import ParkingLot
from parkinglot.models.vehicle import Vehicle
from parkinglot.simulation.parking_simulation import ParkingSimulation, SimulationClock
from parkinglot.utils.logger import SimulationLogger

START = datetime(2024, 1, 1)


def run_simulation(vehicle_count=100, until=2 * 86_400, floors=3, seed=7):
    env = simpy.Environment()
    lot = ParkingLot()
    lot.initialize_floors(floors)
    logger = SimulationLogger()
    sim = ParkingSimulation(env, lot, logger, vehicle_count=vehicle_count,
                            random_seed=seed, start_time=START)
    sim.run(until=until)
    return sim, lot, logger


def test_simulation_clock_follows_env():
    env = simpy.Environment()
    clock = SimulationClock(env, START)
    env.run(until=3600)
    assert clock() == datetime(2024, 1, 1, 1, 0, 0)


def test_simulation_accounting_is_consistent():
    sim, lot, logger = run_simulation()
    stats = sim.stats

    assert stats["generated"] == 100
    assert stats["successful_parks"] + stats["failed_parks"] == stats["generated"]
    assert stats["completed_exits"] + len(sim.active_vehicles) == stats["successful_parks"]
    assert lot.active_ticket_count == len(sim.active_vehicles)

    occupied = sum(info["occupied_spots"] for info in lot.get_status().values())
    assert occupied == len(sim.active_vehicles)

    assert stats["total_revenue"] == logger.calculate_total_revenue()
    assert logger.stats["successful_parks"] == stats["successful_parks"]
    assert logger.stats["failed_parks"] == stats["failed_parks"]


def test_simulation_is_reproducible():
    first, _, _ = run_simulation(seed=11)
    second, _, _ = run_simulation(seed=11)
    assert first.stats == second.stats


def test_full_lot_rejects_every_arrival():
    env = simpy.Environment()
    lot = ParkingLot()
    lot.initialize_floors(1)
    logger = SimulationLogger()
    sim = ParkingSimulation(env, lot, logger, vehicle_count=10, start_time=START)
    for i in range(26):
        lot.park_vehicle(Vehicle(f"RESIDENT{i}", "BIKE"))

    sim.run(until=86_400)

    assert sim.stats["generated"] == 10
    assert sim.stats["failed_parks"] == 10
    assert sim.stats["successful_parks"] == 0
    assert logger.stats["failed_parks"] == 10


def test_fees_follow_hourly_rate():
    _, _, logger = run_simulation()
    df = logger.get_dataframe()
    unparks = df[df.event == "unpark"]
    expected = (unparks.parking_duration // 3600) * 10
    assert (unparks.fee == expected).all()


def test_print_summary(capsys):
    sim, _, _ = run_simulation(vehicle_count=20)
    sim.print_summary()
    out = capsys.readouterr().out
    assert "=== 시뮬레이션 결과 ===" in out
    assert "생성된 차량: 20대" in out
