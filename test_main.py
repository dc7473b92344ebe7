import os

from main import main, run_demo
from parkinglot.models.parking_lot import ParkingLot


def test_demo_narrative(capsys, clock):
    run_demo(ParkingLot(clock=clock))
    out = capsys.readouterr().out

    assert out.startswith("Initial available spots:\nFloor 1 available spots:\n1A (LARGE)\t1B (COMPACT)\t")
    assert "Floor 3 available spots:\n" in out
    assert "\nVehicle parked at spot: 1B\nTicket ID: T1\n" in out
    assert out.endswith("\nUnparking vehicle. Fee: $0\n")


def test_demo_on_full_lot(capsys):
    run_demo(ParkingLot(), num_floors=0)
    out = capsys.readouterr().out
    assert out.endswith("No available spot!\n")


def test_main_uses_default_lot(capsys, monkeypatch):
    monkeypatch.setattr(ParkingLot, "_instance", None)
    assert main([]) == 0
    assert "Ticket ID: T1" in capsys.readouterr().out
    assert len(ParkingLot.get_instance().floors) == 3


def test_main_simulation_writes_results(tmp_path, capsys):
    results_dir = tmp_path / "results"
    assert main(["--simulate", "--vehicles", "30", "--time", "43200",
                 "--results-dir", str(results_dir), "--plots"]) == 0

    out = capsys.readouterr().out
    assert "=== 시뮬레이션 설정 ===" in out
    assert os.path.exists(results_dir / "simulation_log.csv")
    assert os.path.exists(results_dir / "simulation_stats.json")
    assert os.path.exists(results_dir / "parking_occupancy.png")
