from enum import Enum
from typing import Optional

from parkinglot.models.vehicle import Vehicle, VehicleType


class SpotType(Enum):
    """주차면 종류"""
    COMPACT = "COMPACT"
    LARGE = "LARGE"
    HANDICAPPED = "HANDICAPPED"  # 선언만 되어 있고 층 생성 시 만들어지지 않음
    ELECTRIC = "ELECTRIC"        # 선언만 되어 있고 층 생성 시 만들어지지 않음


def can_park(vehicle_type: VehicleType, spot_type: SpotType) -> bool:
    """
    차종과 주차면 종류의 호환 여부를 반환합니다.

    - BIKE: 모든 주차면
    - CAR: COMPACT 주차면
    - TRUCK: LARGE 주차면
    """
    if vehicle_type == VehicleType.BIKE:
        return True
    if vehicle_type == VehicleType.CAR:
        return spot_type == SpotType.COMPACT
    if vehicle_type == VehicleType.TRUCK:
        return spot_type == SpotType.LARGE
    return False


class ParkingSpot:
    """주차면 클래스"""

    def __init__(self, spot_id: str, spot_type: SpotType):
        """
        주차면 초기화

        Args:
            spot_id: 주차면 ID (예: "1A")
            spot_type: 주차면 종류
        """
        self.spot_id = spot_id
        self.spot_type = spot_type
        self.vehicle: Optional[Vehicle] = None

    @property
    def is_occupied(self) -> bool:
        """점유 여부 (차량이 배정되어 있으면 True)"""
        return self.vehicle is not None

    def is_available(self) -> bool:
        """주차 가능 여부 반환"""
        return not self.is_occupied

    def can_fit(self, vehicle_type: VehicleType) -> bool:
        """비어 있고 차종과 호환되는지 확인"""
        return self.is_available() and can_park(vehicle_type, self.spot_type)

    def assign_vehicle(self, vehicle: Vehicle) -> None:
        """차량 배정"""
        if self.is_occupied:
            raise ValueError(f"Spot {self.spot_id} is already occupied by {self.vehicle.license_plate}")
        self.vehicle = vehicle

    def remove_vehicle(self) -> Optional[Vehicle]:
        """배정된 차량을 해제하고 반환"""
        vehicle = self.vehicle
        self.vehicle = None
        return vehicle

    def __str__(self) -> str:
        """문자열 표현"""
        return f"ParkingSpot(id={self.spot_id}, type={self.spot_type.value}, " \
               f"occupied={self.is_occupied})"
