"""
주차장에 입차하는 차량을 나타내는 모델 클래스
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class VehicleType(Enum):
    """차종"""
    CAR = "CAR"
    BIKE = "BIKE"
    TRUCK = "TRUCK"


@dataclass(frozen=True)
class Vehicle:
    """주차장에 입차하는 차량을 나타내는 클래스 (생성 후 변경 불가)"""
    license_plate: str  # 차량 번호판 (예: "ABC123")
    vehicle_type: Union[VehicleType, str]  # VehicleType 또는 "CAR", "BIKE", "TRUCK"

    def __post_init__(self):
        """초기화 이후 유효성 검사"""
        if not self.license_plate:
            raise ValueError("license_plate must not be empty")

        vehicle_type = self.vehicle_type
        if isinstance(vehicle_type, str):
            try:
                vehicle_type = VehicleType(vehicle_type.upper())
            except ValueError:
                raise ValueError(
                    f"vehicle_type must be one of {[t.value for t in VehicleType]}, "
                    f"got {self.vehicle_type!r}"
                ) from None
        elif not isinstance(vehicle_type, VehicleType):
            raise ValueError(f"Invalid vehicle_type: {vehicle_type!r}")

        # frozen dataclass 이므로 object.__setattr__ 로 정규화된 값 저장
        object.__setattr__(self, "vehicle_type", vehicle_type)

    def __str__(self) -> str:
        """문자열 표현"""
        return f"Vehicle(plate={self.license_plate}, type={self.vehicle_type.value})"
