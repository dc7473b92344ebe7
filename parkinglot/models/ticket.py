from dataclasses import dataclass
from datetime import datetime

from parkinglot.models.vehicle import Vehicle


@dataclass(frozen=True)
class Ticket:
    """입차 시 발급되는 주차권"""
    ticket_id: str  # "T1", "T2", ... 형식
    vehicle: Vehicle  # 입차한 차량
    spot_id: str  # 배정된 주차면 ID (주차장의 주차면 색인으로 조회)
    entry_time: datetime  # 입차 시각

    def __str__(self) -> str:
        """문자열 표현"""
        return f"Ticket(id={self.ticket_id}, plate={self.vehicle.license_plate}, " \
               f"spot={self.spot_id}, entry={self.entry_time:%Y-%m-%d %H:%M:%S})"
