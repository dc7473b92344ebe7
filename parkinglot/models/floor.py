"""
주차장의 한 층과 그 층의 주차면들을 관리하는 모듈입니다.
"""
from typing import List, Optional

from parkinglot.config import SPOT_LETTERS
from parkinglot.models.parking_spot import ParkingSpot, SpotType
from parkinglot.models.vehicle import VehicleType


def spot_type_for_letter(letter: str) -> SpotType:
    """문자 코드가 짝수이면 COMPACT, 홀수이면 LARGE (A=LARGE, B=COMPACT, ...)"""
    return SpotType.COMPACT if ord(letter) % 2 == 0 else SpotType.LARGE


class Floor:
    """주차장 층 클래스"""

    def __init__(self, floor_number: int):
        """
        층을 초기화하고 주차면 1A~1Z (2층이면 2A~2Z ...) 를 생성합니다.

        Args:
            floor_number: 층 번호 (1부터 시작)
        """
        self.floor_number = floor_number
        self.spots: List[ParkingSpot] = [
            ParkingSpot(f"{floor_number}{letter}", spot_type_for_letter(letter))
            for letter in SPOT_LETTERS
        ]

    def get_spot(self, spot_id: str) -> Optional[ParkingSpot]:
        for spot in self.spots:
            if spot.spot_id == spot_id:
                return spot
        return None

    def get_available_spots(self) -> List[ParkingSpot]:
        """비어 있는 주차면 목록 (선언 순서)"""
        return [spot for spot in self.spots if spot.is_available()]

    def count_available(self) -> int:
        return len(self.get_available_spots())

    def find_available_spot(self, vehicle_type: VehicleType) -> Optional[ParkingSpot]:
        """
        선언 순서대로 탐색하여 차종과 호환되는 첫 번째 빈 주차면을 찾습니다.

        Args:
            vehicle_type: 차종

        Returns:
            Optional[ParkingSpot]: 호환되는 빈 주차면, 없으면 None
        """
        for spot in self.spots:
            if spot.can_fit(vehicle_type):
                return spot
        return None

    def format_available_spots(self) -> str:
        """빈 주차면 현황 문자열 생성"""
        lines = f"Floor {self.floor_number} available spots:\n"
        for spot in self.get_available_spots():
            lines += f"{spot.spot_id} ({spot.spot_type.value})\t"
        return lines + "\n\n"

    def display_available_spots(self) -> None:
        """빈 주차면 현황 출력"""
        print(self.format_available_spots(), end="")
