from datetime import datetime
from typing import Callable, Dict, List, Optional

from parkinglot.config import HOURLY_RATE, TICKET_PREFIX, FEE_NOT_FOUND
from parkinglot.models.floor import Floor
from parkinglot.models.parking_spot import ParkingSpot
from parkinglot.models.ticket import Ticket
from parkinglot.models.vehicle import Vehicle
from parkinglot.utils.helpers import calculate_fee


class TicketNotFoundError(KeyError):
    """발급되지 않았거나 이미 정산된 티켓"""

    def __init__(self, ticket_id: str):
        super().__init__(ticket_id)
        self.ticket_id = ticket_id

    def __str__(self) -> str:
        return f"Ticket {self.ticket_id} not found"


class ParkingLot:
    """
    주차장 클래스

    층, 주차면 색인(spot_id -> ParkingSpot), 발급된 티켓, 티켓 번호 카운터를
    소유합니다. 단일 스레드에서 사용하는 것을 전제로 하며, 여러 스레드가 하나의
    주차장을 공유할 경우 호출하는 쪽에서 직렬화해야 합니다.
    """

    _instance: Optional["ParkingLot"] = None

    def __init__(self,
                 hourly_rate: int = HOURLY_RATE,
                 clock: Optional[Callable[[], datetime]] = None,
                 logger=None):
        """
        주차장 초기화

        Args:
            hourly_rate: 시간당 요금
            clock: 현재 시각을 반환하는 함수 (기본값: datetime.now)
            logger: 이벤트 로깅을 위한 SimulationLogger (선택)
        """
        self.hourly_rate = hourly_rate
        self.clock = clock if clock is not None else datetime.now
        self.logger = logger

        self.floors: List[Floor] = []
        self.spots: Dict[str, ParkingSpot] = {}  # spot_id -> ParkingSpot
        self.tickets: Dict[str, Ticket] = {}  # ticket_id -> Ticket
        self.ticket_counter = 0  # 마지막으로 발급한 티켓 번호

    @classmethod
    def get_instance(cls) -> "ParkingLot":
        """프로세스 기본 주차장 반환 (처음 호출 시 생성)"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_logger(self, logger):
        """로거 설정"""
        self.logger = logger

    def initialize_floors(self, num_floors: int) -> None:
        """
        1층부터 num_floors 층까지 생성합니다.

        Args:
            num_floors: 층 수
        """
        if num_floors < 0:
            raise ValueError(f"num_floors must be >= 0, got {num_floors}")
        if self.floors:
            raise ValueError("Floors are already initialized")

        for floor_number in range(1, num_floors + 1):
            floor = Floor(floor_number)
            self.floors.append(floor)
            for spot in floor.spots:
                self.spots[spot.spot_id] = spot

    def display_all_available_spots(self) -> None:
        """모든 층의 빈 주차면 현황 출력"""
        for floor in self.floors:
            floor.display_available_spots()

    def get_spot(self, spot_id: str) -> Optional[ParkingSpot]:
        return self.spots.get(spot_id)

    def get_ticket(self, ticket_id: str) -> Optional[Ticket]:
        return self.tickets.get(ticket_id)

    @property
    def active_ticket_count(self) -> int:
        return len(self.tickets)

    def get_status(self) -> Dict[int, Dict[str, int]]:
        """층별 주차 현황 {floor_number: {total_spots, occupied_spots, available_spots}}"""
        status = {}
        for floor in self.floors:
            available = floor.count_available()
            status[floor.floor_number] = {
                "total_spots": len(floor.spots),
                "occupied_spots": len(floor.spots) - available,
                "available_spots": available,
            }
        return status

    def _next_ticket_id(self) -> str:
        self.ticket_counter += 1
        return f"{TICKET_PREFIX}{self.ticket_counter}"

    def park_vehicle(self, vehicle: Vehicle) -> Optional[Ticket]:
        """
        층 순서대로 호환되는 첫 번째 빈 주차면에 차량을 주차합니다.

        Args:
            vehicle: 입차하는 차량

        Returns:
            Optional[Ticket]: 발급된 티켓, 빈 주차면이 없으면 None
        """
        now = self.clock()
        for floor in self.floors:
            spot = floor.find_available_spot(vehicle.vehicle_type)
            if spot is None:
                continue

            spot.assign_vehicle(vehicle)
            ticket = Ticket(
                ticket_id=self._next_ticket_id(),
                vehicle=vehicle,
                spot_id=spot.spot_id,
                entry_time=now
            )
            self.tickets[ticket.ticket_id] = ticket
            self._log(now, "park_success", vehicle, ticket_id=ticket.ticket_id,
                      floor=floor.floor_number, spot_id=spot.spot_id)
            return ticket

        self._log(now, "park_fail", vehicle)
        return None

    def calculate_fee(self, ticket: Ticket, exit_time: Optional[datetime] = None) -> int:
        """티켓의 현재(또는 exit_time 기준) 주차 요금"""
        exit_time = exit_time if exit_time is not None else self.clock()
        return calculate_fee(ticket.entry_time, exit_time, self.hourly_rate)

    def checkout(self, ticket_id: str) -> int:
        """
        티켓으로 출차 처리하고 요금을 반환합니다.

        Args:
            ticket_id: 티켓 ID

        Returns:
            int: 주차 요금 (경과 시간 내림 x 시간당 요금)

        Raises:
            TicketNotFoundError: 발급되지 않았거나 이미 정산된 티켓
        """
        now = self.clock()
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            self._log(now, "unpark_fail", None, ticket_id=ticket_id)
            raise TicketNotFoundError(ticket_id)

        spot = self.spots[ticket.spot_id]
        spot.remove_vehicle()

        fee = self.calculate_fee(ticket, now)
        del self.tickets[ticket_id]

        self._log(now, "unpark", ticket.vehicle, ticket_id=ticket_id,
                  floor=int(ticket.spot_id[:-1]), spot_id=ticket.spot_id, fee=fee,
                  parking_duration=(now - ticket.entry_time).total_seconds())
        return fee

    def unpark_vehicle(self, ticket_id: str) -> int:
        """
        티켓으로 출차 처리하고 요금을 반환합니다.

        Returns:
            int: 주차 요금, 티켓이 없으면 FEE_NOT_FOUND (-1)
        """
        try:
            return self.checkout(ticket_id)
        except TicketNotFoundError:
            return FEE_NOT_FOUND

    def _log(self, now: datetime, event: str, vehicle: Optional[Vehicle], **fields) -> None:
        if self.logger is None:
            return
        self.logger.log_event(
            timestamp=now,
            event=event,
            license_plate=vehicle.license_plate if vehicle else None,
            vehicle_type=vehicle.vehicle_type.value if vehicle else None,
            **fields
        )
