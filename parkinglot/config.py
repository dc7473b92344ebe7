"""
주차장 시뮬레이터의 모든 상수 및 구성 값을 관리하는 모듈입니다.
"""
import string
from typing import Dict

# 주차장 기본 설정
NUM_FLOORS = 3                          # 층 수
SPOT_LETTERS = string.ascii_uppercase   # 층별 주차면 문자 (A~Z)
SPOTS_PER_FLOOR = len(SPOT_LETTERS)     # 층별 주차면 수 (26)
TOTAL_PARKING_SPOTS = NUM_FLOORS * SPOTS_PER_FLOOR

# 요금 설정
HOURLY_RATE = 10            # 시간당 요금 ($)
SECONDS_PER_HOUR = 3600

# 티켓 설정
TICKET_PREFIX = "T"         # 티켓 ID 접두사 (T1, T2, ...)
FEE_NOT_FOUND = -1          # 존재하지 않는 티켓 출차 시 반환값

# 데모 시나리오 설정
DEMO_LICENSE_PLATE = "ABC123"
DEMO_VEHICLE_TYPE = "CAR"

# 시뮬레이션 기본 설정
SEED = 422                  # 난수 생성기 시드
SIM_TIME = 86_400           # 24시간 (초 단위)
NUM_VEHICLES = 120          # 생성할 차량 수

# 도착 간격 설정
ARRIVAL_MEAN = 8.0              # 평균 도착 간격 (분)
MIN_ARRIVAL_INTERVAL = 60       # 최소 도착 간격 (1분)
MAX_ARRIVAL_INTERVAL = 60 * 60  # 최대 도착 간격 (1시간)

# 주차 시간 감마 분포 파라미터 (분 단위)
PARKING_DURATION_SHAPE = 1.8
PARKING_DURATION_SCALE = 75.0
MIN_PARKING_DURATION = 5 * 60       # 최소 주차 시간 (5분)
MAX_PARKING_DURATION = 12 * 3600    # 최대 주차 시간 (12시간)

# 차종 구성 비율
VEHICLE_MIX: Dict[str, float] = {
    "CAR": 0.6,
    "BIKE": 0.25,
    "TRUCK": 0.15,
}
