"""
주차장 입출차 이벤트를 기록하고 분석하는 로깅 시스템입니다.
"""
from typing import List, Dict, Any, Optional
from datetime import datetime
import platform
import json
import os
import time
import csv

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib as mpl

# 한글 폰트 설정
if platform.system() == 'Windows':
    plt.rcParams['font.family'] = 'Malgun Gothic'  # 윈도우 한글 폰트
elif platform.system() == 'Darwin':  # macOS
    plt.rcParams['font.family'] = 'AppleGothic'    # 맥OS 한글 폰트
else:  # Linux
    plt.rcParams['font.family'] = 'NanumGothic'    # 리눅스 한글 폰트

mpl.rcParams['axes.unicode_minus'] = False   # 마이너스 기호 깨짐 방지

# 로그 엔트리 타입 정의
LogEntry = Dict[str, Any]

LOG_COLUMNS = [
    'time', 'timestamp', 'event', 'ticket_id', 'license_plate', 'vehicle_type',
    'floor', 'spot_id', 'fee', 'parking_duration'
]


class SimulationLogger:
    """입출차 이벤트를 기록하고 분석하는 클래스"""

    def __init__(self, log_file: Optional[str] = None, stats_file: Optional[str] = None,
                 start_time: Optional[datetime] = None):
        """
        로거를 초기화합니다.

        Args:
            log_file: 로그 CSV 파일 경로 (None이면 메모리에만 기록)
            stats_file: 통계 JSON 파일 경로
            start_time: 경과 시간(time 컬럼)의 기준 시각 (None이면 첫 이벤트 시각)
        """
        self.log_file = log_file
        self.stats_file = stats_file
        self.start_time = start_time

        # 로그 리스트 초기화
        self.log: List[LogEntry] = []

        # 로그 파일 초기화
        if self.log_file:
            with open(self.log_file, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(LOG_COLUMNS)

        # 통계 초기화
        self.stats = {
            "total_entries": 0,
            "successful_parks": 0,
            "failed_parks": 0,
            "total_exits": 0,
            "failed_exits": 0,
            "total_revenue": 0,
            "daily_park_fails": {}  # 일자별 park_fail 통계
        }

    def log_event(self, timestamp: datetime, event: str, ticket_id: str = None,
                  license_plate: str = None, vehicle_type: str = None,
                  floor: int = None, spot_id: str = None, fee: int = None,
                  parking_duration: float = None) -> None:
        """
        이벤트를 로그에 추가합니다.

        Args:
            timestamp: 이벤트 발생 시각
            event: 이벤트 유형 (park_success, park_fail, unpark, unpark_fail)
            ticket_id: 티켓 ID
            license_plate: 차량 번호판
            vehicle_type: 차종 ("CAR", "BIKE", "TRUCK")
            floor: 층 번호
            spot_id: 주차면 ID
            fee: 출차 요금
            parking_duration: 주차 시간 (초)
        """
        if self.start_time is None:
            self.start_time = timestamp
        elapsed = (timestamp - self.start_time).total_seconds()

        event_data: LogEntry = {
            'time': elapsed,
            'timestamp': timestamp.isoformat(),
            'event': event,
            'ticket_id': ticket_id,
            'license_plate': license_plate,
            'vehicle_type': vehicle_type,
            'floor': floor,
            'spot_id': spot_id,
            'fee': fee,
            'parking_duration': parking_duration
        }
        self.log.append(event_data)

        # CSV 파일에 기록
        if self.log_file:
            with open(self.log_file, 'a', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow([event_data[column] for column in LOG_COLUMNS])

        self.update_stats(event, elapsed, fee)

    def update_stats(self, event: str, elapsed: float = 0, fee: Optional[int] = None) -> None:
        """
        통계 정보를 업데이트합니다.

        Args:
            event: 이벤트 유형
            elapsed: 기준 시각부터의 경과 시간 (초)
            fee: 출차 요금
        """
        if event in ("park_success", "park_fail"):
            self.stats["total_entries"] += 1

        if event == "park_success":
            self.stats["successful_parks"] += 1
        elif event == "park_fail":
            self.stats["failed_parks"] += 1
            day = int(elapsed // 86400)  # 일자 계산 (86400초 = 24시간)
            self.stats["daily_park_fails"][day] = self.stats["daily_park_fails"].get(day, 0) + 1
        elif event == "unpark":
            self.stats["total_exits"] += 1
            self.stats["total_revenue"] += fee or 0
        elif event == "unpark_fail":
            self.stats["failed_exits"] += 1

    def get_dataframe(self) -> pd.DataFrame:
        """로그를 판다스 DataFrame으로 변환해 반환합니다."""
        return pd.DataFrame(self.log, columns=LOG_COLUMNS)

    def save_to_csv(self, filename: Optional[str] = None) -> str:
        """로그 데이터를 CSV 파일로 저장"""
        if filename is None:
            filename = f"parking_log_{int(time.time())}.csv"
        df = self.get_dataframe()
        df.to_csv(filename, index=False)
        return filename

    def calculate_parking_fail_rate(self) -> float:
        """
        주차 실패율 계산 (입차 시도 대비 실패 비율)

        Returns:
            실패율(0~1)
        """
        df = self.get_dataframe()
        total_attempts = df[df.event.isin(["park_success", "park_fail"])].shape[0]
        fail_count = df[df.event == "park_fail"].shape[0]
        if total_attempts == 0:
            return 0.0
        return fail_count / total_attempts

    def calculate_total_revenue(self) -> int:
        """출차 요금 합계"""
        df = self.get_dataframe()
        unparks = df[df.event == "unpark"]
        if unparks.empty:
            return 0
        return int(unparks.fee.sum())

    def calculate_revenue_by_type(self) -> Dict[str, int]:
        """차종별 출차 요금 합계"""
        df = self.get_dataframe()
        unparks = df[df.event == "unpark"]
        return {vtype: int(total) for vtype, total in unparks.groupby("vehicle_type").fee.sum().items()}

    def print_summary(self) -> None:
        """입출차 결과 요약을 출력합니다."""
        df = self.get_dataframe()

        print("=== 주차장 요약 ===")
        print(f"총 이벤트 수: {len(df)}")
        if df.empty:
            return

        print("\n이벤트 유형별 분포:")
        print(df.groupby("event").size())

        print("\n차종별 입차 성공:")
        print(df[df.event == "park_success"].groupby("vehicle_type").size())

        print(f"\n주차 실패율: {self.calculate_parking_fail_rate() * 100:.2f}%")
        print(f"총 요금 수입: ${self.calculate_total_revenue()}")

        unparks = df[df.event == "unpark"]
        if not unparks.empty:
            print(f"평균 주차 시간: {unparks.parking_duration.mean() / 3600:.2f}시간")

    def generate_plots(self, results_dir: str) -> None:
        """입출차 결과를 그래프로 시각화"""
        df = self.get_dataframe()
        os.makedirs(results_dir, exist_ok=True)

        # 1. 시간대별 주차장 점유 대수
        self._plot_parking_occupancy(df, results_dir)

        # 2. 시간대별 주차 성공/실패
        self._plot_parking_attempts(df, results_dir)

        # 3. 시간대별 요금 수입
        self._plot_hourly_revenue(df, results_dir)

    def _plot_parking_occupancy(self, df: pd.DataFrame, results_dir: str) -> None:
        """시간대별 주차장 점유 대수 그래프"""
        park_events = df[df.event.isin(["park_success", "unpark"])].copy()

        # 입차 +1, 출차 -1 을 누적하여 현재 점유 대수 계산
        park_events["delta"] = park_events["event"].map({"park_success": 1, "unpark": -1})
        park_events["hour"] = park_events["time"] // 3600
        park_events = park_events.sort_values("time")
        park_events["current"] = park_events["delta"].cumsum()
        hourly = park_events.groupby("hour")["current"].last()

        plt.figure(figsize=(12, 6))
        plt.plot(hourly.index, hourly.values, marker="o")
        plt.title("시간대별 주차 중인 차량 수")
        plt.xlabel("시간")
        plt.ylabel("주차 중인 차량 수")
        plt.grid(True)

        plt.savefig(os.path.join(results_dir, "parking_occupancy.png"))
        plt.close()

    def _plot_parking_attempts(self, df: pd.DataFrame, results_dir: str) -> None:
        """시간대별 주차 성공/실패 그래프"""
        park_events = df[df.event.isin(["park_success", "park_fail"])].copy()
        park_events["hour"] = park_events["time"] // 3600

        hourly_stats = park_events.groupby(["hour", "event"]).size().unstack(fill_value=0)

        plt.figure(figsize=(12, 6))
        if "park_success" in hourly_stats.columns:
            plt.plot(hourly_stats.index, hourly_stats["park_success"], marker="o", label="주차 성공")
        if "park_fail" in hourly_stats.columns:
            plt.plot(hourly_stats.index, hourly_stats["park_fail"], marker="x", label="주차 실패")
        plt.title("시간대별 주차 성공/실패")
        plt.xlabel("시간")
        plt.ylabel("횟수")
        plt.legend()
        plt.grid(True)

        plt.savefig(os.path.join(results_dir, "parking_attempts.png"))
        plt.close()

    def _plot_hourly_revenue(self, df: pd.DataFrame, results_dir: str) -> None:
        """시간대별 요금 수입 그래프"""
        unparks = df[df.event == "unpark"].copy()
        unparks["hour"] = unparks["time"] // 3600
        hourly_revenue = unparks.groupby("hour")["fee"].sum()

        plt.figure(figsize=(12, 6))
        plt.bar(hourly_revenue.index, hourly_revenue.values)
        plt.title("시간대별 요금 수입")
        plt.xlabel("시간")
        plt.ylabel("요금 ($)")
        plt.grid(True, axis="y")

        plt.savefig(os.path.join(results_dir, "hourly_revenue.png"))
        plt.close()

    def save_stats(self) -> None:
        """통계 정보를 JSON 파일로 저장"""
        if not self.stats_file:
            return
        with open(self.stats_file, 'w', encoding='utf-8') as f:
            json.dump(self.stats, f, ensure_ascii=False, indent=2)

        # 일자별 park_fail 통계 출력
        print("\n=== 일자별 Park Fail 통계 ===")
        for day, count in sorted(self.stats["daily_park_fails"].items()):
            print(f"Day {day}: {count}회")
        print("==========================\n")
