"""
Radar plot 상수 정의
"""

# 수치 허용오차 (line/circle intersection, zero-speed 판정)
EPSILON = 1e-12

# Turn side (STARBOARD = clockwise)
STARBOARD = 1.0
PORT = -1.0

# Target tracking
NR_TARGETS = 5
TARGET_LETTERS = ('B', 'C', 'D', 'E', 'F')

MINUTES_PER_HOUR = 60.0
MINUTES_PER_DAY = 1440

MAX_SPEED_KNOTS = 100.0
MIN_OBSERVATION_INTERVAL = 1.0  # minutes
