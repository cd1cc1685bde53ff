import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SIMULATE_LATENCY = False
LATENCY_SCALE = 0.0

SEED_DEMO_DATA = True

REJECT_ATTENDANCE_POLICY = "noop"

NEW_PERSONNEL_WINDOW_DAYS = 30
