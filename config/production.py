import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SIMULATE_LATENCY = bool(int(os.getenv("SIMULATE_LATENCY", "0")))
LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", "1.0"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

REJECT_ATTENDANCE_POLICY = os.getenv("REJECT_ATTENDANCE_POLICY", "noop")

NEW_PERSONNEL_WINDOW_DAYS = int(os.getenv("NEW_PERSONNEL_WINDOW_DAYS", "30"))
