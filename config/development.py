import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Emulate network latency in the repositories (seconds are scaled by LATENCY_SCALE).
SIMULATE_LATENCY = bool(int(os.getenv("SIMULATE_LATENCY", "1")))
LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", "1.0"))

# Load the demo roster, citations and login accounts on startup.
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# "noop" keeps citations untouched on reject; "decrement" lowers the confirmed count.
REJECT_ATTENDANCE_POLICY = os.getenv("REJECT_ATTENDANCE_POLICY", "noop")

NEW_PERSONNEL_WINDOW_DAYS = int(os.getenv("NEW_PERSONNEL_WINDOW_DAYS", "30"))
