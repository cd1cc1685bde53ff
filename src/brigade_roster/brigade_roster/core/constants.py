"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_STATUSES = "Todos"
DEFAULT_PERSONNEL_FILTER = "Activo"
DEFAULT_RANK = "Bombero"

NEW_PERSONNEL_WINDOW_DAYS = 30

# Simulated latency, in seconds, per kind of repository operation.
LIST_LATENCY = 0.5
GET_LATENCY = 0.3
MUTATION_LATENCY = 0.5
ATTENDANCE_LATENCY = 0.3
LOGIN_LATENCY = 1.0

PHONE_MIN_DIGITS = 8
PHONE_MAX_DIGITS = 15
PASSWORD_MIN_LENGTH = 4

CURRENT_USER_LABEL = "Usuario Actual"
