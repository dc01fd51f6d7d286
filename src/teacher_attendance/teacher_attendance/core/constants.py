"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STATE_KEY = "attendanceApp"
PRINT_SETTINGS_KEY = "attendancePrintSettings"

SCHEMA_VERSION = 1

# 0=Sunday .. 6=Saturday
SUNDAY = 0
SATURDAY = 6
DEFAULT_WORK_DAYS = (1, 2, 3, 4, 5)

DEFAULT_CHECK_IN = "07:00"
DEFAULT_CHECK_OUT = "15:00"

DEFAULT_SUBJECT = "Belum diatur"
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/8.x/initials/svg?seed={seed}"

MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Ags", "Sep", "Okt", "Nov", "Des")
