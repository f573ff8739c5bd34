"""Constants and defaults.

Note: Payroll conventions are fixed (30-day month, 8-hour day) and are not
derived from the calendar.
"""

PAYROLL_DAYS_PER_MONTH = 30
PAYROLL_HOURS_PER_DAY = 8
HALF_DAY_WEIGHT = 0.5

WEEKDAY_OVERTIME_MULTIPLIER = 1.5
WEEKEND_OVERTIME_MULTIPLIER = 2.0
HOLIDAY_OVERTIME_MULTIPLIER = 2.0

DATE_FORMAT = "%Y-%m-%d"
CLOCK_FORMAT = "%H:%M"
PERIOD_FORMAT = "%Y-%m"

# Fixed epoch date used to place HH:MM clock times on a timeline.
CLOCK_EPOCH = "1970-01-01"
