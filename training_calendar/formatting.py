"""
Training Calendar · Formatting
Locale tables and display strings for workouts and samples.

Locales are keyed by a short code ("ru", "en"); unknown codes fall back to
DEFAULT_LOCALE.
"""

from datetime import date, datetime, tzinfo
from typing import Optional

from .models import ActivityType

DEFAULT_LOCALE = "ru"

WEEKDAYS_SHORT = {
    "ru": ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"],
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
}

# Standalone (nominative) month names, as used in a calendar title
MONTHS = {
    "ru": [
        "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
        "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

ACTIVITY_NAMES = {
    "ru": {
        ActivityType.WALKING_RUNNING: "Бег/Ходьба",
        ActivityType.YOGA: "Йога",
        ActivityType.WATER: "Вода",
        ActivityType.CYCLING: "Велоспорт",
        ActivityType.STRENGTH: "Силовые",
    },
    "en": {
        ActivityType.WALKING_RUNNING: "Walking/Running",
        ActivityType.YOGA: "Yoga",
        ActivityType.WATER: "Water",
        ActivityType.CYCLING: "Cycling",
        ActivityType.STRENGTH: "Strength",
    },
}

UNITS = {
    "ru": {"km": "км", "m": "м", "min": "мин", "h": "ч", "kmh": "км/ч"},
    "en": {"km": "km", "m": "m", "min": "min", "h": "h", "kmh": "km/h"},
}


def _locale(locale: Optional[str]) -> str:
    return locale if locale in WEEKDAYS_SHORT else DEFAULT_LOCALE


# ── Calendar labels ───────────────────────────────────────────────────────────

def weekday_headers(locale: Optional[str] = None, first_weekday: int = 0) -> list[str]:
    names = WEEKDAYS_SHORT[_locale(locale)]
    return names[first_weekday:] + names[:first_weekday]


def weekday_name(day: date, locale: Optional[str] = None) -> str:
    return WEEKDAYS_SHORT[_locale(locale)][day.weekday()]


def month_title(reference: date, locale: Optional[str] = None) -> str:
    """e.g. "Ноябрь 2025"."""
    return f"{MONTHS[_locale(locale)][reference.month - 1]} {reference.year}"


def activity_name(activity: ActivityType, locale: Optional[str] = None) -> str:
    return ACTIVITY_NAMES[_locale(locale)][activity]


# ── Workout summary values ────────────────────────────────────────────────────

def format_distance(meters: float, locale: Optional[str] = None) -> str:
    """Kilometres to one decimal; "0 км" for a workout without distance."""
    unit = UNITS[_locale(locale)]["km"]
    if meters == 0:
        return f"0 {unit}"
    return f"{meters / 1000:.1f} {unit}"


def format_duration(seconds: float, locale: Optional[str] = None) -> str:
    """"1ч 10мин" when an hour or more, otherwise "45 мин"."""
    units = UNITS[_locale(locale)]
    total = int(seconds)
    hours, minutes = total // 3600, (total % 3600) // 60
    if hours > 0:
        return f"{hours}{units['h']} {minutes}{units['min']}"
    return f"{minutes} {units['min']}"


def format_temperature(celsius: float) -> str:
    return f"{celsius:.1f}°C"


def format_humidity(percent: float) -> str:
    return f"{percent:.0f}%"


def format_time_of_day(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    return dt.astimezone(tz).strftime("%H:%M")


# ── Sample values ─────────────────────────────────────────────────────────────

def format_sample_time(minutes: int, locale: Optional[str] = None) -> str:
    """Offset from the workout start: "1:05" past the hour, "5 мин" before it."""
    hours, rest = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}:{rest:02d}"
    return f"{rest} {UNITS[_locale(locale)]['min']}"


def format_speed(kmh: float, locale: Optional[str] = None) -> str:
    return f"{kmh:.1f} {UNITS[_locale(locale)]['kmh']}"


def format_meters(meters: float, locale: Optional[str] = None) -> str:
    return f"{meters:.0f} {UNITS[_locale(locale)]['m']}"


def format_elevation(meters: float, locale: Optional[str] = None) -> str:
    return f"{meters:.1f} {UNITS[_locale(locale)]['m']}"
