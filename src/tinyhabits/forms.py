"""Input validation for habit and registration payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import BaseConfig
from .errors import InvalidArgument


class HabitForm(BaseModel):
    """Validated title and color for a new habit."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        min_length=BaseConfig.TITLE_MIN_LENGTH,
        max_length=BaseConfig.TITLE_MAX_LENGTH,
        description="Short label for the habit",
    )
    color: Optional[str] = Field(
        default=None,
        max_length=BaseConfig.COLOR_MAX_LENGTH,
        description="Optional free-form color tag",
    )

    @field_validator("color")
    @classmethod
    def blank_color_is_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty color tag as no color."""

        return value or None

    @classmethod
    def parse(cls, title: str, color: Optional[str] = None) -> "HabitForm":
        """Validate a payload, raising ``InvalidArgument`` on the first error."""

        try:
            return cls.model_validate({"title": title, "color": color})
        except ValidationError as exc:
            raise _as_invalid_argument(exc) from exc


class EmailForm(BaseModel):
    """Normalized email for identity lookups."""

    model_config = ConfigDict(str_strip_whitespace=True, str_to_lower=True)

    email: str = Field(min_length=1, max_length=BaseConfig.EMAIL_MAX_LENGTH)

    @classmethod
    def parse(cls, email: str) -> "EmailForm":
        try:
            return cls.model_validate({"email": email})
        except ValidationError as exc:
            raise _as_invalid_argument(exc) from exc


def _as_invalid_argument(exc: ValidationError) -> InvalidArgument:
    error = exc.errors(include_url=False)[0]
    loc = error.get("loc", ())
    field = str(loc[0]) if loc else None
    message = error.get("msg", "Invalid value")
    return InvalidArgument(f"{field}: {message}" if field else message, field=field)


def parse_calendar_date(value: date | str | None, *, default: Optional[date] = None) -> date:
    """Return a calendar date from a ``YYYY-MM-DD`` string or a date.

    ``None`` and blank strings resolve to ``default``; a missing default is an
    error.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not value.strip():
        if default is None:
            raise InvalidArgument("A date is required", field="date")
        return default
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidArgument(f"Invalid date {value!r}; expected YYYY-MM-DD", field="date") from exc


def format_calendar_date(day: date) -> str:
    """Render a date in the canonical ``YYYY-MM-DD`` form."""

    return day.isoformat()


__all__ = ["EmailForm", "HabitForm", "format_calendar_date", "parse_calendar_date"]
