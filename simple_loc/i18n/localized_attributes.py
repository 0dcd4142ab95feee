"""
Localized model attributes.

Each localized field is declared with its kind; the formatter/parser pair is
picked when the mapping is built:

    user_fields = LocalizedAttributes({"born_on": "date", "balance": ("decimal", 2)})

    user_fields.localize(user, "balance")            # => "1.234,50" (de)
    user_fields.assign(user, "balance", "1.234,50")  # user.balance == Decimal("1234.50")

Formats are read from the active locale:

    date:   {formats: {attributes: "%d.%m.%Y"}}
    time:   {formats: {attributes: "%d.%m.%Y %H:%M"}}
    number: {format: {separator: ",", delimiter: ".", precision: 3}}
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from simple_loc.i18n.language import Language, get_language_facade

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DEFAULT_SEPARATOR = "."
DEFAULT_DELIMITER = ","
DEFAULT_PRECISION = 3


class FieldKind(str, Enum):
    """Attribute types with a localized representation"""
    DATE = "date"
    DATETIME = "datetime"
    FLOAT = "float"
    INTEGER = "integer"
    DECIMAL = "decimal"
    TEXT = "text"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _entry(language: Language, *keys: str, default: Any) -> Any:
    value = language.entry(*keys)
    return default if value is None else value


def number_format(language: Language) -> Tuple[str, str]:
    separator = str(_entry(language, "number", "format", "separator", default=DEFAULT_SEPARATOR))
    delimiter = str(_entry(language, "number", "format", "delimiter", default=DEFAULT_DELIMITER))
    return separator, delimiter


def format_number(number: Any, precision: int, *, separator: str, delimiter: str) -> str:
    """Render ``number`` with ``precision`` decimals and locale separators."""
    text = f"{Decimal(str(number)):,.{precision}f}"
    return text.replace(",", "\0").replace(".", separator).replace("\0", delimiter)


def parse_number(text: str, *, separator: str, delimiter: str) -> Decimal:
    raw = str(text).strip()
    if delimiter:
        raw = raw.replace(delimiter, "")
    if separator and separator != ".":
        raw = raw.replace(separator, ".")
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"Invalid localized number: {text!r}") from e


@dataclass(frozen=True)
class FieldLocalizer:
    """Formatter/parser pair for one field"""
    kind: FieldKind
    formatter: Callable[[Language, Any], Optional[str]]
    parser: Callable[[Language, str], Any]


def _date_localizer() -> FieldLocalizer:
    def _format(language: Language, value: Any) -> Optional[str]:
        fmt = _entry(language, "date", "formats", "attributes", default=DEFAULT_DATE_FORMAT)
        return value.strftime(fmt)

    def _parse(language: Language, text: str) -> date:
        fmt = _entry(language, "date", "formats", "attributes", default=DEFAULT_DATE_FORMAT)
        return datetime.strptime(text.strip(), fmt).date()

    return FieldLocalizer(FieldKind.DATE, _format, _parse)


def _datetime_localizer() -> FieldLocalizer:
    def _format(language: Language, value: Any) -> Optional[str]:
        fmt = _entry(language, "time", "formats", "attributes", default=DEFAULT_DATETIME_FORMAT)
        return value.strftime(fmt)

    def _parse(language: Language, text: str) -> datetime:
        fmt = _entry(language, "time", "formats", "attributes", default=DEFAULT_DATETIME_FORMAT)
        return datetime.strptime(text.strip(), fmt)

    return FieldLocalizer(FieldKind.DATETIME, _format, _parse)


def _number_localizer(kind: FieldKind, precision: Optional[int], cast: Callable[[Decimal], Any]) -> FieldLocalizer:
    def _format(language: Language, value: Any) -> Optional[str]:
        separator, delimiter = number_format(language)
        digits = precision
        if digits is None:
            digits = int(_entry(language, "number", "format", "precision", default=DEFAULT_PRECISION))
        return format_number(value, digits, separator=separator, delimiter=delimiter)

    def _parse(language: Language, text: str) -> Any:
        separator, delimiter = number_format(language)
        return cast(parse_number(text, separator=separator, delimiter=delimiter))

    return FieldLocalizer(kind, _format, _parse)


def _text_localizer() -> FieldLocalizer:
    return FieldLocalizer(FieldKind.TEXT, lambda language, value: value, lambda language, text: text)


def build_localizer(kind: Union[FieldKind, str], scale: Optional[int] = None) -> FieldLocalizer:
    kind = FieldKind(kind)
    if kind is FieldKind.DATE:
        return _date_localizer()
    if kind is FieldKind.DATETIME:
        return _datetime_localizer()
    if kind is FieldKind.INTEGER:
        return _number_localizer(kind, 0, int)
    if kind is FieldKind.FLOAT:
        return _number_localizer(kind, scale, float)
    if kind is FieldKind.DECIMAL:
        return _number_localizer(kind, scale, lambda d: d)
    return _text_localizer()


FieldSpec = Union[FieldKind, str, Tuple[Union[FieldKind, str], int], FieldLocalizer]


class LocalizedAttributes:
    """Explicit field-name -> localizer mapping for one model class."""

    def __init__(self, fields: Mapping[str, FieldSpec], *, language: Optional[Language] = None) -> None:
        self._language = language
        self.fields: Dict[str, FieldLocalizer] = {}
        for name, spec in fields.items():
            if isinstance(spec, FieldLocalizer):
                self.fields[name] = spec
            elif isinstance(spec, tuple):
                kind, scale = spec
                self.fields[name] = build_localizer(kind, scale)
            else:
                self.fields[name] = build_localizer(spec)

    @property
    def language(self) -> Language:
        return self._language or get_language_facade()

    def _localizer(self, field: str) -> FieldLocalizer:
        try:
            return self.fields[field]
        except KeyError:
            raise KeyError(f"Field {field!r} is not localized") from None

    def localize(self, obj: Any, field: str) -> Any:
        """Localized text of ``obj.<field>``; None for blank values."""
        localizer = self._localizer(field)
        value = getattr(obj, field)
        if _is_blank(value):
            return None
        return localizer.formatter(self.language, value)

    def parse(self, field: str, text: Any) -> Any:
        localizer = self._localizer(field)
        if _is_blank(text):
            return None
        if not isinstance(text, str):
            return text
        return localizer.parser(self.language, text)

    def assign(self, obj: Any, field: str, text: Any) -> None:
        setattr(obj, field, self.parse(field, text))
