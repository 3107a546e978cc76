"""
Decimal Text — парсинг и форматирование десятичных литералов

Текстовый wire format — единственный "протокол" BigInt:
    ["+" | "-"] digit+        (вход)
    ["-"] digit+              (канонический выход)

Правила:
- Ведущие нули на входе допускаются и удаляются, на выходе не появляются
- "-000" → ноль со знаком +1 (отрицательного нуля не существует)
- '+' никогда не выводится
- Строгий парсинг (конструктор) → InvalidFormatError
- Потоковое чтение (read_decimal) → ExtractionResult(ok=False), без exception
"""

import logging
from typing import Final, NamedTuple, Optional, TextIO, Tuple

from src.core.math.digits import ZERO_DIGITS, is_zero_digits

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DECIMAL_DIGITS: Final[str] = "0123456789"
SIGN_CHARS: Final[str] = "+-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatError(ValueError):
    """
    Текст не соответствует грамматике [+-]?[0-9]+.

    Возникает только при создании значения, никогда при использовании.
    """
    pass


# =============================================================================
# RESULT
# =============================================================================


class ExtractionResult(NamedTuple):
    """
    Результат потокового чтения литерала: value = (sign, magnitude).

    При ok=False значение не определено (value=None), вызывающий обязан
    проверить ok перед использованием.
    """

    ok: bool
    value: Optional[Tuple[int, str]]
    token: str


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_decimal_string(text: str) -> bool:
    """
    Проверка грамматики [+-]?[0-9]+.

    Examples:
        >>> is_decimal_string("-0012")
        True
        >>> is_decimal_string("+")
        False
        >>> is_decimal_string("1 2")
        False
    """
    if not text:
        return False
    body = text[1:] if text[0] in SIGN_CHARS else text
    if not body:
        return False
    return all(ch in DECIMAL_DIGITS for ch in body)


# =============================================================================
# ПАРСИНГ
# =============================================================================


def _split_token(token: str) -> Optional[Tuple[int, str]]:
    """Разбор токена в (sign, magnitude) или None при несоответствии грамматике."""
    if not is_decimal_string(token):
        return None

    sign = 1
    body = token
    if body[0] == "-":
        sign = -1
        body = body[1:]
    elif body[0] == "+":
        body = body[1:]

    magnitude = body.lstrip("0")
    if not magnitude:
        # все цифры были нулями: канонический ноль
        return 1, ZERO_DIGITS
    return sign, magnitude


def parse_decimal(text: str) -> Tuple[int, str]:
    """
    Строгий парсинг десятичного литерала.

    Args:
        text: Литерал вида [+-]?[0-9]+ (без пробелов)

    Returns:
        (sign, magnitude) в нормализованной форме

    Raises:
        InvalidFormatError: пустая строка, знак без цифр, посторонние символы
        TypeError: text не является строкой

    Examples:
        >>> parse_decimal("-000")
        (1, '0')
        >>> parse_decimal("+0042")
        (1, '42')
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal literal must be str, got {type(text).__name__}")

    parsed = _split_token(text)
    if parsed is None:
        logger.debug("rejected decimal literal %r", text)
        raise InvalidFormatError(f"invalid decimal literal: {text!r}")
    return parsed


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(sign: int, magnitude: str) -> str:
    """
    Каноническое текстовое представление.

    '-' только при sign == -1 и ненулевой magnitude, '+' никогда.
    """
    if sign == -1 and not is_zero_digits(magnitude):
        return "-" + magnitude
    return magnitude


# =============================================================================
# ПОТОКОВОЕ ЧТЕНИЕ
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение одного токена, разделённого пробельными символами.

    Ведущие пробелы пропускаются. Пробел после токена остаётся в потоке,
    если поток поддерживает seek (как у C++ `>>`); у non-seekable потоков
    он поглощается. Пустая строка — конец потока.
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    seekable = stream.seekable()
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        position = stream.tell() if seekable else None
        ch = stream.read(1)
        if ch.isspace() and position is not None:
            stream.seek(position)
    return "".join(chars)


def read_decimal(stream: TextIO) -> ExtractionResult:
    """
    Потоковое чтение литерала.

    Returns:
        ExtractionResult с value=(sign, magnitude) при успехе; ok=False для
        пустого токена, одиночного знака или нецифровых символов.
    """
    token = read_token(stream)
    parsed = _split_token(token)
    if parsed is None:
        logger.debug("decimal extraction failed on token %r", token)
        return ExtractionResult(ok=False, value=None, token=token)
    return ExtractionResult(ok=True, value=parsed, token=token)
