"""
BigIntLiteral — JSON-документ с каноническим литералом BigInt

Immutable Pydantic модель.
Полная совместимость с JSON Schema (contracts/schema/bigint_literal.json).
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.bigint import BigInt

# =============================================================================
# CONSTANTS
# =============================================================================

BIGINT_LITERAL_SCHEMA_VERSION = "1"

CANONICAL_DECIMAL_PATTERN = "^-?(0|[1-9][0-9]*)$"


# =============================================================================
# BIGINT LITERAL MODEL
# =============================================================================


class BigIntLiteral(BaseModel):
    """
    Значение BigInt в каноническом текстовом виде.

    Immutable модель (frozen=True). В отличие от конструктора BigInt,
    принимает только каноническую форму: без '+', без ведущих нулей, без "-0".
    """

    schema_version: str = Field(
        default=BIGINT_LITERAL_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    value: str = Field(
        ..., pattern=CANONICAL_DECIMAL_PATTERN, description="Канонический литерал"
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_no_negative_zero(cls, v: str) -> str:
        """Отрицательного нуля не существует."""
        if v == "-0":
            raise ValueError("negative zero is not a canonical literal")
        return v

    @classmethod
    def from_bigint(cls, value: BigInt) -> "BigIntLiteral":
        """Документ для значения."""
        return cls(value=value.to_string())

    def to_bigint(self) -> BigInt:
        """Значение документа."""
        return BigInt(self.value)
