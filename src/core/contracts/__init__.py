"""
Contract Validation Module

Модуль для валидации JSON контрактов.
"""

from .validators import (
    BigIntLiteralValidator,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_bigint_literal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntLiteralValidator",
    # Functions
    "get_schema_loader",
    "validate_bigint_literal",
]
