"""
Domain models and value objects.

Contains serializable records built on top of the core math types.
"""

from src.core.domain.bigint_literal import (
    BIGINT_LITERAL_SCHEMA_VERSION,
    CANONICAL_DECIMAL_PATTERN,
    BigIntLiteral,
)

__all__ = [
    "BIGINT_LITERAL_SCHEMA_VERSION",
    "CANONICAL_DECIMAL_PATTERN",
    "BigIntLiteral",
]
