"""Shared FastAPI dependencies."""

from typing import Callable

from vendorlens.ai import create_oracle
from vendorlens.core.interfaces import IOracle

OracleFactory = Callable[[str | None], IOracle]


def get_oracle_factory() -> OracleFactory:
    """Return the callable used to build an oracle for a provider name."""
    return create_oracle
