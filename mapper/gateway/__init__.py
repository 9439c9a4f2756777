"""Persistence gateways for workspace graphs."""

from mapper.gateway.base import PersistenceGateway, PersistError, SaveResult
from mapper.gateway.http import HttpGateway
from mapper.gateway.memory import MemoryGateway

__all__ = [
    "HttpGateway",
    "MemoryGateway",
    "PersistenceGateway",
    "PersistError",
    "SaveResult",
]
