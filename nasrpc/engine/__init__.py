from .client import RpcEngine, StateListener
from .table import CorrelationTable, counter_ids, uuid_ids, id_factory_for

__all__ = [
    "CorrelationTable",
    "RpcEngine",
    "StateListener",
    "counter_ids",
    "id_factory_for",
    "uuid_ids",
]
