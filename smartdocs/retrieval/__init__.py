from smartdocs.retrieval.base import BaseRetrievalEngine
from smartdocs.retrieval.factory import RetrievalEngineFactory
from smartdocs.retrieval.query_validator import validate_query
from smartdocs.retrieval.selected import SelectedRetrievalEngine

__all__ = [
    "BaseRetrievalEngine",
    "RetrievalEngineFactory",
    "SelectedRetrievalEngine",
    "validate_query",
]
