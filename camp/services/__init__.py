"""
Service layer.

- ranking_engine: pure aggregation and ordering of recorded attempts
- results_service: wires the catalog/store collaborators to the engine
- presenter: display labels for rankings
"""

from .ranking_engine import MeasurementRecord, AggregateResult, compute_ranking
from .results_service import ResultsService, SqlDisciplineCatalog, SqlMeasurementStore
from .presenter import present_results

__all__ = [
    "MeasurementRecord",
    "AggregateResult",
    "compute_ranking",
    "ResultsService",
    "SqlDisciplineCatalog",
    "SqlMeasurementStore",
    "present_results",
]
