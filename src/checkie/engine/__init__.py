"""Engine package: evaluation, minimax search and rating configuration.

The Qt worker lives in :mod:`checkie.engine.qt_bridge`.
"""

from checkie.engine.config import KindWeights, RateConfig, load_rate_config
from checkie.engine.evaluate import Evaluator
from checkie.engine.search import IEngine, SearchEngine, SearchResult

__all__ = [
    "Evaluator",
    "IEngine",
    "KindWeights",
    "RateConfig",
    "SearchEngine",
    "SearchResult",
    "load_rate_config",
]
