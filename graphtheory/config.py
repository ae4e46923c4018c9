"""Configuration classes for graphtheory analyses."""

import logging
from dataclasses import dataclass
from typing import Union


@dataclass
class AnalysisConfig:
    """Defaults shared by the analysis functions and the CLI."""

    # Weight assumed for edges without one (or for every edge of an
    # unweighted graph wherever a weight is required)
    default_weight: Union[int, float] = 1

    # Log a warning when edges reference node ids that were never declared
    warn_on_implicit_nodes: bool = True

    # Log a warning when Dijkstra meets a negative edge weight
    warn_on_negative_weights: bool = True

    # Log level used by the CLI when neither --verbose nor --quiet is given
    default_log_level: int = logging.INFO


# Global configuration instance
ANALYSIS_CONFIG = AnalysisConfig()
