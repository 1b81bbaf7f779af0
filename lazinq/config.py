import os
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

SORT_ALGORITHMS = ('stable', 'partition')
ENV_SORT_ALGORITHM = 'LAZINQ_SORT_ALGORITHM'


@dataclass(frozen=True)
class QueryConfig:
    """runtime options for query evaluation"""
    sort_algorithm: str = 'stable'  # stable, partition

    def __post_init__(self):
        if self.sort_algorithm not in SORT_ALGORITHMS:
            raise ValueError(
                f"unknown sort_algorithm '{self.sort_algorithm}', expected one of {SORT_ALGORITHMS}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'QueryConfig':
        """build a config from LAZINQ_* environment variables, falling back to defaults"""
        env = os.environ if environ is None else environ
        algorithm = env.get(ENV_SORT_ALGORITHM)
        if algorithm is None:
            return cls()
        return cls(sort_algorithm=algorithm.strip().lower())


_active = QueryConfig.from_env()


def get_config() -> QueryConfig:
    return _active


def configure(**overrides) -> QueryConfig:
    """replace the active config with a copy carrying the given overrides."""
    global _active
    _active = replace(_active, **overrides)
    logger.debug(f"query config updated: {_active}")
    return _active
