"""
Graph configuration.

Graph behaviour that is not part of the abstract contract is configured at
construction time through a GraphConfig instance. At present this covers a
single switch: whether each representation re-checks its internal invariants
after every mutating operation.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

CHECK_INVARIANTS_ENV = "WEIGHTED_GRAPH_CHECK_INVARIANTS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GraphConfig:
    """
    Construction-time settings shared by every graph representation.

    Attributes:
        check_invariants (bool): Re-check the representation invariants after
            each mutation. Defaults to ``__debug__`` so the checks run in a
            normal interpreter and are skipped under ``python -O``.
    """

    check_invariants: bool = __debug__

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GraphConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ (Optional[Mapping[str, str]]): Mapping to read from.
                Defaults to ``os.environ``.

        Returns:
            GraphConfig: Configuration with any overrides applied

        Raises:
            ConfigurationError: If a variable holds an unrecognised value
        """
        environ = os.environ if environ is None else environ
        raw = environ.get(CHECK_INVARIANTS_ENV)
        if raw is None or not raw.strip():
            return cls()

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return cls(check_invariants=True)
        if value in _FALSE_VALUES:
            return cls(check_invariants=False)
        raise ConfigurationError(
            f"{CHECK_INVARIANTS_ENV} must be one of "
            f"{sorted(_TRUE_VALUES | _FALSE_VALUES)}, got '{raw}'"
        )
