"""
deepcmp - Structural difference reports for test assertions

Compares two values of arbitrary, possibly nested type and returns a
path-qualified list of where they diverge instead of a bare "not equal".
Recursion depth and report size are capped by configuration.
"""

from .engine import (
    Comparator,
    equal,
    compare,
    report,
    assert_equal,
)
from .config import (
    configure,
    get_config,
    reset_config,
    load_config,
)
from .models import (
    CompareConfig,
    DiffReport,
    Kind,
    Anomaly,
)
from .exceptions import (
    DeepCmpError,
    ConfigError,
    FixtureError,
    DiffAssertionError,
)
from .runner import (
    FixtureRunner,
    ScenarioResult,
    GlobalReport,
    run_fixtures,
)

__version__ = "1.0.0"
__all__ = [
    # Comparison
    "Comparator",
    "equal",
    "compare",
    "report",
    "assert_equal",
    # Configuration
    "CompareConfig",
    "configure",
    "get_config",
    "reset_config",
    "load_config",
    # Reports
    "DiffReport",
    "Kind",
    "Anomaly",
    # Errors
    "DeepCmpError",
    "ConfigError",
    "FixtureError",
    "DiffAssertionError",
    # Fixture Runner
    "FixtureRunner",
    "ScenarioResult",
    "GlobalReport",
    "run_fixtures",
]
