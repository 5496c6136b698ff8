"""
hushrun runs a shell command quietly unless it fails.
"""

__version__ = "0.1.0"

from .config import CompletionBehavior, Configuration
from .exceptions import CommandFailure, ConfigurationError, HushrunError, SpawnError
from .execution import CommandExecutor, ExecutionResult
from .runner import Runner

__all__ = [
    "CommandExecutor",
    "CommandFailure",
    "CompletionBehavior",
    "Configuration",
    "ConfigurationError",
    "ExecutionResult",
    "HushrunError",
    "Runner",
    "SpawnError",
    "__version__",
]
