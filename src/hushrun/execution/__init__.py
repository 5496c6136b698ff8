"""
Command execution package.
"""

from .executor import CommandExecutor, ExecutionResult

__all__ = ["CommandExecutor", "ExecutionResult"]
