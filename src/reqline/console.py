"""
Shared console instance for reqline.

Provides a global Rich console that can be used across the application.
"""

from rich.console import Console

# Global console instance - import this directly
console = Console()
