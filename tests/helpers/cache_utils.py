"""Cache utilities for test isolation.

Resets every module-level cache in Inspire so tests do not see each
other's configuration, resources or parsed command lines.
"""
from __future__ import annotations


def reset_inspire_caches() -> None:
    """Reset ALL global caches in Inspire modules."""
    from inspire_core import data
    from inspire_core.core.commandline import reset_command_line_cache
    from inspire_core.core.config.cache import clear_all_caches
    from inspire_core.core.logging import reset_stdlib_logging_for_tests
    from inspire_core.core.storage import files

    clear_all_caches()
    data.clear_caches()
    files._mime_tables.cache_clear()
    reset_command_line_cache()
    reset_stdlib_logging_for_tests()
