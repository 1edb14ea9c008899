"""Extension layer — drain observers via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Observer failures are logged, never raised into a drain.
"""

from tearstack.plugins.manager import PluginManager

__all__ = ["PluginManager"]
