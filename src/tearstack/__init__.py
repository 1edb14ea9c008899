"""tearstack — incremental, failure-isolated teardown for tests.

Register cleanup actions as resources are acquired; every action runs
exactly once, last-registered first, when the test concludes.
"""

from tearstack.domain.action import Entry, TearDown
from tearstack.domain.errors import ActionFailure, TearDownFailedError
from tearstack.services.accepter import TearDownAccepter, TearDownAccepterMixin
from tearstack.services.result import DrainReport
from tearstack.services.stack import TearDownStack

__version__ = "0.1.0"

__all__ = [
    "ActionFailure",
    "DrainReport",
    "Entry",
    "TearDown",
    "TearDownAccepter",
    "TearDownAccepterMixin",
    "TearDownFailedError",
    "TearDownStack",
    "__version__",
]
