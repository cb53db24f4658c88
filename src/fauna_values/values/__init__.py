"""Special value types of the query/response protocol.

- `Ref` for resource paths
- `SetRef` for un-evaluated set queries
- `Page` for paginated results
- `FaunaTime` and `FaunaDate` for timestamps and calendar dates
"""

from fauna_values.values.page import Page
from fauna_values.values.refs import Ref, SetRef
from fauna_values.values.temporal import FaunaDate, FaunaTime

__all__ = [
    "FaunaDate",
    "FaunaTime",
    "Page",
    "Ref",
    "SetRef",
]
