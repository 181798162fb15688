"""
Domain package for the Atlas CRUD demo.

Exports the example user record and the result types returned by each step
and by a whole run.
"""

from atlas_crud.domain.models import OperationResult, RunReport, UserRecord

__all__ = [
    "OperationResult",
    "RunReport",
    "UserRecord",
]
