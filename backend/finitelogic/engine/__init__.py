"""
Finite domain model: objects, facts and bounded quantification.
"""

from .domain import Domain, DomainObject, DuplicateObjectError, ForAllResult

__all__ = ["Domain", "DomainObject", "DuplicateObjectError", "ForAllResult"]
