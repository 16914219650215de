"""Request-scoped inputs to policy evaluation.

- attributes.py: ResolvedAttributes (case-insensitive attribute view)
- request.py: AccessRequest (remote access request payload)
"""

from claim_acp.context.attributes import AttributeValues, ResolvedAttributes
from claim_acp.context.request import AccessRequest

__all__ = [
    "AccessRequest",
    "AttributeValues",
    "ResolvedAttributes",
]
