"""Commit message rules.

Each rule is an immutable pydantic model implementing the ``Rule``
interface. ``RULE_REGISTRY`` lists every rule by name in evaluation order.

Example:
    ```python
    from gitcommitlint.rules import TicketId

    rule = TicketId(unique=True)
    violation = rule.validate(message)
    ```
"""

from .base import Rule
from .body import BodyEmpty, BodyLeadingBlank, BodyMaxLineLength
from .commit_type import TypeAllowed, TypeEmpty
from .description import DescriptionEmpty
from .scope import ScopeEmpty
from .subject import SubjectEmpty, SubjectFullStop, SubjectMaxLength
from .ticket_id import TicketId

RULE_REGISTRY = {
    rule.NAME: rule
    for rule in (
        SubjectEmpty,
        SubjectMaxLength,
        SubjectFullStop,
        TypeEmpty,
        TypeAllowed,
        ScopeEmpty,
        DescriptionEmpty,
        BodyEmpty,
        BodyLeadingBlank,
        BodyMaxLineLength,
        TicketId,
    )
}

__all__ = [
    "Rule",
    "RULE_REGISTRY",
    "BodyEmpty",
    "BodyLeadingBlank",
    "BodyMaxLineLength",
    "DescriptionEmpty",
    "ScopeEmpty",
    "SubjectEmpty",
    "SubjectFullStop",
    "SubjectMaxLength",
    "TicketId",
    "TypeAllowed",
    "TypeEmpty",
]
