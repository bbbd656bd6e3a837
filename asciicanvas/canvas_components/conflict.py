from enum import Enum
from typing import Callable

Resolver = Callable[[str, str], str]


class ConflictResolver(Enum):
    """Decides which character survives when a line crosses existing content.

    Members are callables taking ``(existing, proposed)`` and returning the
    character to write. Any other function with that signature works as a
    resolver too.
    """

    OVERWRITE = "overwrite"
    PRESERVE = "preserve"

    def __call__(self, existing: str, proposed: str) -> str:
        if self is ConflictResolver.PRESERVE and not existing.isspace():
            return existing
        return proposed


def resolve(resolver: Resolver, existing, proposed: str) -> str:
    # out-of-bounds cells read as None and never conflict
    if existing is None:
        return proposed
    return resolver(existing, proposed)
