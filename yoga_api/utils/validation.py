"""
Input validation helpers shared by the services.
"""

import re
from typing import Union

from ..exceptions import MalformedIdentifierError

_IDENTIFIER_PATTERN = re.compile(r"^[0-9]+$")

# Record keys are 64-bit signed integers in every supported store
MAX_IDENTIFIER = 2**63 - 1


def parse_identifier(raw: Union[str, int], kind: str = "resource") -> int:
    """
    Parse a record identifier received at the API boundary.

    Identifiers are positive integers that fit a 64-bit signed key. Anything
    else is rejected before the store is consulted, so a malformed id is
    never reported as missing.

    Zero and negative numbers are treated as malformed rather than as ids
    that simply match no record: no stored key can ever take those values,
    so they are a client error (400), not a lookup miss (404).

    Args:
        raw: Identifier as received (path parameter string or int)
        kind: Record kind used in the error message

    Returns:
        The identifier as an int

    Raises:
        MalformedIdentifierError: If the value is not a positive integer
            within the key range
    """
    if isinstance(raw, bool):
        raise MalformedIdentifierError(f"Malformed {kind} id", {"value": raw})

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _IDENTIFIER_PATTERN.match(raw.strip()):
        value = int(raw.strip())
    else:
        raise MalformedIdentifierError(f"Malformed {kind} id", {"value": raw})

    if value <= 0 or value > MAX_IDENTIFIER:
        raise MalformedIdentifierError(f"Malformed {kind} id", {"value": raw})

    return value
