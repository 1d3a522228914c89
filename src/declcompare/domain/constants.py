from __future__ import annotations

"""
Domain Constants.

Fixed vocabulary shared by the serializer and the comparison policy:
universal object-method names, the canonical text layout parameters and
the default ordering priorities of declaration kinds.
"""

from typing import Dict, FrozenSet

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------

OBJECT_METHOD_NAMES: FrozenSet[str] = frozenset({
    "equals",
    "hashCode",
    "finalize",
    "wait",
    "notify",
    "notifyAll",
    "toString",
    "clone",
    "getClass",
})

# -----------------------------------------------------------------------------
# CANONICAL TEXT LAYOUT
# -----------------------------------------------------------------------------

PRIMARY_CONSTRUCTOR_MARKER = "/*primary*/ "
INDENTATION_UNIT = "    "
LINE_SEPARATOR = "\n"

# Consecutive blank lines are collapsed down to this amount
MAX_BLANK_LINES = 1

# -----------------------------------------------------------------------------
# ORDERING
# -----------------------------------------------------------------------------

# Higher priority sorts first among siblings
KIND_PRIORITY: Dict[str, int] = {
    "constructor": 6,
    "property": 5,
    "function": 4,
    "class": 3,
    "namespace": 2,
    "other": 0,
}
