"""
Content sanitizer registry.

Some argument domains need a value-space translation before they reach the
native side. Those types route their value through a global helper function
shipped in each target's helper resource.
"""

from types import MappingProxyType
from typing import Mapping, Optional

# Canonical type -> name of the global helper that normalizes its value
CONTENT_SANITIZERS: Mapping[str, str] = MappingProxyType(
    {
        "GREYDirection": "sanitize_greyDirection",
    }
)


def lookup_sanitizer(canonical_type: str) -> Optional[str]:
    """Return the sanitizer function name for a type, or None for identity."""
    return CONTENT_SANITIZERS.get(canonical_type)
