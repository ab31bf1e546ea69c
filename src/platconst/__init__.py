"""platconst — resolve errno and socket constant names to host values.

``resolve("EADDRINUSE")`` returns the integer the platform's headers
define for that name, or ``None`` when the active platform family does
not define it.
"""

from platconst.api import (
    active_family,
    build_resolver,
    default_resolver,
    get_int_const,
    require,
    resolve,
)
from platconst.core.models import ConstantCategory, ConstantInfo, PlatformFamily
from platconst.core.resolver import ConstantResolver
from platconst.exceptions import PlatconstError, UnresolvedConstantError
from platconst.version import __version__

__all__: list[str] = [
    "ConstantCategory",
    "ConstantInfo",
    "ConstantResolver",
    "PlatconstError",
    "PlatformFamily",
    "UnresolvedConstantError",
    "__version__",
    "active_family",
    "build_resolver",
    "default_resolver",
    "get_int_const",
    "require",
    "resolve",
]
