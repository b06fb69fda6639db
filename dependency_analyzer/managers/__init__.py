"""Built-in ecosystem resolvers.

Each module defines a resolver class satisfying the ``Resolver`` protocol and
a shared instance of it. Instances are stateless and reused across runs.
"""

from .gradle import GRADLE_RESOLVER
from .gradle import Gradle
from .npm import NPM
from .npm import NPM_RESOLVER
from .pip import PIP
from .pip import PIP_RESOLVER

__all__ = [
    "Gradle",
    "NPM",
    "PIP",
    "GRADLE_RESOLVER",
    "NPM_RESOLVER",
    "PIP_RESOLVER",
]
