from .build import BuildError, BuildReport, build_sw, generate_sw
from .options import GenerateSWOptions
from .rules import CachingStrategy, ExpirationPolicy, RuntimeCachingRule

__all__ = [
    "BuildError",
    "BuildReport",
    "CachingStrategy",
    "ExpirationPolicy",
    "GenerateSWOptions",
    "RuntimeCachingRule",
    "build_sw",
    "generate_sw",
]
