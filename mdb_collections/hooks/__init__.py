"""
Hook chains and the sequential pipeline that runs them.
"""

from .chains import (CollectionHooks, FindOneAndUpdateHooks, HookChain,
                     InsertOneHooks)
from .pipeline import Hook, run_pipeline

__all__ = [
    "Hook",
    "run_pipeline",
    "HookChain",
    "InsertOneHooks",
    "FindOneAndUpdateHooks",
    "CollectionHooks",
]
