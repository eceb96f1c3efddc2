"""
Typed hook registration for collection facades.

Each hookable operation has its own chain type, and a ``CollectionHooks``
instance holds at most one chain per operation. The set of operations is
fixed, so registering hooks for anything else fails at definition time
instead of being silently ignored.

Example:
    hooks = CollectionHooks(
        insert_one=InsertOneHooks(
            pre=[audit_attempt],
            post=[strip_internal_fields, attach_links],
        ),
    )

    # Or the mapping form
    hooks = CollectionHooks.from_mapping(
        {"insert_one": {"post": [strip_internal_fields]}}
    )
"""

from dataclasses import dataclass, field, fields
from typing import (Any, Awaitable, Callable, Dict, Mapping, Optional,
                    Sequence, Tuple, Union)

from ..constants import (FIND_ONE_AND_UPDATE, HOOK_PHASES,
                         HOOKABLE_OPERATIONS, INSERT_ONE)
from ..exceptions import HookConfigurationError

Document = Dict[str, Any]

# Pre hooks are side-effect only and receive None.
PreHook = Callable[[None], Union[Any, Awaitable[Any]]]
InsertOnePostHook = Callable[[Document], Union[Document, Awaitable[Document]]]
FindOneAndUpdatePostHook = Callable[
    [Optional[Document]], Union[Optional[Document], Awaitable[Optional[Document]]]
]


def _as_chain(hooks: Optional[Sequence[Callable]], phase: str, operation: str) -> Tuple:
    if hooks is None:
        return ()
    if callable(hooks) or isinstance(hooks, (str, bytes)):
        raise HookConfigurationError(
            f"'{phase}' hooks must be a sequence of callables, got {type(hooks).__name__}",
            operation=operation,
        )
    chain = tuple(hooks)
    for index, hook in enumerate(chain):
        if not callable(hook):
            raise HookConfigurationError(
                f"'{phase}' hook at position {index} is not callable "
                f"(got {type(hook).__name__})",
                operation=operation,
            )
    return chain


@dataclass(frozen=True)
class HookChain:
    """Ordered pre and post hooks for a single operation."""

    pre: Tuple[PreHook, ...] = ()
    post: Tuple[Callable, ...] = ()

    operation: str = field(default="", init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pre", _as_chain(self.pre, "pre", self.operation))
        object.__setattr__(self, "post", _as_chain(self.post, "post", self.operation))


@dataclass(frozen=True)
class InsertOneHooks(HookChain):
    """Hooks around ``insert_one``. Post hooks receive the inserted document."""

    post: Tuple[InsertOnePostHook, ...] = ()

    operation: str = field(default=INSERT_ONE, init=False, repr=False)


@dataclass(frozen=True)
class FindOneAndUpdateHooks(HookChain):
    """
    Hooks around ``find_one_and_update``.

    Post hooks receive the updated document, or None when the filter
    matched nothing.
    """

    post: Tuple[FindOneAndUpdatePostHook, ...] = ()

    operation: str = field(default=FIND_ONE_AND_UPDATE, init=False, repr=False)


_CHAIN_TYPES: Dict[str, type] = {
    INSERT_ONE: InsertOneHooks,
    FIND_ONE_AND_UPDATE: FindOneAndUpdateHooks,
}


@dataclass(frozen=True)
class CollectionHooks:
    """All hook chains registered for one collection."""

    insert_one: Optional[InsertOneHooks] = None
    find_one_and_update: Optional[FindOneAndUpdateHooks] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            chain = getattr(self, f.name)
            expected = _CHAIN_TYPES[f.name]
            if chain is not None and not isinstance(chain, expected):
                raise HookConfigurationError(
                    f"Hooks for '{f.name}' must be {expected.__name__}, "
                    f"got {type(chain).__name__}",
                    operation=f.name,
                )

    def chain_for(self, operation: str) -> Optional[HookChain]:
        """Return the chain registered for ``operation``, or None."""
        if operation not in HOOKABLE_OPERATIONS:
            return None
        return getattr(self, operation)

    @classmethod
    def from_mapping(
        cls, mapping: Optional[Mapping[str, Mapping[str, Sequence[Callable]]]]
    ) -> "CollectionHooks":
        """
        Build hooks from ``{"operation": {"pre": [...], "post": [...]}}``.

        Raises:
            HookConfigurationError: On an unknown operation or phase key
        """
        if not mapping:
            return cls()

        chains: Dict[str, HookChain] = {}
        for operation, phases in mapping.items():
            if operation not in _CHAIN_TYPES:
                raise HookConfigurationError(
                    f"Hooks cannot be registered for '{operation}'. "
                    f"Hookable operations: {', '.join(HOOKABLE_OPERATIONS)}",
                    operation=operation,
                )
            phases = phases or {}
            if not isinstance(phases, Mapping):
                raise HookConfigurationError(
                    f"Hooks for '{operation}' must map 'pre'/'post' to hook sequences",
                    operation=operation,
                )
            unknown = set(phases) - set(HOOK_PHASES)
            if unknown:
                raise HookConfigurationError(
                    f"Unknown hook phase(s) {sorted(unknown)}; expected 'pre' or 'post'",
                    operation=operation,
                )
            chains[operation] = _CHAIN_TYPES[operation](
                pre=phases.get("pre"), post=phases.get("post")
            )
        return cls(**chains)

    @classmethod
    def coerce(cls, hooks: Any) -> "CollectionHooks":
        """Accept None, a CollectionHooks instance, or the mapping form."""
        if hooks is None:
            return cls()
        if isinstance(hooks, cls):
            return hooks
        if isinstance(hooks, Mapping):
            return cls.from_mapping(hooks)
        raise HookConfigurationError(
            f"hooks must be CollectionHooks or a mapping, got {type(hooks).__name__}"
        )
