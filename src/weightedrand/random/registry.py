"""Name-to-class lookup for random sources.

The sources shipped here register themselves with ``@register_random_source``
when their module is imported. Other distributions can add sources by
declaring them in the ``weightedrand.random_sources`` entry-point group;
those are only imported once a lookup misses the local table.
"""

from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from weightedrand.random.base import RandomSource

logger = logging.getLogger("weightedrand")

_ENTRY_POINT_GROUP = "weightedrand.random_sources"


class RandomSourceRegistry:
    """Maps configuration names such as ``"numpy"`` to RandomSource classes.

    Lookups check the local table first and fall back to the entry-point
    group a single time per process. A name claimed by a bundled source
    cannot be replaced by a plugin.
    """

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Class decorator storing the decorated source under *name*.

        Example::

            @RandomSourceRegistry.register("counter")
            class CounterSource(RandomSource):
                ...
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Resolve *name* to its source class.

        Raises:
            KeyError: If neither the bundled sources nor any plugin
                provide *name*. The message lists the known names.
        """
        if name in cls._registry:
            return cls._registry[name]

        if not cls._entry_points_loaded:
            cls._load_entry_points()
            if name in cls._registry:
                return cls._registry[name]

        available = ", ".join(sorted(cls._registry.keys())) or "(none)"
        raise KeyError(f"Unknown random source: {name!r}. Available: {available}")

    @classmethod
    def build(cls, config: Any) -> RandomSource:
        """Create the source selected by ``config.random_source_type``.

        ``config.random_seed`` reaches the constructor only when it has a
        ``seed`` parameter; a seed set for any other source is dropped
        with a warning.

        Args:
            config: Object exposing ``random_source_type`` and
                ``random_seed``, normally a WeightedRandConfig.

        Returns:
            A new RandomSource instance.
        """
        source_cls = cls.get(config.random_source_type)
        if _accepts_seed(source_cls):
            return source_cls(seed=config.random_seed)  # type: ignore[call-arg]
        if config.random_seed is not None:
            logger.warning(
                "Random source %r is not seedable; ignoring random_seed=%d",
                config.random_source_type,
                config.random_seed,
            )
        return source_cls()

    @classmethod
    def list_available(cls) -> list[str]:
        """Sorted names of every known source, plugins included."""
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry.keys())

    @classmethod
    def _load_entry_points(cls) -> None:
        # Runs at most once, even if reading the metadata fails.
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                continue
            try:
                cls._registry[ep.name] = ep.load()
                logger.debug("Loaded random source %r from entry point", ep.name)
            except Exception:
                # A plugin that fails to import is skipped; the rest still load.
                logger.warning(
                    "Failed to load random source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )

    @classmethod
    def _reset(cls) -> None:
        """Forget every registration and allow entry points to load again."""
        cls._registry.clear()
        cls._entry_points_loaded = False


def _accepts_seed(cls: type) -> bool:
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False
    return "seed" in sig.parameters


register_random_source = RandomSourceRegistry.register
