from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Insertion-ordered mapping of names to registered objects.

    Typical usage:
        REG = Registry[str, Callable[..., Any]](_name="learners")

        @REG.register("oneNN")
        def make_one_nn(...):
            ...

        make = REG.get("oneNN")

    Once ``freeze()`` has been called the registry rejects further
    registrations. Lookups are exact and case-sensitive.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"
    _frozen: bool = False

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            self.add(key, value)
            return value

        return deco

    def add(self, key: K, value: V) -> None:
        if self._frozen:
            raise RuntimeError(f"{self._name}: registry is frozen, cannot add {key!r}")
        if key in self._items:
            raise ValueError(f"{self._name}: duplicate key {key!r}")
        self._items[key] = value

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, key: K) -> V:
        if key not in self._items:
            raise KeyError(f"{self._name}: unknown key {key!r}")
        return self._items[key]

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def items(self) -> Iterable[tuple[K, V]]:
        return self._items.items()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)
