"""Contenedores observables de un solo valor.

Por qué existe:
- Sustituye el publish/subscribe implícito por una suscripción explícita con
  baja (`Subscription.unsubscribe`) ligada a la vida de la vista.
- Cada `Observable` tiene un único dueño que escribe; los demás solo leen o
  se suscriben. La última escritura gana.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Subscription:
    """Handle devuelto por `Observable.subscribe`."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        if self._release is None:
            return
        release, self._release = self._release, None
        release()


class Observable(Generic[T]):
    """Valor actual + lista de listeners."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener[T], *, emit_current: bool = False) -> Subscription:
        self._listeners.append(listener)
        if emit_current:
            listener(self._value)

        def release() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                logger.debug("listener already removed")

        return Subscription(release)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
