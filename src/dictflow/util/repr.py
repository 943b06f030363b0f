""" Mixins for `__repr__()` and `__str__()` implementations that must never raise, e.g. for containers holding
arbitrary user values or for exception messages. Failures are logged and a placeholder is returned instead. """

import abc
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def _render(obj: object, render: Callable[[], str], what: str) -> str:
    try:
        return render()
    except Exception:
        logger.exception(
            "An unhandled exception occurred converting object of type `%s` to %s.",
            type(obj).__qualname__,
            what,
        )
        return f"<... {type(obj).__qualname__} ...>"


class SafeRepr:
    def __repr__(self) -> str:
        return _render(self, self.__safe_repr__, "its representation")

    @abc.abstractmethod
    def __safe_repr__(self) -> str:
        ...


class SafeStr:
    def __str__(self) -> str:
        return _render(self, self.__safe_str__, "string")

    @abc.abstractmethod
    def __safe_str__(self) -> str:
        ...
