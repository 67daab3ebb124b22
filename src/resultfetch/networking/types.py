"""Result and outcome types returned by the networking layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, Mapping, TypeVar, Union

from .errors import NetworkError

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class Success:
    """The server answered with a status code inside the valid set."""

    status_code: int
    data: Any
    headers: Mapping[str, str] = field(default_factory=dict)
    status: Literal["OK"] = field(default="OK", init=False)


@dataclass(frozen=True)
class ApplicationError:
    """The server answered, but with a status code outside the valid set."""

    status_code: int
    error_data: Any
    status: Literal["ERROR"] = field(default="ERROR", init=False)


@dataclass(frozen=True)
class NetworkFailure:
    """No classifiable response was produced.

    ``status_code`` is 408 for timeouts, the real code when decoding failed
    after the response arrived, and ``None`` if the call never completed.
    """

    network_error: NetworkError
    status_code: int | None = None
    status: Literal["NETWORK_ERROR"] = field(default="NETWORK_ERROR", init=False)


Outcome = Union[Success, ApplicationError, NetworkFailure]
