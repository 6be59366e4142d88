"""Result envelopes for service-layer return values.

Every outcome is wrapped in the same shape so callers never need to inspect
exceptions to learn whether an operation worked:
{ succeeded: bool, failed: bool, messages: list[str], data: T | None }

Failures are represented, never raised: none of the constructors below can
fail.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

Messages = str | list[str] | None


def as_messages(messages: Messages) -> list[str]:
    """Normalize a single message, a message list or ``None`` to a list.

    A list is passed through, but model validation stores its own copy, so
    the ``messages`` read back from a result equal the caller's list without
    being the same object.
    """
    if messages is None:
        return []
    if isinstance(messages, str):
        return [messages]
    return messages


class Result(BaseModel):
    """Outcome of an operation with no payload."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    succeeded: bool = False
    messages: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> bool:
        return not self.succeeded

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def fail(cls, messages: Messages = None):
        """Build a failed result with zero, one or many messages."""
        return cls(succeeded=False, messages=as_messages(messages))

    @classmethod
    def success(cls, messages: Messages = None):
        """Build a successful result with zero, one or many messages."""
        return cls(succeeded=True, messages=as_messages(messages))

    @classmethod
    async def fail_async(cls, messages: Messages = None):
        return cls.fail(messages)

    @classmethod
    async def success_async(cls, messages: Messages = None):
        return cls.success(messages)


class DataResult(Result, Generic[T]):
    """Outcome of an operation that may carry a payload of type ``T``.

    ``data`` is only populated by :meth:`success`; the inherited
    :meth:`Result.fail` constructors leave it as ``None``.
    """

    data: T | None = Field(default=None, strict=True)

    @classmethod
    def success(cls, data: T | None = None, messages: Messages = None):
        """Build a successful result carrying ``data``.

        The first positional argument is always the payload, so
        ``success("done")`` stores ``"done"`` as ``data``. A message-only
        success is ``DataResult.success(messages="...")``.

        ``data`` is validated strictly against ``T``: it is stored unchanged
        or rejected with ``pydantic.ValidationError``, never coerced.
        """
        return cls(succeeded=True, data=data, messages=as_messages(messages))

    @classmethod
    async def success_async(cls, data: T | None = None, messages: Messages = None):
        return cls.success(data, messages)
