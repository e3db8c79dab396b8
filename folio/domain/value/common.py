"""Base class for single-value value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, validated on construction.

    ``Slug("hello-world")`` either holds a valid slug or raises; the raw value
    is ``.root`` and ``str()`` gives it back for URLs and queries.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
