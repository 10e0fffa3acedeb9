"""Paginated list envelope."""

from typing import Generic, Iterator, List, Literal, Optional, TypeVar

from pydantic import Field, StrictBool, StrictStr

from ..domain.scalars import NonnegInt
from .base import StripeObject

T = TypeVar("T")


class ListObject(StripeObject, Generic[T]):
    """
    One page of a list endpoint.

    ``data`` keeps the order the server returned; each element is decoded
    with the item schema and one bad element fails the whole page.
    """

    object_: Literal["list"] = Field("list", alias="object")
    data: List[T]
    has_more: StrictBool
    url: StrictStr
    total_count: Optional[NonnegInt] = None

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]
