"""
One page of a paginated query result.

``number`` is 0‑indexed like the repository API; the web layer
translates to and from the 1‑indexed page numbers users see.
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    content: List[T] = Field(default_factory=list)
    number: int = 0
    size: int
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def is_empty(self) -> bool:
        return not self.content
