"""
Page/limit pagination shared by list use cases.
"""

import math
from typing import Tuple

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class Pagination(BaseModel):
    """Pagination block returned with every list response"""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def of(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """(offset, limit) for a 1-based page"""
    page = max(page, 1)
    limit = max(limit, 1)
    return (page - 1) * limit, limit
