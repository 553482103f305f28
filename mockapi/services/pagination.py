"""Page slicing for collection listings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_param(raw: Optional[str], default: int) -> int:
    """
    Lenient query-string integer: "3" -> 3, "3abc" -> 3, "2.9" -> 2, "-3" -> -3.
    Missing, non-numeric or zero values yield `default`.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    return int(match.group(1)) or default


@dataclass
class Page:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    data: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pagination": {
                "currentPage": self.current_page,
                "totalPages": self.total_pages,
                "totalItems": self.total_items,
                "itemsPerPage": self.items_per_page,
            },
            "data": self.data,
        }


def paginate(records: Sequence[Any], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Page:
    # metadata describes the whole collection, even for pages past the end
    total = len(records)
    start = min(max((page - 1) * limit, 0), total)
    end = min(max(page * limit, 0), total)
    return Page(
        current_page=page,
        total_pages=math.ceil(total / limit),
        total_items=total,
        items_per_page=limit,
        data=list(records[start:end]),
    )
