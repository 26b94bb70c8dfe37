from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Book:
    id: str
    name: str
    year: Optional[int]
    author: Optional[str]
    summary: Optional[str]
    publisher: Optional[str]
    page_count: int
    read_page: int
    finished: bool
    reading: bool
    inserted_at: datetime
    updated_at: datetime
