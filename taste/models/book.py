# taste/models/book.py
"""
Goodreads-side models.

The shelf listing comes back as one of three shapes (no books, exactly one
book, several books). ShelfPage is the explicit union of those shapes;
everything past the decoder works with BookEntry only.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class ShelfReview:
    """The fields of one <review> that the output needs"""
    title: str
    authors: List[str]
    small_image_url: Optional[str]
    link: str


@dataclass(frozen=True)
class EmptyShelf:
    total: int = 0


@dataclass(frozen=True)
class SingleReviewShelf:
    review: ShelfReview
    total: int = 1


@dataclass(frozen=True)
class MultiReviewShelf:
    reviews: List[ShelfReview] = field(default_factory=list)
    total: int = 0


ShelfPage = Union[EmptyShelf, SingleReviewShelf, MultiReviewShelf]


@dataclass(frozen=True)
class BookEntry:
    """A book on the shelf, as shown on the website"""
    title: str
    author: str
    image_url: Optional[str]
    page_url: str

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "author": self.author,
            "image": self.image_url,
            "url": self.page_url,
        }
