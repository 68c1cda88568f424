# taste/processors/shelf_processor.py
"""
Goodreads shelf response processor.

Goodreads reports how many reviews matched in <reviews total="N">. The
decoder branches on that count into one ShelfPage variant, and the
normalizer flattens every variant into the same list of BookEntry.
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from ..exceptions import UpstreamError
from ..models import (
    BookEntry,
    ShelfReview,
    ShelfPage,
    EmptyShelf,
    SingleReviewShelf,
    MultiReviewShelf,
)


def _child_text(parent, name: str) -> Optional[str]:
    element = parent.find(name, recursive=False)
    if element is None:
        return None
    text = element.get_text(strip=True)
    return text or None


def _required_text(parent, name: str) -> str:
    text = _child_text(parent, name)
    if text is None:
        raise UpstreamError(f"Goodreads review is missing <{name}>")
    return text


def _decode_review(review) -> ShelfReview:
    book = review.find("book", recursive=False)
    if book is None:
        raise UpstreamError("Goodreads review is missing <book>")

    authors = []
    authors_element = book.find("authors", recursive=False)
    if authors_element is not None:
        for author in authors_element.find_all("author", recursive=False):
            name = _child_text(author, "name")
            if name:
                authors.append(name)

    return ShelfReview(
        title=_required_text(book, "title"),
        authors=authors,
        small_image_url=_child_text(book, "small_image_url"),
        link=_required_text(book, "link"),
    )


def decode_shelf(xml: str) -> ShelfPage:
    """
    Decode a review/list XML body into a ShelfPage.

    total == 1 -> SingleReviewShelf
    total > 1  -> MultiReviewShelf
    otherwise  -> EmptyShelf
    """
    soup = BeautifulSoup(xml, "xml")

    reviews = soup.find("reviews")
    if reviews is None:
        raise UpstreamError("Goodreads response has no <reviews> element")

    raw_total = reviews.get("total") or "0"
    try:
        total = int(raw_total)
    except ValueError as e:
        raise UpstreamError(f"Goodreads reviews total is not a number: {raw_total!r}") from e

    if total == 1:
        review = reviews.find("review", recursive=False)
        if review is None:
            raise UpstreamError("Goodreads reports one review but sent none")
        return SingleReviewShelf(review=_decode_review(review))

    if total > 1:
        return MultiReviewShelf(
            reviews=[_decode_review(r) for r in reviews.find_all("review", recursive=False)],
            total=total,
        )

    return EmptyShelf()


def _to_entry(review: ShelfReview) -> BookEntry:
    if not review.authors:
        raise UpstreamError(f"Goodreads book {review.title!r} has no author")

    return BookEntry(
        title=review.title,
        author=review.authors[0],
        image_url=review.small_image_url,
        page_url=review.link,
    )


def normalize_shelf(page: ShelfPage) -> List[BookEntry]:
    """Flatten any ShelfPage variant into a list of BookEntry"""
    if isinstance(page, SingleReviewShelf):
        return [_to_entry(page.review)]
    if isinstance(page, MultiReviewShelf):
        return [_to_entry(review) for review in page.reviews]
    return []


def process_shelf_response(xml: str) -> List[BookEntry]:
    """Decode and normalize in one step"""
    return normalize_shelf(decode_shelf(xml))
