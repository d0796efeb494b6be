# faqaas/repository/base.py
from abc import ABC, abstractmethod

from faqaas.schemas import FAQ, FAQText


class FAQRepository(ABC):
    """
    Data access for FAQs and their localized texts.

    Every method talks to the backing store directly (no caching) and raises
    StorageError when the store fails. Writes do not refresh the search index;
    callers run update_search_index() right after every mutating call.
    """

    @abstractmethod
    def all_faqs(self) -> list[FAQ]:
        """All FAQs ordered by id, each with all of its texts."""

    @abstractmethod
    def faq_by_id(self, faq_id: int) -> FAQ:
        """
        The FAQ with the given id. An FAQ without texts comes back with an
        empty ``texts`` list, which is how "not found" is signaled.
        """

    @abstractmethod
    def search_faqs(self, locale_code: str, query: str) -> list[FAQ]:
        """
        Full-text search within one locale, best match first. Each hit carries
        all texts of the matched FAQ. Blank queries must be rejected by callers.
        """

    @abstractmethod
    def update_search_index(self) -> None:
        """Rebuilds the whole search index."""

    @abstractmethod
    def create_faq(self) -> FAQ:
        """Allocates a new FAQ with a store-assigned id and no texts."""

    @abstractmethod
    def save_faq_text(self, faq_id: int, text: FAQText) -> None:
        """Inserts or overwrites the text of ``faq_id`` for ``text.locale``."""

    @abstractmethod
    def delete_faq(self, faq_id: int) -> None:
        """Deletes the FAQ's texts and then the FAQ itself, atomically."""

    @abstractmethod
    def clear_db(self) -> None:
        """Deletes every text and every FAQ. Test setup and maintenance only."""
