# faqaas/services/search_index.py
import logging

from faqaas.errors import StorageError
from faqaas.repository import FAQRepository

logger = logging.getLogger(__name__)


def refresh_search_index(repository: FAQRepository) -> None:
    """
    Rebuilds the search index after a write. The write itself is already
    committed, so a failed rebuild is only logged; the next successful
    rebuild catches up.
    """
    try:
        repository.update_search_index()
    except StorageError as e:
        logger.error("Search index refresh failed: %s", e)
