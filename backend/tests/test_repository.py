from conftest import BrokenFAQRepository
from faqaas.repository import InMemoryFAQRepository
from faqaas.schemas import FAQText, Locale
from faqaas.services.search_index import refresh_search_index


class TestInMemoryRepository:
    def test_fixture(self):
        faqs = InMemoryFAQRepository().all_faqs()
        assert [f.id for f in faqs] == [123, 456, 789]
        assert [t.locale.code for t in faqs[0].texts] == ["en", "de"]

    def test_writes_are_dropped(self):
        repo = InMemoryFAQRepository()
        repo.save_faq_text(123, FAQText(locale=Locale(code="fr"), question="q", answer="a"))
        repo.delete_faq(123)
        assert len(repo.faq_by_id(123).texts) == 2

    def test_unknown_id(self):
        faq = InMemoryFAQRepository().faq_by_id(1)
        assert faq.id == 1
        assert faq.texts == []

    def test_create(self):
        assert InMemoryFAQRepository().create_faq().id == 123


def test_refresh_search_index(caplog):
    refresh_search_index(InMemoryFAQRepository())
    assert "Search index refresh failed" not in caplog.text


def test_refresh_search_index_failure_is_logged(caplog):
    refresh_search_index(BrokenFAQRepository())
    assert "Search index refresh failed" in caplog.text
