# faqaas/repository/memory.py
from faqaas.repository.base import FAQRepository
from faqaas.schemas import FAQ, FAQText, Locale


def fixture_faqs() -> list[FAQ]:
    return [
        FAQ(id=123, texts=[
            FAQText(locale=Locale(code="en"), question="question?", answer="answer!"),
            FAQText(locale=Locale(code="de"), question="Frage?", answer="Antwort!"),
        ]),
        FAQ(id=456),
        FAQ(id=789),
    ]


class InMemoryFAQRepository(FAQRepository):
    """
    Fixed fixture set for handler tests and demos.

    Writes are accepted and dropped; reads always return the same three FAQs
    (123 with an English and a German text, 456 and 789 without texts).
    """

    def all_faqs(self) -> list[FAQ]:
        return fixture_faqs()

    def faq_by_id(self, faq_id: int) -> FAQ:
        for faq in fixture_faqs():
            if faq.id == faq_id:
                return faq
        return FAQ(id=faq_id)

    def search_faqs(self, locale_code: str, query: str) -> list[FAQ]:
        return self.all_faqs()

    def update_search_index(self) -> None:
        pass

    def create_faq(self) -> FAQ:
        return FAQ(id=123)

    def save_faq_text(self, faq_id: int, text: FAQText) -> None:
        pass

    def delete_faq(self, faq_id: int) -> None:
        pass

    def clear_db(self) -> None:
        pass
