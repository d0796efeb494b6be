# faqaas/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class Locale(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name_en: str | None = None     # Name in English
    name_local: str | None = None  # Name in local language

    @property
    def display_name(self) -> str:
        if self.name_en and self.name_local:
            return f"{self.name_en} ({self.name_local})"
        return self.name_en or self.name_local or self.code


class FAQText(BaseModel):
    locale: Locale
    question: str = ""
    answer: str = ""


class FAQ(BaseModel):
    id: int
    texts: list[FAQText] = Field(default_factory=list)

    def text_in(self, locale_code: str) -> FAQText | None:
        for t in self.texts:
            if t.locale.code == locale_code:
                return t
        return None

    def text_in_default_locale(self, default_locale: Locale) -> FAQText:
        return self.text_in(default_locale.code) or FAQText(locale=default_locale)


class ErrorResponse(BaseModel):
    error: str
