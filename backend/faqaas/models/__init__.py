# faqaas/models/__init__.py
from faqaas.models.faq import FAQRecord, FAQTextRecord
