# faqaas/repository/__init__.py
from faqaas.repository.base import FAQRepository
from faqaas.repository.memory import InMemoryFAQRepository
from faqaas.repository.sql import SQLFAQRepository
