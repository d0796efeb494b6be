# backend/scripts/seed_faq.py
import sys
import os

# Path Setup
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

from faqaas.config import get_settings
from faqaas.database.connection import build_engine, build_session_factory, init_db
from faqaas.repository import SQLFAQRepository
from faqaas.schemas import FAQText, Locale
from faqaas.services.locale_catalog import LocaleCatalog

# 1. Define sample Q&A pairs, keyed by locale code
faq_data = [
    {
        "en": ("How do I reset my password?", "Open the login page, choose 'Forgot password' and follow the link we send you by email."),
        "de": ("Wie setze ich mein Passwort zurück?", "Öffne die Anmeldeseite, wähle 'Passwort vergessen' und folge dem Link in der E-Mail."),
        "fr": ("Comment réinitialiser mon mot de passe ?", "Ouvrez la page de connexion, choisissez « Mot de passe oublié » et suivez le lien reçu par e-mail."),
    },
    {
        "en": ("Which payment methods do you accept?", "We accept credit cards, PayPal and bank transfer."),
        "de": ("Welche Zahlungsarten werden akzeptiert?", "Wir akzeptieren Kreditkarte, PayPal und Überweisung."),
    },
    {
        "en": ("Can I cancel my subscription at any time?", "Yes, the subscription can be cancelled at the end of every billing period."),
        "es": ("¿Puedo cancelar mi suscripción en cualquier momento?", "Sí, la suscripción se puede cancelar al final de cada periodo de facturación."),
    },
]


def seed_faqs():
    settings = get_settings()
    catalog = LocaleCatalog.from_setting(settings.SUPPORTED_LOCALES)

    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    repository = SQLFAQRepository(build_session_factory(engine))

    print("--- Seeding FAQs ---")
    count = 0
    for item in faq_data:
        faq = repository.create_faq()
        for code, (question, answer) in item.items():
            # Only seed languages this deployment actually serves
            if code not in catalog:
                continue
            repository.save_faq_text(faq.id, FAQText(locale=Locale(code=code), question=question, answer=answer))
        print(f"Created FAQ {faq.id}: {item['en'][0]}")
        count += 1

    repository.update_search_index()
    print(f"--- Success! Seeded {count} FAQs ---")


if __name__ == "__main__":
    seed_faqs()
