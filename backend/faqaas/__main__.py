# faqaas/__main__.py
from faqaas.main import run

run()
