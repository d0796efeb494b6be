# faqaas/api/templating.py
import re
from pathlib import Path

from fastapi.templating import Jinja2Templates

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_NON_WORD_RE = re.compile(r"[^\w]+", re.UNICODE)


def slugify(text: str) -> str:
    return _NON_WORD_RE.sub("-", text.lower()).strip("-")


def faq_path(locale_code: str, faq_id: int, question: str = "") -> str:
    """Public URL of one FAQ; the id is always the last dash-separated token."""
    slug = slugify(question)
    return f"/faq/{locale_code}/{slug}-{faq_id}" if slug else f"/faq/{locale_code}/{faq_id}"


templates.env.globals["faq_path"] = faq_path
