# faqaas/api/routes/admin.py
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse

from faqaas.api.deps import get_catalog, get_repository, parse_faq_id, require_admin
from faqaas.api.templating import templates
from faqaas.repository import FAQRepository
from faqaas.schemas import FAQText, Locale
from faqaas.services.locale_catalog import LocaleCatalog
from faqaas.services.search_index import refresh_search_index

logger = logging.getLogger(__name__)

# Login and logout live in routes/auth.py, everything here needs a session
router = APIRouter(dependencies=[Depends(require_admin)])

# =======================
# 1. PAGE HELPERS
# =======================

MENU = [("FAQs", "/admin/faqs"), ("Languages", "/admin/locales")]


def menu_bar(active_item: str) -> list[dict]:
    return [{"name": name, "url": url, "active": name == active_item} for name, url in MENU]


def render(request: Request, template: str, page_title: str, active_item: str, **context):
    context.update({"page_title": page_title, "menu_bar": menu_bar(active_item)})
    return templates.TemplateResponse(request, template, context)


def parse_form_faq_id(raw: str) -> int:
    faq_id = parse_faq_id(raw.strip())
    if faq_id is None:
        raise HTTPException(status_code=400, detail="invalid faq id")
    return faq_id


def form_text(locale_code: str, question: str, answer: str, catalog: LocaleCatalog) -> FAQText:
    code = locale_code.strip() or catalog.default_locale.code
    return FAQText(locale=Locale(code=code), question=question, answer=answer)


# =======================
# 2. PAGES
# =======================

@router.get("", include_in_schema=False)
def get_admin():
    return RedirectResponse("/admin/faqs", status_code=302)


@router.get("/faqs", include_in_schema=False)
def get_admin_faqs(
    request: Request,
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    faqs = repository.all_faqs()
    rows = [
        {"id": faq.id, "text": faq.text_in_default_locale(catalog.default_locale), "text_count": len(faq.texts)}
        for faq in faqs
    ]
    return render(request, "admin/faqs.html", "Admin / FAQs", "FAQs", rows=rows)


@router.get("/faqs/new", include_in_schema=False)
def get_admin_faqs_new(request: Request, catalog: LocaleCatalog = Depends(get_catalog)):
    return render(
        request, "admin/faqs_new.html", "Admin / New FAQ", "FAQs",
        default_locale=catalog.default_locale,
    )


@router.get("/faqs/edit/{faq_id}", include_in_schema=False)
def get_admin_faqs_edit(
    request: Request,
    faq_id: str,
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    parsed_id = parse_faq_id(faq_id)
    if parsed_id is None:
        raise HTTPException(status_code=404, detail="faq not found")
    faq = repository.faq_by_id(parsed_id)

    # One form per configured locale, filled with what is already stored
    existing = {t.locale.code: t for t in faq.texts}
    texts = []
    for loc in catalog.locales:
        stored = existing.get(loc.code)
        if stored is not None:
            texts.append(FAQText(locale=loc, question=stored.question, answer=stored.answer))
        else:
            texts.append(FAQText(locale=loc))

    return render(request, "admin/faqs_edit.html", "Admin / Edit FAQ", "FAQs", faq_id=faq.id, texts=texts)


@router.get("/locales", include_in_schema=False)
def get_admin_locales(request: Request, catalog: LocaleCatalog = Depends(get_catalog)):
    return render(request, "admin/locales.html", "Admin / Languages", "Languages", locales=catalog.locales)


# =======================
# 3. FAQ MANAGEMENT
# =======================

@router.post("/faqs/create", include_in_schema=False)
def post_admin_faqs_create(
    localeCode: str = Form(""),
    question: str = Form(""),
    answer: str = Form(""),
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    text = form_text(localeCode, question, answer, catalog)

    faq = repository.create_faq()
    refresh_search_index(repository)

    repository.save_faq_text(faq.id, text)
    refresh_search_index(repository)

    logger.info("Created FAQ %s (%s)", faq.id, text.locale.code)
    return RedirectResponse(f"/admin/faqs/edit/{faq.id}", status_code=302)


@router.post("/faqs/update", include_in_schema=False)
def post_admin_faqs_update(
    faqID: str = Form(""),
    localeCode: str = Form(""),
    question: str = Form(""),
    answer: str = Form(""),
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    faq_id = parse_form_faq_id(faqID)
    text = form_text(localeCode, question, answer, catalog)

    repository.save_faq_text(faq_id, text)
    refresh_search_index(repository)

    logger.info("Updated FAQ %s (%s)", faq_id, text.locale.code)
    return RedirectResponse(f"/admin/faqs/edit/{faq_id}", status_code=302)


@router.post("/faqs/delete", include_in_schema=False)
def post_admin_faqs_delete(
    faqID: str = Form(""),
    repository: FAQRepository = Depends(get_repository),
):
    faq_id = parse_form_faq_id(faqID)

    repository.delete_faq(faq_id)
    refresh_search_index(repository)

    logger.info("Deleted FAQ %s", faq_id)
    return RedirectResponse("/admin/faqs", status_code=302)
