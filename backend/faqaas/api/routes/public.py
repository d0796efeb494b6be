# faqaas/api/routes/public.py
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from faqaas.api.deps import LOCALE_COOKIE_NAME, get_catalog, get_repository, parse_faq_id
from faqaas.api.templating import templates
from faqaas.repository import FAQRepository
from faqaas.services.locale_catalog import LocaleCatalog

router = APIRouter()


# --- Helpers ---

def faq_id_from_slug(id_slug: str) -> int | None:
    """'/faq/en/how-do-i-pay-42' -> 42"""
    return parse_faq_id(id_slug.split("-")[-1])


# --- Routes ---

@router.get("/", include_in_schema=False)
@router.get("/faqs/", include_in_schema=False)
def redirect_to_faqs(request: Request, catalog: LocaleCatalog = Depends(get_catalog)):
    locale = catalog.match_locale(
        request.cookies.get(LOCALE_COOKIE_NAME),
        request.headers.get("accept-language"),
    )
    return RedirectResponse(f"/faqs/{locale}", status_code=302)


@router.get("/faqs/{locale}", include_in_schema=False)
def get_faqs_html(
    request: Request,
    locale: str,
    query: str = "",
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    current = catalog.get(locale)
    if current is None:
        matched = catalog.match_locale(locale, request.headers.get("accept-language"))
        return RedirectResponse(f"/faqs/{matched}", status_code=302)

    query = query.strip()
    faqs = repository.search_faqs(current.code, query) if query else repository.all_faqs()

    # Only FAQs that have a text in this locale are listed
    entries = []
    for faq in faqs:
        text = faq.text_in(current.code)
        if text is not None:
            entries.append({"id": faq.id, "text": text})

    return templates.TemplateResponse(request, "public/faqs.html", {
        "page_title": f"FAQs ({current.name_en}, {current.code})",
        "locale": current,
        "locales": catalog.locales,
        "entries": entries,
        "query": query,
    })


@router.get("/faq/{locale}/{id_slug}", include_in_schema=False)
def get_single_faq_html(
    request: Request,
    locale: str,
    id_slug: str,
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    faq_id = faq_id_from_slug(id_slug)
    if faq_id is None:
        raise HTTPException(status_code=404, detail="faq not found")

    faq = repository.faq_by_id(faq_id)
    if not faq.texts:
        raise HTTPException(status_code=404, detail="faq not found")

    # Requested locale, then the default locale, then whatever exists
    text = faq.text_in(locale) or faq.text_in(catalog.default_locale.code) or faq.texts[0]

    alternates = []
    for t in faq.texts:
        configured = catalog.get(t.locale.code)
        alternates.append({
            "text": t,
            "name": configured.name_local if configured else t.locale.code,
        })

    return templates.TemplateResponse(request, "public/faq.html", {
        "page_title": text.question,
        "faq": faq,
        "text": text,
        "alternates": alternates,
    })
