# faqaas/api/routes/api.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from faqaas.api.deps import get_catalog, get_repository, parse_faq_id, require_api_key
from faqaas.repository import FAQRepository
from faqaas.schemas import FAQ, ErrorResponse, Locale
from faqaas.services.locale_catalog import LocaleCatalog

# Every JSON endpoint sits behind the API key
router = APIRouter(
    dependencies=[Depends(require_api_key)],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


# 1. LANGUAGES
@router.get("/languages", response_model=List[Locale], response_model_exclude_none=True)
def get_languages(catalog: LocaleCatalog = Depends(get_catalog)):
    return catalog.locales


# 2. LIST
@router.get("/faqs", response_model=List[FAQ], response_model_exclude_none=True)
def get_faqs(repository: FAQRepository = Depends(get_repository)):
    return repository.all_faqs()


# 3. GET ONE
@router.get(
    "/faqs/{faq_id}",
    response_model=FAQ,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def get_single_faq(faq_id: str, repository: FAQRepository = Depends(get_repository)):
    parsed_id = parse_faq_id(faq_id)
    if parsed_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="faq not found")

    faq = repository.faq_by_id(parsed_id)
    # An FAQ without any text is not visible
    if not faq.texts:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="faq not found")
    return faq


# 4. SEARCH
@router.get(
    "/search-faqs",
    response_model=List[FAQ],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def search_faqs(
    request: Request,
    lang: str = "",
    query: str = "",
    repository: FAQRepository = Depends(get_repository),
    catalog: LocaleCatalog = Depends(get_catalog),
):
    query = query.strip()
    if not query:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="query param empty")
    lang = lang.strip()
    if not lang:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="lang param empty")

    locale = catalog.match_locale(lang, request.headers.get("accept-language"))
    return repository.search_faqs(locale, query)
