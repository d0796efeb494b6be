import pytest

from conftest import ADMIN_PASSWORD, login_as_admin, make_client, make_settings
from faqaas.errors import StorageError
from faqaas.repository import InMemoryFAQRepository


class TestGuard:
    @pytest.mark.parametrize("path", ["/admin", "/admin/faqs", "/admin/faqs/new", "/admin/faqs/edit/123", "/admin/locales"])
    def test_pages_need_login(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/login"

    @pytest.mark.parametrize("path", ["/admin/faqs/create", "/admin/faqs/update", "/admin/faqs/delete"])
    def test_forms_need_login(self, client, path):
        resp = client.post(path, data={"faqID": "123"})
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/login"

    def test_invalid_cookie(self, client):
        client.cookies.set("Authorization", "not-a-token")
        resp = client.get("/admin/faqs")
        assert resp.headers["location"] == "/admin/login"

    def test_guard_can_be_disabled(self):
        c = make_client(make_settings(ADMIN_PASSWORD="no-admin-password-required"), InMemoryFAQRepository())
        assert c.get("/admin/faqs").status_code == 200


class TestLogin:
    def test_form(self, client):
        resp = client.get("/admin/login")
        assert resp.status_code == 200
        assert "<title>Admin / Login</title>" in resp.text
        assert '<form action="/admin/login" method="post"' in resp.text

    def test_success_sets_cookie(self, client):
        resp = client.post("/admin/login", data={"email": "admin", "password": ADMIN_PASSWORD})
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs"

        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("Authorization=")
        assert "Path=/admin" in cookie
        assert "HttpOnly" in cookie
        assert "expires=" in cookie.lower()
        # HTTP_ALLOWED is on in tests
        assert "Secure" not in cookie

    def test_cookie_opens_admin_pages(self, client):
        client.post("/admin/login", data={"email": "admin", "password": ADMIN_PASSWORD})
        token = client.cookies.get("Authorization")
        assert token

        client.cookies.clear()
        client.cookies.set("Authorization", token)
        assert client.get("/admin/faqs").status_code == 200

    def test_secure_cookie_behind_https(self):
        c = make_client(make_settings(HTTP_ALLOWED=False), InMemoryFAQRepository())
        resp = c.post(
            "/admin/login",
            data={"email": "admin", "password": ADMIN_PASSWORD},
            headers={"X-Forwarded-Proto": "https"},
        )
        assert resp.status_code == 302
        assert "Secure" in resp.headers["set-cookie"]

    @pytest.mark.parametrize("data", [
        {"email": "admin", "password": "wrong"},
        {"email": "root", "password": ADMIN_PASSWORD},
        {},
    ])
    def test_rejected(self, client, data):
        resp = client.post("/admin/login", data=data)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/login"
        assert "set-cookie" not in resp.headers

    def test_logout(self, admin_client):
        resp = admin_client.post("/admin/logout")
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/login"
        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("Authorization=")
        assert "Max-Age=0" in cookie


class TestPages:
    def test_index(self, admin_client):
        resp = admin_client.get("/admin")
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs"

    def test_faqs(self, admin_client):
        resp = admin_client.get("/admin/faqs")
        assert resp.status_code == 200
        assert "<title>Admin / FAQs</title>" in resp.text
        assert 'href="/admin/faqs/edit/123"' in resp.text
        assert "<td>123</td>" in resp.text
        assert "<td>question?</td>" in resp.text
        assert 'href="/admin/faqs/edit/456"' in resp.text
        assert 'href="/admin/faqs/edit/789"' in resp.text

    def test_new(self, admin_client):
        resp = admin_client.get("/admin/faqs/new")
        assert resp.status_code == 200
        assert "<title>Admin / New FAQ</title>" in resp.text
        assert '<form action="/admin/faqs/create" method="post">' in resp.text
        assert 'name="localeCode" value="en"' in resp.text

    def test_edit(self, admin_client):
        resp = admin_client.get("/admin/faqs/edit/123")
        assert resp.status_code == 200
        assert "<title>Admin / Edit FAQ</title>" in resp.text
        assert '<form action="/admin/faqs/delete" method="post">' in resp.text
        assert 'value="Frage?"' in resp.text
        # One form per configured locale, existing or not
        assert resp.text.count('<form action="/admin/faqs/update" method="post"') == 4

    @pytest.mark.parametrize("faq_id", ["abc", "²", "99999999999999999999999"])
    def test_edit_invalid_id(self, admin_client, faq_id):
        assert admin_client.get(f"/admin/faqs/edit/{faq_id}").status_code == 404

    def test_locales(self, admin_client):
        resp = admin_client.get("/admin/locales")
        assert resp.status_code == 200
        assert "<title>Admin / Languages</title>" in resp.text
        assert "<td>de</td>" in resp.text
        assert "German (Deutsch)" in resp.text
        assert "<td>es</td>" in resp.text
        assert "Spanish (español)" in resp.text

    def test_store_failure(self, broken_client):
        resp = broken_client.get("/admin/faqs")
        assert resp.status_code == 500
        assert "internal error" in resp.text


class TestForms:
    def test_create(self, admin_client):
        resp = admin_client.post("/admin/faqs/create", data={"localeCode": "en", "question": "Q", "answer": "A"})
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs/edit/123"

    def test_create_empty_form(self, admin_client):
        resp = admin_client.post("/admin/faqs/create")
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs/edit/123"

    def test_update(self, admin_client):
        resp = admin_client.post(
            "/admin/faqs/update",
            data={"faqID": "111", "localeCode": "fr", "question": "questionFr", "answer": "answerFr"},
        )
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs/edit/111"

    @pytest.mark.parametrize("faq_id", ["abc", "", "²", "99999999999999999999999"])
    def test_update_invalid_id(self, admin_client, faq_id):
        resp = admin_client.post("/admin/faqs/update", data={"faqID": faq_id, "localeCode": "fr"})
        assert resp.status_code == 400

    @pytest.mark.parametrize("faq_id", ["abc", "²", "99999999999999999999999"])
    def test_delete_invalid_id(self, admin_client, faq_id):
        resp = admin_client.post("/admin/faqs/delete", data={"faqID": faq_id})
        assert resp.status_code == 400

    def test_delete(self, admin_client):
        resp = admin_client.post("/admin/faqs/delete", data={"faqID": "333"})
        assert resp.status_code == 302
        assert resp.headers["location"] == "/admin/faqs"

    @pytest.mark.parametrize("path", ["/admin/faqs/create", "/admin/faqs/update", "/admin/faqs/delete"])
    def test_store_failure(self, broken_client, path):
        resp = broken_client.post(path, data={"faqID": "123", "localeCode": "en", "question": "Q", "answer": "A"})
        assert resp.status_code == 500


class StaleIndexRepository(InMemoryFAQRepository):
    def update_search_index(self):
        raise StorageError("refresh failed")


@pytest.mark.parametrize("path,data,location", [
    ("/admin/faqs/create", {"localeCode": "en", "question": "Q", "answer": "A"}, "/admin/faqs/edit/123"),
    ("/admin/faqs/update", {"faqID": "123", "localeCode": "en", "question": "Q", "answer": "A"}, "/admin/faqs/edit/123"),
    ("/admin/faqs/delete", {"faqID": "123"}, "/admin/faqs"),
])
def test_failed_index_refresh_keeps_write(caplog, path, data, location):
    c = make_client(make_settings(), StaleIndexRepository())
    login_as_admin(c)
    resp = c.post(path, data=data)
    assert resp.status_code == 302
    assert resp.headers["location"] == location
    assert "Search index refresh failed" in caplog.text
