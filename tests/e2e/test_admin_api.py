"""End-to-end tests for the admin API (session cookie, entry management)."""

from datetime import timedelta

import pytest

from folio.config import AuthSettings
from folio.util.clock import FixedClock
from tests.di import TEST_NOW
from tests.harness import create_api_fixture

# API test fixture
api_env = create_api_fixture()


async def _login(client, container) -> None:
    settings = await container.get(AuthSettings)
    response = await client.post(
        "/admin/login", json={"password": settings.admin_password}
    )
    assert response.status_code == 200


class TestAuthFlow:
    """Login, session check and logout."""

    @pytest.mark.asyncio
    async def test_login_sets_cookie(self, api_env):
        client, container = api_env
        settings = await container.get(AuthSettings)

        response = await client.post(
            "/admin/login", json={"password": settings.admin_password}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert settings.cookie_name in response.cookies
        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie

    @pytest.mark.asyncio
    async def test_wrong_password(self, api_env):
        client, _ = api_env

        response = await client.post("/admin/login", json={"password": "nope"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid password"

    @pytest.mark.asyncio
    async def test_me_reports_session(self, api_env):
        client, container = api_env

        anonymous = await client.get("/admin/me")
        await _login(client, container)
        logged_in = await client.get("/admin/me")

        assert anonymous.json() == {"authenticated": False, "admin": None}
        assert logged_in.json()["authenticated"] is True
        assert logged_in.json()["admin"]["subject"] == "admin"

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.post("/admin/logout")
        me = await client.get("/admin/me")

        assert response.status_code == 200
        assert me.json()["authenticated"] is False

    @pytest.mark.asyncio
    async def test_tampered_cookie(self, api_env):
        client, container = api_env
        settings = await container.get(AuthSettings)
        response = await client.get(
            "/admin/dashboard", headers={"Cookie": f"{settings.cookie_name}=not-a-token"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/admin/dashboard"),
            ("GET", "/admin/articles"),
            ("POST", "/admin/articles"),
            ("POST", "/admin/tools/math"),
        ],
    )
    async def test_admin_routes_require_cookie(self, api_env, method, path):
        client, _ = api_env

        response = await client.request(
            method, path, json={"title": "x", "text": "x"}
        )

        assert response.status_code == 401


class TestEntryManagement:
    """Creating, editing and publishing entries through the admin API."""

    @pytest.mark.asyncio
    async def test_create_draft_then_publish(self, api_env):
        # Arrange
        client, container = api_env
        await _login(client, container)

        # Act
        created = await client.post(
            "/admin/articles",
            json={"title": "First Post", "content": "Hello", "tags": "intro"},
        )
        entry_id = created.json()["entry_id"]
        hidden = await client.get("/articles/first-post")
        published = await client.post(f"/admin/articles/{entry_id}/publish")
        visible = await client.get("/articles/first-post")

        # Assert
        assert created.status_code == 201
        assert created.json()["status"] == "draft"
        assert created.json()["slug"] == "first-post"
        assert hidden.status_code == 404
        assert published.json()["status"] == "live"
        assert visible.status_code == 200
        assert visible.json()["entry"]["content"] == "Hello"

    @pytest.mark.asyncio
    async def test_unpublish_hides_entry(self, api_env):
        client, container = api_env
        await _login(client, container)
        created = await client.post(
            "/admin/projects",
            json={"title": "Tool", "published_at": TEST_NOW.isoformat()},
        )
        entry_id = created.json()["entry_id"]

        response = await client.post(f"/admin/projects/{entry_id}/unpublish")
        detail = await client.get("/projects/tool")

        assert response.json()["status"] == "draft"
        assert detail.status_code == 404

    @pytest.mark.asyncio
    async def test_slug_conflict(self, api_env):
        client, container = api_env
        await _login(client, container)
        await client.post("/admin/articles", json={"title": "A", "slug": "same"})

        response = await client.post(
            "/admin/articles", json={"title": "B", "slug": "same"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Slug already exists"

    @pytest.mark.asyncio
    async def test_invalid_publish_date(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.post(
            "/admin/articles", json={"title": "A", "published_at": "not-a-date"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_slug(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.post(
            "/admin/articles", json={"title": "A", "slug": "Bad Slug"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_entry(self, api_env):
        # Arrange
        client, container = api_env
        await _login(client, container)
        created = await client.post(
            "/admin/research", json={"title": "Paper", "slug": "paper"}
        )
        entry_id = created.json()["entry_id"]
        scheduled = (TEST_NOW + timedelta(days=1)).isoformat()

        # Act
        response = await client.put(
            f"/admin/research/{entry_id}",
            json={
                "title": "Paper v2",
                "slug": "paper-v2",
                "description": "Revised",
                "published_at": scheduled,
            },
        )
        loaded = await client.get(f"/admin/research/{entry_id}")

        # Assert
        assert response.status_code == 200
        assert loaded.json()["title"] == "Paper v2"
        assert loaded.json()["slug"] == "paper-v2"
        assert loaded.json()["status"] == "scheduled"

    @pytest.mark.asyncio
    async def test_update_requires_slug(self, api_env):
        client, container = api_env
        await _login(client, container)
        created = await client.post("/admin/articles", json={"title": "A"})
        entry_id = created.json()["entry_id"]

        response = await client.put(f"/admin/articles/{entry_id}", json={"title": "A"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_entry_in_other_section_is_not_found(self, api_env):
        client, container = api_env
        await _login(client, container)
        created = await client.post("/admin/articles", json={"title": "A"})
        entry_id = created.json()["entry_id"]

        response = await client.get(f"/admin/websites/{entry_id}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_admin_list_and_dashboard(self, api_env):
        client, container = api_env
        clock = await container.get(FixedClock)
        await _login(client, container)
        await client.post("/admin/websites", json={"title": "Old site"})
        clock.advance(timedelta(minutes=1))
        await client.post(
            "/admin/websites",
            json={"title": "New site", "published_at": TEST_NOW.isoformat()},
        )

        listing = await client.get("/admin/websites")
        dashboard = await client.get("/admin/dashboard")

        assert listing.json()["total"] == 2
        assert [e["title"] for e in listing.json()["entries"]] == ["New site", "Old site"]
        assert dashboard.json() == {
            "articles": 0,
            "research": 0,
            "projects": 0,
            "websites": 2,
        }

    @pytest.mark.asyncio
    async def test_unknown_section(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.get("/admin/podcasts")

        assert response.status_code == 422


class TestMathTool:
    @pytest.mark.asyncio
    async def test_convert(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.post(
            "/admin/tools/math", json={"text": "Let a<sub>x</sub> be"}
        )

        assert response.status_code == 200
        assert response.json() == {"result": "Let $a_{x}$ be", "stages": None}

    @pytest.mark.asyncio
    async def test_trace(self, api_env):
        client, container = api_env
        await _login(client, container)

        response = await client.post(
            "/admin/tools/math", json={"text": "α", "trace": True}
        )

        stages = response.json()["stages"]
        assert [s["stage"] for s in stages][:3] == ["dot_notation", "fractions", "subscripts"]
        assert stages[-1]["output"] == "\\alpha"
