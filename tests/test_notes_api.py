"""
REST Notes — /notes Endpoint Tests
===================================

What:  End-to-end HTTP tests through the full app (middleware, handlers,
       SQLAlchemy store on a temporary SQLite database).
"""

import pytest

from restnotes.config import settings


async def create_tag(client, name):
    response = await client.post("/tags", json={"name": name})
    assert response.status_code == 201
    return response.headers["location"]


async def create_note(client, **payload):
    body = {"title": "A", "body": "B", "tagUris": []}
    body.update(payload)
    return await client.post("/notes", json=body)


class TestCreateAndGet:

    @pytest.mark.asyncio
    async def test_create_then_get(self, test_client):
        response = await create_note(test_client)

        assert response.status_code == 201
        assert response.content == b""
        assert response.headers["location"] == "http://test/notes/1"

        response = await test_client.get("/notes/1")
        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "title": "A",
            "body": "B",
            "tags": [],
            "_links": {
                "self": {"href": "http://test/notes/1"},
                "tags": {"href": "http://test/notes/1/tags"},
            },
        }

    @pytest.mark.asyncio
    async def test_self_link_resolves_back(self, test_client):
        location = (await create_note(test_client, title="round trip")).headers["location"]

        note = (await test_client.get(location)).json()
        again = (await test_client.get(note["_links"]["self"]["href"])).json()

        assert again == note

    @pytest.mark.asyncio
    async def test_tags_kept_in_order(self, test_client):
        first = await create_tag(test_client, "first")
        second = await create_tag(test_client, "second")

        await create_note(test_client, tagUris=["/tags/2", first])

        note = (await test_client.get("/notes/1")).json()
        assert note["tags"] == [second, first]

        tags = (await test_client.get("/notes/1/tags")).json()
        assert [tag["name"] for tag in tags["content"]] == ["second", "first"]
        assert tags["content"][0]["_links"]["self"]["href"] == second

    @pytest.mark.asyncio
    async def test_unknown_tag_rejected(self, test_client):
        response = await create_note(test_client, tagUris=["/tags/999"])

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"] == "The tag '/tags/999' does not exist"
        assert (await test_client.get("/notes")).json() == {"content": []}

    @pytest.mark.asyncio
    async def test_invalid_tag_uri_rejected(self, test_client):
        await create_tag(test_client, "t")

        response = await create_note(test_client, tagUris=["/tags/1", "/tags/one"])

        assert response.status_code == 400
        assert response.json()["details"]["location"] == "/tags/one"
        assert (await test_client.get("/notes")).json() == {"content": []}

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, test_client):
        response = await create_note(test_client, title="   ")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_missing_title_rejected(self, test_client):
        response = await test_client.post("/notes", json={"body": "B"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_missing(self, test_client):
        response = await test_client.get("/notes/5")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_get_tags_of_missing_note(self, test_client):
        assert (await test_client.get("/notes/5/tags")).status_code == 404

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, test_client):
        assert (await test_client.get("/notes/abc")).status_code == 400


class TestList:

    @pytest.mark.asyncio
    async def test_envelope(self, test_client):
        await create_note(test_client, title="one")
        await create_note(test_client, title="two")

        response = await test_client.get("/notes")

        assert response.status_code == 200
        content = response.json()["content"]
        assert [note["title"] for note in content] == ["one", "two"]
        assert content[1]["_links"]["self"]["href"] == "http://test/notes/2"


class TestPatch:

    @pytest.mark.asyncio
    async def test_title_only(self, test_client):
        tag = await create_tag(test_client, "t")
        await create_note(test_client, tagUris=[tag])

        response = await test_client.patch("/notes/1", json={"title": "New"})

        assert response.status_code == 204
        note = (await test_client.get("/notes/1")).json()
        assert (note["title"], note["body"], note["tags"]) == ("New", "B", [tag])

    @pytest.mark.asyncio
    async def test_all_null(self, test_client):
        await create_note(test_client)
        before = (await test_client.get("/notes/1")).json()

        response = await test_client.patch(
            "/notes/1", json={"title": None, "body": None, "tagUris": None}
        )

        assert response.status_code == 204
        assert (await test_client.get("/notes/1")).json() == before

    @pytest.mark.asyncio
    async def test_replace_tags(self, test_client):
        first = await create_tag(test_client, "first")
        second = await create_tag(test_client, "second")
        await create_note(test_client, tagUris=[first])

        await test_client.patch("/notes/1", json={"tagUris": [second, second]})

        assert (await test_client.get("/notes/1")).json()["tags"] == [second, second]

    @pytest.mark.asyncio
    async def test_bad_tag_changes_nothing(self, test_client):
        await create_note(test_client)

        response = await test_client.patch(
            "/notes/1", json={"title": "New", "tagUris": ["/tags/3"]}
        )

        assert response.status_code == 400
        assert (await test_client.get("/notes/1")).json()["title"] == "A"

    @pytest.mark.asyncio
    async def test_missing_note(self, test_client):
        response = await test_client.patch("/notes/9", json={"title": "x"})
        assert response.status_code == 404


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_then_get(self, test_client):
        tag = await create_tag(test_client, "t")
        await create_note(test_client, tagUris=[tag])

        response = await test_client.delete("/notes/1")

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/notes/1")).status_code == 404
        # the tag itself survives
        assert (await test_client.get(tag)).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, test_client):
        assert (await test_client.delete("/notes/12")).status_code == 204


class TestHypermediaBase:

    @pytest.mark.asyncio
    async def test_public_base_url(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "public_base_url", "https://notes.example.com")

        response = await create_note(test_client)
        assert response.headers["location"] == "https://notes.example.com/notes/1"

        note = (await test_client.get("/notes/1")).json()
        assert note["_links"]["tags"]["href"] == "https://notes.example.com/notes/1/tags"

    @pytest.mark.asyncio
    async def test_index(self, test_client):
        response = await test_client.get("/")

        assert response.json() == {
            "_links": {
                "notes": {"href": "http://test/notes"},
                "tags": {"href": "http://test/tags"},
            }
        }

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

        response = await test_client.get("/notes/77")
        assert response.json()["request_id"] == response.headers["x-request-id"]
