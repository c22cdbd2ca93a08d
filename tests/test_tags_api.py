"""
REST Notes — /tags Endpoint Tests
"""

import pytest


class TestTagsApi:

    @pytest.mark.asyncio
    async def test_create_and_follow_location(self, test_client):
        response = await test_client.post("/tags", json={"name": "rest"})

        assert response.status_code == 201
        assert response.headers["location"] == "http://test/tags/1"

        tag = (await test_client.get(response.headers["location"])).json()
        assert tag == {
            "id": 1,
            "name": "rest",
            "_links": {
                "self": {"href": "http://test/tags/1"},
                "notes": {"href": "http://test/tags/1/notes"},
            },
        }

    @pytest.mark.asyncio
    async def test_self_href_is_a_valid_tag_uri(self, test_client):
        await test_client.post("/tags", json={"name": "rest"})
        href = (await test_client.get("/tags/1")).json()["_links"]["self"]["href"]

        response = await test_client.post("/notes", json={"title": "t", "tagUris": [href]})

        assert response.status_code == 201
        assert (await test_client.get("/notes/1")).json()["tags"] == [href]

    @pytest.mark.asyncio
    async def test_list(self, test_client):
        for name in ("a", "b"):
            await test_client.post("/tags", json={"name": name})

        content = (await test_client.get("/tags")).json()["content"]

        assert [tag["name"] for tag in content] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_tagged_notes(self, test_client):
        await test_client.post("/tags", json={"name": "a"})
        await test_client.post("/tags", json={"name": "b"})
        await test_client.post("/notes", json={"title": "x", "tagUris": ["/tags/1"]})
        await test_client.post("/notes", json={"title": "y", "tagUris": ["/tags/2", "/tags/1"]})
        await test_client.post("/notes", json={"title": "z", "tagUris": ["/tags/2"]})

        content = (await test_client.get("/tags/1/notes")).json()["content"]

        assert [note["title"] for note in content] == ["x", "y"]

    @pytest.mark.asyncio
    async def test_delete_removes_tag_from_notes(self, test_client):
        await test_client.post("/tags", json={"name": "a"})
        await test_client.post("/tags", json={"name": "b"})
        await test_client.post("/notes", json={"title": "x", "tagUris": ["/tags/1", "/tags/2"]})

        response = await test_client.delete("/tags/1")

        assert response.status_code == 204
        assert (await test_client.get("/tags/1")).status_code == 404
        assert (await test_client.get("/notes/1")).json()["tags"] == ["http://test/tags/2"]
        assert (await test_client.delete("/tags/1")).status_code == 204

    @pytest.mark.asyncio
    async def test_patch_name(self, test_client):
        await test_client.post("/tags", json={"name": "a"})

        response = await test_client.patch("/tags/1", json={"name": "renamed"})

        assert response.status_code == 204
        assert (await test_client.get("/tags/1")).json()["name"] == "renamed"

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, test_client):
        response = await test_client.post("/tags", json={"name": ""})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        assert (await test_client.get("/tags/3")).status_code == 404
        assert (await test_client.get("/tags/3/notes")).status_code == 404
        assert (await test_client.patch("/tags/3", json={"name": "x"})).status_code == 404
