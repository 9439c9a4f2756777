"""Tests for the project and mind-map routes."""

from server.project_db import get_project


def _create(client, name="Website flow", user=None):
    headers = {"X-User-Id": user} if user else {}
    response = client.post("/api/projects", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestProjects:
    """Test listing and creating projects."""

    def test_health_check(self, client):
        """The root path answers ok."""
        assert client.get("/").json()["status"] == "ok"

    def test_create_returns_empty_project(self, client):
        """A created project has an empty graph and camelCase timestamps."""
        project = _create(client)
        assert project["id"].startswith("proj-")
        assert project["name"] == "Website flow"
        assert project["status"] == "Active"
        assert project["nodes"] == []
        assert project["links"] == []
        assert "createdAt" in project
        assert "lastModified" in project

    def test_default_name(self, client):
        """An unnamed project is numbered after the existing ones."""
        _create(client, name="First")
        response = client.post("/api/projects", json={})
        assert response.json()["name"] == "New Project 2"

    def test_list_is_summary_newest_first(self, client):
        """The list holds id, name and status only, newest first."""
        first = _create(client, name="First")
        second = _create(client, name="Second")
        listed = client.get("/api/projects").json()
        assert [p["id"] for p in listed] == [second["id"], first["id"]]
        assert set(listed[0]) == {"id", "name", "status"}

    def test_list_filters_by_user(self, client):
        """A user header limits the list to that user's projects."""
        _create(client, name="Alice's", user="alice")
        _create(client, name="Bob's", user="bob")
        listed = client.get("/api/projects", headers={"X-User-Id": "alice"}).json()
        assert [p["name"] for p in listed] == ["Alice's"]

    def test_other_users_project_is_not_found(self, client):
        """Another user's project looks missing."""
        project = _create(client, user="alice")
        response = client.get(
            f"/api/projects/{project['id']}", headers={"X-User-Id": "bob"}
        )
        assert response.status_code == 404

    def test_delete(self, client):
        """A deleted project is gone and cannot be deleted twice."""
        project = _create(client)
        assert client.delete(f"/api/projects/{project['id']}").json() == {
            "deleted": project["id"]
        }
        assert client.get(f"/api/projects/{project['id']}").status_code == 404
        assert client.delete(f"/api/projects/{project['id']}").status_code == 404


class TestUpdateProject:
    """Test renaming and status changes."""

    def test_status_change(self, client):
        """A dropdown status is stored and shows up in the list."""
        project = _create(client)
        response = client.patch(
            f"/api/projects/{project['id']}", json={"status": "In Progress"}
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["status"] == "In Progress"
        assert updated["name"] == "Website flow"
        assert updated["createdAt"] == project["createdAt"]
        assert client.get("/api/projects").json()[0]["status"] == "In Progress"

    def test_rename_keeps_graph(self, client):
        """Renaming leaves nodes and links alone."""
        project = _create(client)
        client.put(
            f"/api/projects/{project['id']}/workspace",
            json={"nodes": [{"id": "n1", "x": 0, "y": 0}], "links": []},
        )
        response = client.patch(f"/api/projects/{project['id']}", json={"name": "Renamed"})
        assert response.json()["name"] == "Renamed"
        assert [n.id for n in get_project(project["id"]).nodes] == ["n1"]

    def test_unknown_status_is_rejected(self, client):
        """Only the dropdown values are accepted."""
        project = _create(client)
        response = client.patch(
            f"/api/projects/{project['id']}", json={"status": "Someday"}
        )
        assert response.status_code == 422
        assert get_project(project["id"]).status == "Active"

    def test_unknown_project(self, client):
        """Updating a missing project is a 404."""
        response = client.patch("/api/projects/proj-missing", json={"status": "To Do"})
        assert response.status_code == 404


class TestWorkspaceSave:
    """Test whole-graph saves."""

    def test_overwrites_nodes_and_links(self, client):
        """A save replaces the graph and keeps the creation time."""
        project = _create(client)
        payload = {
            "nodes": [
                {"id": "n1", "x": 0, "y": 0, "title": "Home"},
                {
                    "id": "n2", "x": 300, "y": 0,
                    "title": "Checkout", "body": "Pay", "zIndex": 20,
                },
            ],
            "links": [{"from": "n1", "to": "n2"}],
        }
        response = client.put(f"/api/projects/{project['id']}/workspace", json=payload)
        assert response.status_code == 200
        saved = response.json()
        assert [n["id"] for n in saved["nodes"]] == ["n1", "n2"]
        assert saved["links"][0]["from"] == "n1"
        assert saved["nodes"][0]["w"] == 220
        assert saved["nodes"][0]["zIndex"] == 15
        assert saved["nodes"][1]["zIndex"] == 20

        stored = get_project(project["id"])
        assert stored.nodes[1].body == "Pay"
        assert stored.created_at == project["createdAt"]

        # a second save replaces everything (last write wins)
        client.put(
            f"/api/projects/{project['id']}/workspace",
            json={"nodes": [], "links": []},
        )
        assert get_project(project["id"]).nodes == []

    def test_unknown_project(self, client):
        """Saving to a missing project is a 404."""
        response = client.put(
            "/api/projects/proj-missing/workspace", json={"nodes": [], "links": []}
        )
        assert response.status_code == 404

    def test_invalid_payload(self, client):
        """Nodes without coordinates are rejected."""
        project = _create(client)
        response = client.put(
            f"/api/projects/{project['id']}/workspace",
            json={"nodes": [{"id": "n1"}]},
        )
        assert response.status_code == 422


class TestMindmap:
    """Test the node-array compatibility endpoints."""

    def test_get_empty_mindmap(self, client):
        """A new project has an empty node array."""
        project = _create(client)
        response = client.get(f"/api/mindmap/{project['id']}")
        assert response.status_code == 200
        assert response.json() == []

    def test_put_returns_saved_array(self, client):
        """Saving a node array echoes it back."""
        project = _create(client)
        nodes = [{"id": "n1", "x": 100, "y": 50, "title": "Main Idea", "type": "page"}]
        response = client.put(f"/api/mindmap/{project['id']}", json=nodes)
        assert response.status_code == 200
        assert response.json()[0]["title"] == "Main Idea"
        assert client.get(f"/api/mindmap/{project['id']}").json()[0]["id"] == "n1"

    def test_unknown_id_is_404(self, client):
        """Both mind-map routes 404 on unknown ids."""
        assert client.get("/api/mindmap/proj-missing").status_code == 404
        assert client.put("/api/mindmap/proj-missing", json=[]).status_code == 404
