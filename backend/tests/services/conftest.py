"""Route test fixtures - a seeded category, user and project."""

import pytest


@pytest.fixture
async def seed(client):
    """Create a category, a user and a project through the API; return their ids."""
    category = await client.post("/api/v1/categories", json={"name": "Food"})
    user = await client.post("/api/v1/users", json={
        "email": "alice@acme.com",
        "phone_number": "5551234",
        "name": "Alice Smith",
        "role": "ADMIN",
    })
    project = await client.post("/api/v1/projects", json={
        "title": "Office Move", "description": "Relocation to the new office",
    })
    return {
        "category_id": category.json()["data"],
        "user_id": user.json()["data"],
        "project_id": project.json()["data"],
    }
