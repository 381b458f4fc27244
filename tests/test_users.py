"""User listing, deletion and email update tests."""

from account_service.services.users import UserRepository


def register(client, name, password="password123", email=None):
    """Register a user and return its id."""
    response = client.post("/register", json={"name": name, "password": password, "email": email})
    assert response.status_code == 201
    return response.json()["id"]


def test_list_users_empty(client):
    """Test listing with no users."""
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == {"success": True, "users": []}


def test_list_users(client):
    """Test listing returns every user without password hashes."""
    first = register(client, "first", email="first@example.com")
    second = register(client, "second")

    response = client.get("/users")
    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["id"] for u in users] == [first, second]
    assert users[0]["name"] == "first"
    assert users[0]["email"] == "first@example.com"
    assert users[0]["created_at"] is not None
    assert all(set(u) == {"id", "name", "email", "created_at"} for u in users)


def test_list_users_store_failure(client, monkeypatch):
    """Test listing reports a generic error when the store fails."""

    def broken_list(self):
        raise RuntimeError("lost connection")

    monkeypatch.setattr(UserRepository, "list_users", broken_list)

    response = client.get("/users")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_delete_user(client):
    """Test deleting removes exactly that user."""
    keep = register(client, "keep")
    doomed = register(client, "doomed")

    response = client.request("DELETE", "/user", json={"id": doomed})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "User deleted"}

    ids = [u["id"] for u in client.get("/users").json()["users"]]
    assert ids == [keep]


def test_delete_user_twice(client):
    """Deletion is permanent; a second delete finds nothing."""
    user_id = register(client, "once")

    assert client.request("DELETE", "/user", json={"id": user_id}).status_code == 200
    response = client.request("DELETE", "/user", json={"id": user_id})
    assert response.status_code == 404


def test_delete_nonexistent_user(client):
    """Test deleting an unknown id."""
    response = client.request("DELETE", "/user", json={"id": 99999})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "User not found"}


def test_delete_user_missing_id(client):
    """Test deleting without an id."""
    for body in ({}, {"id": None}, {"id": 0}):
        response = client.request("DELETE", "/user", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "User ID required"


def test_update_email(client):
    """Test updating email is reflected in the listing."""
    user_id = register(client, "mover", email="old@example.com")

    response = client.put("/user", json={"id": user_id, "email": "new@example.com"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Email updated"}

    users = client.get("/users").json()["users"]
    assert users[0]["email"] == "new@example.com"
    assert users[0]["name"] == "mover"


def test_update_email_accepts_numeric_string_id(client):
    """Ids sent as numeric strings are accepted."""
    user_id = register(client, "stringy")

    response = client.put("/user", json={"id": str(user_id), "email": "s@example.com"})
    assert response.status_code == 200


def test_update_email_nonexistent_user(client):
    """Test updating an unknown id."""
    response = client.put("/user", json={"id": 99999, "email": "x@example.com"})
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_update_email_missing_fields(client):
    """Test updating requires both id and email."""
    user_id = register(client, "partial")

    for body in ({"id": user_id}, {"email": "a@example.com"}, {"id": user_id, "email": ""}):
        response = client.put("/user", json=body)
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "ID and new email required"}


def test_out_of_range_id_is_not_found(client):
    """Ids no INTEGER column can hold name no user."""
    register(client, "inrange")

    for user_id in (10**20, 2**31, -(10**20)):
        response = client.request("DELETE", "/user", json={"id": user_id})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "User not found"}

        response = client.put("/user", json={"id": user_id, "email": "x@example.com"})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "User not found"}

    assert len(client.get("/users").json()["users"]) == 1
