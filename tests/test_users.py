"""
Tests for user account endpoints under /p/users.
"""

from jobboard.models.user import User


class TestCurrentUser:

    def test_get_me(self, client, test_user, auth_headers):
        response = client.get("/p/users", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful user retrieval"
        assert body["data"]["id"] == test_user.id
        assert body["data"]["username"] == "johnDoe"
        assert "password" not in body["data"]


class TestUserLookup:
    """Tests for lookups by username, email and role"""

    def test_by_username(self, client, test_user, auth_headers):
        response = client.get("/p/users/username", params={"username": "johnDoe"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "john.doe@mail.com"

    def test_by_username_not_found(self, client, auth_headers):
        response = client.get("/p/users/username", params={"username": "nobody"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "User was not found"}

    def test_by_username_too_long(self, client, auth_headers):
        response = client.get(
            "/p/users/username",
            params={"username": "thisUsernameIsWayTooLongToBeValid"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Username must be no longer than 20 characters"}]

    def test_by_username_missing(self, client, auth_headers):
        response = client.get("/p/users/username", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Username is a required field"}]

    def test_by_email(self, client, test_user, auth_headers):
        response = client.get("/p/users/email", params={"email": "john.doe@mail.com"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["username"] == "johnDoe"

    def test_by_email_invalid(self, client, auth_headers):
        response = client.get("/p/users/email", params={"email": "john.doe"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "User email is not valid"}]

    def test_by_role_admin_only(self, client, auth_headers):
        response = client.get("/p/users/role", params={"role": "User"}, headers=auth_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Admin privileges are required"}

    def test_by_role(self, client, test_user, admin_headers):
        response = client.get("/p/users/role", params={"role": "User"}, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful retrieval of users"
        assert [u["username"] for u in body["data"]] == ["johnDoe"]

    def test_by_role_invalid(self, client, admin_headers):
        response = client.get("/p/users/role", params={"role": "Owner"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Role must be either one of the following: Admin, User"}]


class TestAccountUpdate:

    def test_update_own_account(self, client, test_user, auth_headers):
        response = client.put(
            "/p/users/account",
            json={"id": test_user.id, "email": "john.new@mail.com"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful user update"
        assert body["data"]["email"] == "john.new@mail.com"
        assert body["data"]["username"] == "johnDoe"

    def test_update_password_is_hashed(self, client, db_session, test_user, auth_headers):
        client.put(
            "/p/users/account",
            json={"id": test_user.id, "password": "N3w&Password"},
            headers=auth_headers,
        )

        response = client.post("/login", json={"username": "johnDoe", "password": "N3w&Password"})
        assert response.status_code == 200

    def test_update_other_account_forbidden(self, client, admin_user, auth_headers):
        response = client.put(
            "/p/users/account",
            json={"id": admin_user.id, "email": "taken@mail.com"},
            headers=auth_headers,
        )

        assert response.status_code == 403

    def test_admin_updates_unknown_account(self, client, admin_headers):
        response = client.put(
            "/p/users/account",
            json={"id": "65f1c0ffee0000000000abcd", "username": "someone"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"message": "User was not found"}

    def test_update_to_taken_username(self, client, test_user, admin_user, admin_headers):
        response = client.put(
            "/p/users/account",
            json={"id": admin_user.id, "username": test_user.username},
            headers=admin_headers,
        )

        assert response.status_code == 409

    def test_update_invalid_id(self, client, auth_headers):
        """A short id with capitals fails both the length and the hex rule"""
        response = client.put("/p/users/account", json={"id": "ABC123"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "User ID must be 24 characters long"},
            {"message": "User ID must be a string of hex characters"},
        ]


class TestAccountRemoval:

    def test_admin_removes_account(self, client, db_session, test_user, admin_headers):
        user_id = test_user.id
        response = client.request("DELETE", "/p/users/account", json={"id": user_id}, headers=admin_headers)

        assert response.status_code == 204
        assert response.content == b""
        assert db_session.get(User, user_id) is None

    def test_remove_requires_admin(self, client, test_user, auth_headers):
        response = client.request("DELETE", "/p/users/account", json={"id": test_user.id}, headers=auth_headers)

        assert response.status_code == 403

    def test_remove_unknown_account(self, client, admin_headers):
        response = client.request(
            "DELETE",
            "/p/users/account",
            json={"id": "65f1c0ffee0000000000abcd"},
            headers=admin_headers,
        )

        assert response.status_code == 404
