"""
Test suite for listing endpoints under /p/listings.

Tests cover:
- Listing creation (admin only) and validation
- Retrieval by id and by each filter
- Partial updates and removal
"""

import pytest


class TestListingCreation:

    def test_create_success(self, client, admin_headers, sample_listing_data):
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Successful listing creation"
        data = body["data"]
        assert len(data["id"]) == 24
        assert data["workType"] == "Hybrid"
        assert data["experienceLevel"] == "Mid-Senior level"
        assert data["salaryRange"] == {"minAmount": 60000, "maxAmount": 85000}
        assert data["status"] == "Open"

    def test_create_requires_admin(self, client, auth_headers, sample_listing_data):
        response = client.post("/p/listings", json=sample_listing_data, headers=auth_headers)

        assert response.status_code == 403

    def test_salary_range_optional(self, client, admin_headers, sample_listing_data):
        del sample_listing_data["salaryRange"]
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["data"]["salaryRange"] is None

    def test_invalid_salary_range(self, client, admin_headers, sample_listing_data):
        sample_listing_data["salaryRange"] = {"minAmount": "lots", "maxAmount": -10}
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Min amount must be a number"},
            {"message": "Max amount must be a positive number"},
        ]

    @pytest.mark.parametrize("amount", ["1e400", "NaN", "-inf"])
    def test_non_finite_salary_amount(self, client, admin_headers, sample_listing_data, amount):
        sample_listing_data["salaryRange"] = {"minAmount": amount, "maxAmount": 5}
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Min amount must be a number"}]

    def test_null_salary_range(self, client, admin_headers, sample_listing_data):
        """A salary range sent as null is checked like an empty one"""
        sample_listing_data["salaryRange"] = None
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Min amount must be a number"},
            {"message": "Max amount must be a number"},
        ]

    def test_invalid_enums(self, client, admin_headers, sample_listing_data):
        sample_listing_data["workType"] = "Underwater"
        sample_listing_data["status"] = "Pending"
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Work type must be one of the following: Hybrid, On-site, Remote"},
            {"message": "Status must be one the following: Open, Closed"},
        ]

    def test_missing_fields(self, client, admin_headers):
        response = client.post("/p/listings", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Title is a required field"},
            {"message": "Organization name is a required field"},
            {"message": "Post date is a required field"},
            {"message": "Work type is a required field"},
            {"message": "Employment type is a required field"},
            {"message": "Experience level is a required field"},
            {"message": "City is a required field"},
            {"message": "Country is a required field"},
            {"message": "Listing description is a required field"},
            {"message": "Status is a required field"},
        ]

    def test_description_too_long(self, client, admin_headers, sample_listing_data):
        sample_listing_data["listingDesc"] = "x" * 5001
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Listing description must be no longer than 5000 characters"}
        ]

    def test_country_with_digits(self, client, admin_headers, sample_listing_data):
        sample_listing_data["country"] = "Germany 2"
        response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Country must only contain letters and/or whitespaces"}]


class TestListingRetrieval:

    def test_get_by_id(self, client, auth_headers, listing):
        response = client.get("/p/listings", params={"id": listing["id"]}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful listing retrieval"
        assert body["data"]["title"] == "Senior Python Developer"

    def test_get_by_unknown_id(self, client, auth_headers):
        response = client.get("/p/listings", params={"id": "65f1c0ffee0000000000abcd"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Listing was not found"}

    @pytest.mark.parametrize("path, param, value", [
        ("/p/listings/status", "status", "Open"),
        ("/p/listings/workType", "workType", "Hybrid"),
        ("/p/listings/employmentType", "employmentType", "Full-time"),
        ("/p/listings/experienceLevel", "experienceLevel", "Mid-Senior level"),
    ])
    def test_filters_match(self, client, auth_headers, listing, path, param, value):
        response = client.get(path, params={param: value}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful retrieval of listings"
        assert [item["id"] for item in body["data"]] == [listing["id"]]

    def test_no_remote_listings(self, client, auth_headers, listing):
        """Filters with no matches are reported as not found"""
        response = client.get("/p/listings/workType", params={"workType": "Remote"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Listings were not found"}

    def test_invalid_filter_value(self, client, auth_headers):
        response = client.get("/p/listings/employmentType", params={"employmentType": "Gig"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": (
            "Employment type must be one of the following: Contract, Full-time, Part-time, Temporary, Other"
        )}]

    def test_filter_returns_every_match(self, client, admin_headers, auth_headers, sample_listing_data):
        for title in ("First opening", "Second opening"):
            client.post("/p/listings", json=dict(sample_listing_data, title=title), headers=admin_headers)

        response = client.get("/p/listings/status", params={"status": "Open"}, headers=auth_headers)

        assert sorted(item["title"] for item in response.json()["data"]) == ["First opening", "Second opening"]


class TestListingUpdate:

    def test_partial_update(self, client, admin_headers, listing):
        response = client.put(
            "/p/listings",
            json={"id": listing["id"], "status": "Closed", "workType": "Remote"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successful listing update"
        assert body["data"]["status"] == "Closed"
        assert body["data"]["workType"] == "Remote"
        assert body["data"]["title"] == listing["title"]

    def test_update_unknown_listing(self, client, admin_headers):
        response = client.put(
            "/p/listings",
            json={"id": "65f1c0ffee0000000000abcd", "title": "Anything"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_update_requires_admin(self, client, auth_headers, listing):
        response = client.put("/p/listings", json={"id": listing["id"], "title": "Hacked"}, headers=auth_headers)

        assert response.status_code == 403

    def test_update_with_null_salary_range(self, client, admin_headers, listing):
        response = client.put(
            "/p/listings",
            json={"id": listing["id"], "salaryRange": None},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"message": "Min amount must be a number"},
            {"message": "Max amount must be a number"},
        ]

    def test_update_validates_supplied_fields(self, client, admin_headers, listing):
        response = client.put(
            "/p/listings",
            json={"id": listing["id"], "organizationName": "ACM"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [{"message": "Organization name must be at least 4 characters long"}]


class TestListingRemoval:

    def test_remove(self, client, admin_headers, auth_headers, listing):
        response = client.request("DELETE", "/p/listings", json={"id": listing["id"]}, headers=admin_headers)

        assert response.status_code == 204
        follow_up = client.get("/p/listings", params={"id": listing["id"]}, headers=auth_headers)
        assert follow_up.status_code == 404

    def test_remove_unknown(self, client, admin_headers):
        response = client.request(
            "DELETE",
            "/p/listings",
            json={"id": "65f1c0ffee0000000000abcd"},
            headers=admin_headers,
        )

        assert response.status_code == 404
