"""
Tests for the persistence functions: absence is None or an empty list,
updates touch only the supplied fields.
"""

from datetime import date

from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, RoleType, WorkType
from jobboard.crud import application as crud_application
from jobboard.crud import listing as crud_listing
from jobboard.crud import person as crud_person
from jobboard.crud import user as crud_user
from jobboard.models.application import Application
from jobboard.models.listing import Listing
from jobboard.models.person import Person

UNKNOWN_ID = "65f1c0ffee0000000000abcd"


def _store_listing(db_session, work_type=WorkType.HYBRID):
    return crud_listing.create(db_session, Listing(
        title="Platform Engineer",
        organization_name="Acme Corp",
        date_posted=date(2024, 5, 2),
        work_type=work_type,
        employment_type=EmploymentType.CONTRACT,
        experience_level=ExperienceLevel.DIRECTOR,
        city="Oslo",
        country="Norway",
        listing_desc="Own the internal developer platform.",
        status=ListingStatus.OPEN,
    ))


class TestUserCrud:

    def test_lookups(self, db_session, test_user, admin_user):
        assert crud_user.get_by_id(db_session, test_user.id).username == "johnDoe"
        assert crud_user.get_by_email(db_session, "admin@mail.com").id == admin_user.id
        assert [u.id for u in crud_user.get_by_role(db_session, RoleType.ADMIN)] == [admin_user.id]

    def test_absent_records(self, db_session):
        assert crud_user.get_by_id(db_session, UNKNOWN_ID) is None
        assert crud_user.get_by_username(db_session, "ghost") is None
        assert crud_user.get_by_role(db_session, RoleType.USER) == []
        assert crud_user.update(db_session, UNKNOWN_ID, {"email": "x@mail.com"}) is None
        assert crud_user.delete(db_session, UNKNOWN_ID) is None

    def test_update_touches_only_supplied_fields(self, db_session, test_user):
        password = test_user.password

        updated = crud_user.update(db_session, test_user.id, {"email": "johnny@mail.com"})

        assert updated.email == "johnny@mail.com"
        assert updated.username == "johnDoe"
        assert updated.password == password


class TestPersonCrud:

    def test_create_and_get(self, db_session):
        person = crud_person.create(db_session, Person(
            username="janeRoe",
            first_name="Jane",
            last_name="Roe",
            phone_number="555-0199",
            address="12 Quay Street, Dublin",
        ))

        assert crud_person.get_by_id(db_session, person.id).username == "janeRoe"
        assert crud_person.get_by_username(db_session, "janeRoe").education == []

    def test_absent_person(self, db_session):
        assert crud_person.get_by_id(db_session, UNKNOWN_ID) is None
        assert crud_person.delete(db_session, UNKNOWN_ID) is None


class TestListingCrud:

    def test_filters(self, db_session):
        remote = _store_listing(db_session, WorkType.REMOTE)
        _store_listing(db_session, WorkType.ON_SITE)

        assert [item.id for item in crud_listing.get_by_work_type(db_session, WorkType.REMOTE)] == [remote.id]
        assert len(crud_listing.get_by_employment_type(db_session, EmploymentType.CONTRACT)) == 2
        assert crud_listing.get_by_experience_level(db_session, ExperienceLevel.INTERNSHIP) == []
        assert crud_listing.get_by_status(db_session, ListingStatus.CLOSED) == []

    def test_update_and_delete(self, db_session):
        listing = _store_listing(db_session)

        updated = crud_listing.update(db_session, listing.id, {"status": ListingStatus.CLOSED})
        assert updated.status is ListingStatus.CLOSED
        assert updated.title == "Platform Engineer"

        assert crud_listing.delete(db_session, listing.id).id == listing.id
        assert crud_listing.get_by_id(db_session, listing.id) is None


class TestApplicationCrud:

    def test_delete_by_unique_index(self, db_session):
        listing = _store_listing(db_session)
        application = crud_application.create(db_session, Application(person_id=UNKNOWN_ID, listing_id=listing.id))

        assert crud_application.get_by_unique_index(db_session, UNKNOWN_ID, listing.id).id == application.id

        deleted = crud_application.delete_by_unique_index(db_session, UNKNOWN_ID, listing.id)

        assert deleted.id == application.id
        assert crud_application.get_by_person_id(db_session, UNKNOWN_ID) == []
        assert crud_application.delete_by_unique_index(db_session, UNKNOWN_ID, listing.id) is None
