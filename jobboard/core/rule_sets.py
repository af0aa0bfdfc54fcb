"""
Named rule chains for every field the API accepts.

Each chain starts with its presence check; ``when_present(chain)`` gives the
variant used for fields that may be left out (partial updates, optional
dates). Nested record specs list fields by attribute name; request bodies
carry the camelCase form of the same names.
"""

from jobboard.core import constants as c
from jobboard.core import messages as m
from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, RoleType, WorkType, values
from jobboard.core.rules import (
    EachItem,
    boolean,
    identifier,
    is_list,
    matches,
    max_items,
    max_length,
    min_length,
    non_negative,
    numeric,
    one_of,
    required,
    valid_date,
)

# User
USERNAME = [
    required(m.USERNAME_REQUIRED),
    min_length(c.USERNAME_MIN_LENGTH, m.USERNAME_BELOW_MIN_LENGTH),
    max_length(c.USERNAME_MAX_LENGTH, m.USERNAME_ABOVE_MAX_LENGTH),
]
EMAIL = [required(m.EMAIL_REQUIRED), matches(c.EMAIL_REGEX, m.EMAIL_INVALID)]
PASSWORD = [
    required(m.PASSWORD_REQUIRED),
    min_length(c.PASSWORD_MIN_LENGTH, m.PASSWORD_BELOW_MIN_LENGTH),
    matches(c.PASSWORD_REGEX, m.PASSWORD_MUST_HAVE_CHARACTERS),
]
# Login only needs the credentials to be present
LOGIN_USERNAME = [required(m.USERNAME_REQUIRED)]
LOGIN_PASSWORD = [required(m.PASSWORD_REQUIRED)]
ROLE = [required(m.ROLE_REQUIRED), one_of(values(RoleType), m.ROLE_INVALID)]
USER_ID = identifier(m.USER_ID_REQUIRED, m.USER_ID_OUT_OF_LENGTH, m.USER_ID_INVALID)

# Embedded records
TASK_ITEM = [
    ("name", [
        required(m.TASK_NAME_REQUIRED),
        max_length(c.TASK_NAME_MAX_LENGTH, m.TASK_NAME_ABOVE_MAX_LENGTH),
        min_length(c.TASK_NAME_MIN_LENGTH, m.TASK_NAME_BELOW_MIN_LENGTH),
    ], False),
    ("description", [
        required(m.TASK_DESCRIPTION_REQUIRED),
        max_length(c.TASK_DESCRIPTION_MAX_LENGTH, m.TASK_DESCRIPTION_ABOVE_MAX_LENGTH),
        min_length(c.GENERIC_MIN_LENGTH, m.TASK_DESCRIPTION_BELOW_MIN_LENGTH),
    ], False),
]

IS_ONGOING = [required(m.IS_ONGOING_REQUIRED), boolean(m.IS_ONGOING_INVALID)]

EDUCATION_ITEM = [
    ("degree_title", [required(m.DEGREE_TITLE_REQUIRED), min_length(c.GENERIC_MIN_LENGTH, m.DEGREE_TITLE_MIN_LENGTH)], False),
    ("institution", [required(m.INSTITUTION_REQUIRED), min_length(c.GENERIC_MIN_LENGTH, m.INSTITUTION_MIN_LENGTH)], False),
    ("starting_date", [required(m.STARTING_DATE_REQUIRED), valid_date(m.STARTING_DATE_INVALID)], False),
    ("graduation_date", [valid_date(m.GRADUATION_DATE_INVALID)], True),
    ("is_ongoing", IS_ONGOING, False),
]

WORK_EXPERIENCE_ITEM = [
    ("job_title", [required(m.JOB_TITLE_REQUIRED), min_length(c.JOB_TITLE_MIN_LENGTH, m.JOB_TITLE_MIN_LENGTH)], False),
    ("organization_name", [
        required(m.ORGANIZATION_NAME_REQUIRED),
        min_length(c.ORGANIZATION_NAME_MIN_LENGTH, m.ORGANIZATION_NAME_MIN_LENGTH),
    ], False),
    ("city", [required(m.WORK_CITY_REQUIRED)], False),
    ("country", [matches(c.COUNTRY_REGEX, m.COUNTRY_INVALID)], True),
    ("starting_date", [required(m.STARTING_DATE_REQUIRED), valid_date(m.STARTING_DATE_INVALID)], False),
    ("ending_date", [valid_date(m.ENDING_DATE_INVALID)], True),
    ("is_ongoing", IS_ONGOING, False),
    ("tasks", [is_list(m.TASKS_INVALID_FORMAT), EachItem(TASK_ITEM, camel_keys=False)], True),
]


def education_list(camel_keys: bool):
    return [
        required(m.EDUCATION_REQUIRED),
        is_list(m.EDUCATION_INVALID_FORMAT),
        max_items(c.MAX_EDUCATION_RECORDS, m.EDUCATION_TOO_LONG),
        EachItem(EDUCATION_ITEM, camel_keys),
    ]


def work_experience_list(camel_keys: bool):
    return [
        required(m.WORK_EXPERIENCE_REQUIRED),
        is_list(m.WORK_EXPERIENCE_INVALID_FORMAT),
        max_items(c.MAX_WORK_EXPERIENCE_RECORDS, m.WORK_EXPERIENCE_TOO_LONG),
        EachItem(WORK_EXPERIENCE_ITEM, camel_keys),
    ]


# Person
FIRST_NAME = [
    required(m.FIRST_NAME_REQUIRED),
    min_length(c.PERSON_NAME_MIN_LENGTH, m.FIRST_NAME_BELOW_MIN_LENGTH),
    matches(c.NAME_REGEX, m.FIRST_NAME_INVALID),
]
LAST_NAME = [
    required(m.LAST_NAME_REQUIRED),
    min_length(c.PERSON_NAME_MIN_LENGTH, m.LAST_NAME_BELOW_MIN_LENGTH),
    matches(c.NAME_REGEX, m.LAST_NAME_INVALID),
]
PHONE_NUMBER = [required(m.PHONE_NUMBER_REQUIRED), matches(c.PHONE_REGEX, m.PHONE_NUMBER_INVALID)]
ADDRESS = [required(m.ADDRESS_REQUIRED), min_length(c.GENERIC_MIN_LENGTH, m.ADDRESS_BELOW_MIN_LENGTH)]
DATE_OF_BIRTH = [valid_date(m.DATE_OF_BIRTH_INVALID)]
EDUCATION = education_list(camel_keys=True)
WORK_EXPERIENCE = work_experience_list(camel_keys=True)
PERSON_ID = identifier(m.PERSON_ID_REQUIRED, m.PERSON_ID_OUT_OF_LENGTH, m.PERSON_ID_INVALID)

# Listing
TITLE = [required(m.TITLE_REQUIRED)]
ORGANIZATION_NAME = [
    required(m.ORGANIZATION_NAME_REQUIRED),
    min_length(c.ORGANIZATION_NAME_MIN_LENGTH, m.ORGANIZATION_NAME_MIN_LENGTH),
]
DATE_POSTED = [required(m.DATE_POSTED_REQUIRED), valid_date(m.DATE_POSTED_INVALID)]
WORK_TYPE = [required(m.WORK_TYPE_REQUIRED), one_of(values(WorkType), m.WORK_TYPE_INVALID)]
EMPLOYMENT_TYPE = [required(m.EMPLOYMENT_TYPE_REQUIRED), one_of(values(EmploymentType), m.EMPLOYMENT_TYPE_INVALID)]
EXPERIENCE_LEVEL = [required(m.EXPERIENCE_LEVEL_REQUIRED), one_of(values(ExperienceLevel), m.EXPERIENCE_LEVEL_INVALID)]
CITY = [required(m.CITY_REQUIRED)]
COUNTRY = [required(m.COUNTRY_REQUIRED), matches(c.COUNTRY_REGEX, m.COUNTRY_INVALID)]
LISTING_DESC = [
    required(m.LISTING_DESCRIPTION_REQUIRED),
    min_length(c.GENERIC_MIN_LENGTH, m.LISTING_DESCRIPTION_BELOW_MIN_LENGTH),
    max_length(c.LISTING_DESCRIPTION_MAX_LENGTH, m.LISTING_DESCRIPTION_ABOVE_MAX_LENGTH),
]
STATUS = [required(m.STATUS_REQUIRED), one_of(values(ListingStatus), m.STATUS_INVALID)]
LISTING_ID = identifier(m.LISTING_ID_REQUIRED, m.LISTING_ID_OUT_OF_LENGTH, m.LISTING_ID_INVALID)

# Only checked when a salary range is supplied
MIN_AMOUNT = [numeric(m.MIN_AMOUNT_INVALID), non_negative(m.MIN_AMOUNT_NEGATIVE)]
MAX_AMOUNT = [numeric(m.MAX_AMOUNT_INVALID), non_negative(m.MAX_AMOUNT_NEGATIVE)]

SALARY_RANGE_ITEM = [
    ("min_amount", MIN_AMOUNT, False),
    ("max_amount", MAX_AMOUNT, False),
]

# Application
APPLICATION_ID = identifier(m.APPLICATION_ID_REQUIRED, m.APPLICATION_ID_OUT_OF_LENGTH, m.APPLICATION_ID_INVALID)

