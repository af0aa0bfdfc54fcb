"""Field limits and patterns shared by request validation and the record schemas."""

import re

ID_LENGTH = 24

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8

ORGANIZATION_NAME_MIN_LENGTH = 4
GENERIC_MIN_LENGTH = 10

PERSON_NAME_MIN_LENGTH = 2
MAX_EDUCATION_RECORDS = 5
MAX_WORK_EXPERIENCE_RECORDS = 5

JOB_TITLE_MIN_LENGTH = 3
TASK_NAME_MIN_LENGTH = 5
TASK_NAME_MAX_LENGTH = 100
TASK_DESCRIPTION_MAX_LENGTH = 300

LISTING_DESCRIPTION_MAX_LENGTH = 5000

ID_REGEX = re.compile(r"^[a-f0-9]+$")
DATE_REGEX = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
NAME_REGEX = re.compile(r"^[A-Za-z]+$")
PHONE_REGEX = re.compile(r"^[0-9]+(-[0-9]+)*$")
EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[\W_]).+$")
# Letters from any script, Unicode space separators and hyphens
COUNTRY_REGEX = re.compile(r"^(?:[^\W\d_]|[\u0020\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]|-)+$")
