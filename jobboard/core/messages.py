"""
User-facing message catalogue: validation failures, response envelopes
and error texts. Clients match on these strings, so treat them as API.
"""

from jobboard.core import constants as c

# Common
BAD_REQUEST = "Bad request"
UNEXPECTED_ERROR = "An unexpected error occurred"
UNAUTHORIZED = "Unauthorized"
FORBIDDEN = "Admin privileges are required"
OWN_ACCOUNT_ONLY = "You can only modify your own account"
ORGANIZATION_NAME_REQUIRED = "Organization name is a required field"
ORGANIZATION_NAME_MIN_LENGTH = f"Organization name must be at least {c.ORGANIZATION_NAME_MIN_LENGTH} characters long"
IS_ONGOING_REQUIRED = "IsOngoing is a required field"
IS_ONGOING_INVALID = "IsOngoing must be either true or false"
COUNTRY_INVALID = "Country must only contain letters and/or whitespaces"

# Auth
AUTHENTICATION_FAILED = "Authentication failed"
AUTHENTICATION_SUCCESSFUL = "Authentication successful"

# User
USERNAME_REQUIRED = "Username is a required field"
USERNAME_ABOVE_MAX_LENGTH = f"Username must be no longer than {c.USERNAME_MAX_LENGTH} characters"
USERNAME_BELOW_MIN_LENGTH = f"Username must be at least {c.USERNAME_MIN_LENGTH} characters long"
EMAIL_REQUIRED = "User email is a required field"
EMAIL_INVALID = "User email is not valid"
PASSWORD_REQUIRED = "Password is a required field"
PASSWORD_BELOW_MIN_LENGTH = f"Password must be at least {c.PASSWORD_MIN_LENGTH} characters long"
PASSWORD_MUST_HAVE_CHARACTERS = (
    "Password must have at least: one lowercase character, one uppercase character, "
    "one number, and one special symbol"
)
ROLE_REQUIRED = "Role is a required field"
ROLE_INVALID = "Role must be either one of the following: Admin, User"
USER_ID_REQUIRED = "User ID is a required field"
USER_ID_INVALID = "User ID must be a string of hex characters"
USER_ID_OUT_OF_LENGTH = f"User ID must be {c.ID_LENGTH} characters long"

USER_REGISTERED = "Successful user registration"
USER_UPDATED = "Successful user update"
USER_RETRIEVED = "Successful user retrieval"
USERS_RETRIEVED = "Successful retrieval of users"
USER_NOT_FOUND = "User was not found"
USERS_NOT_FOUND = "Users were not found"
USER_ALREADY_EXISTS = "Username or email already exists in the database"

# Person
FIRST_NAME_REQUIRED = "First name is a required field"
FIRST_NAME_INVALID = "First name must only contain letters"
FIRST_NAME_BELOW_MIN_LENGTH = f"First name must be at least {c.PERSON_NAME_MIN_LENGTH} characters long"
LAST_NAME_REQUIRED = "Last name is a required field"
LAST_NAME_INVALID = "Last name must only contain letters"
LAST_NAME_BELOW_MIN_LENGTH = f"Last name must be at least {c.PERSON_NAME_MIN_LENGTH} characters long"
PHONE_NUMBER_REQUIRED = "Phone number is a required field"
PHONE_NUMBER_INVALID = "Phone number must only contain digits and/or hyphens"
ADDRESS_REQUIRED = "Address is a required field"
ADDRESS_BELOW_MIN_LENGTH = f"Address must be at least {c.GENERIC_MIN_LENGTH} characters long"
DATE_OF_BIRTH_INVALID = "Date of Birth must be a valid date"
EDUCATION_REQUIRED = "Education is a required field"
EDUCATION_INVALID_FORMAT = "Education field must be an array"
EDUCATION_TOO_LONG = f"Education field must not contain more than {c.MAX_EDUCATION_RECORDS} records"
WORK_EXPERIENCE_REQUIRED = "Work experience is a required field"
WORK_EXPERIENCE_INVALID_FORMAT = "Work experience field must be an array"
WORK_EXPERIENCE_TOO_LONG = f"Work experience field must not contain more than {c.MAX_WORK_EXPERIENCE_RECORDS} records"
PERSON_ID_REQUIRED = "Person ID is a required field"
PERSON_ID_INVALID = "Person ID must be a string of hex characters"
PERSON_ID_OUT_OF_LENGTH = f"Person ID must be {c.ID_LENGTH} characters long"

PERSON_REGISTERED = "Successful personal info registration"
PERSON_UPDATED = "Successful personal info update"
PERSON_RETRIEVED = "Successful personal info retrieval"
PERSON_NOT_FOUND = "Person was not found"
PERSON_ALREADY_EXISTS = "Personal info already exists for this username"

# Education
DEGREE_TITLE_REQUIRED = "Degree title is a required field"
DEGREE_TITLE_MIN_LENGTH = f"Degree title must be at least {c.GENERIC_MIN_LENGTH} characters long"
INSTITUTION_REQUIRED = "Institution is a required field"
INSTITUTION_MIN_LENGTH = f"Institution must be at least {c.GENERIC_MIN_LENGTH} characters long"
STARTING_DATE_REQUIRED = "Starting date is a required field"
STARTING_DATE_INVALID = "Starting date must be a valid date"
GRADUATION_DATE_INVALID = "Graduation date must be a valid date"

# Work experience
JOB_TITLE_REQUIRED = "Job title is a required field"
JOB_TITLE_MIN_LENGTH = f"Job title must be at least {c.JOB_TITLE_MIN_LENGTH} characters long"
WORK_CITY_REQUIRED = "City is a required field"
ENDING_DATE_INVALID = "Ending date must be a valid date"
TASKS_INVALID_FORMAT = "Tasks field must be an array"

# Task
TASK_NAME_REQUIRED = "Task name is a required field"
TASK_NAME_ABOVE_MAX_LENGTH = f"Task name must be no longer than {c.TASK_NAME_MAX_LENGTH} characters"
TASK_NAME_BELOW_MIN_LENGTH = f"Task name must be at least {c.TASK_NAME_MIN_LENGTH} characters long"
TASK_DESCRIPTION_REQUIRED = "Task description is a required field"
TASK_DESCRIPTION_ABOVE_MAX_LENGTH = f"Task description must be no longer than {c.TASK_DESCRIPTION_MAX_LENGTH} characters"
TASK_DESCRIPTION_BELOW_MIN_LENGTH = f"Task description must be at least {c.GENERIC_MIN_LENGTH} characters long"

# Listing
TITLE_REQUIRED = "Title is a required field"
DATE_POSTED_REQUIRED = "Post date is a required field"
DATE_POSTED_INVALID = "Post date must be a valid date"
WORK_TYPE_REQUIRED = "Work type is a required field"
WORK_TYPE_INVALID = "Work type must be one of the following: Hybrid, On-site, Remote"
EMPLOYMENT_TYPE_REQUIRED = "Employment type is a required field"
EMPLOYMENT_TYPE_INVALID = "Employment type must be one of the following: Contract, Full-time, Part-time, Temporary, Other"
EXPERIENCE_LEVEL_REQUIRED = "Experience level is a required field"
EXPERIENCE_LEVEL_INVALID = (
    "Experience level must be one of the following: Internship, Entry-level, "
    "Mid-Senior level, Associate, Director, Executive"
)
CITY_REQUIRED = "City is a required field"
COUNTRY_REQUIRED = "Country is a required field"
LISTING_DESCRIPTION_REQUIRED = "Listing description is a required field"
LISTING_DESCRIPTION_BELOW_MIN_LENGTH = f"Listing description must be at least {c.GENERIC_MIN_LENGTH} characters long"
LISTING_DESCRIPTION_ABOVE_MAX_LENGTH = f"Listing description must be no longer than {c.LISTING_DESCRIPTION_MAX_LENGTH} characters"
STATUS_REQUIRED = "Status is a required field"
STATUS_INVALID = "Status must be one the following: Open, Closed"
LISTING_ID_REQUIRED = "Listing ID is a required field"
LISTING_ID_INVALID = "Listing ID must be a string of hex characters"
LISTING_ID_OUT_OF_LENGTH = f"Listing ID must be {c.ID_LENGTH} characters long"

LISTING_CREATED = "Successful listing creation"
LISTING_UPDATED = "Successful listing update"
LISTING_RETRIEVED = "Successful listing retrieval"
LISTINGS_RETRIEVED = "Successful retrieval of listings"
LISTING_NOT_FOUND = "Listing was not found"
LISTINGS_NOT_FOUND = "Listings were not found"

# Salary range
MIN_AMOUNT_INVALID = "Min amount must be a number"
MIN_AMOUNT_NEGATIVE = "Min amount must be a positive number"
MAX_AMOUNT_INVALID = "Max amount must be a number"
MAX_AMOUNT_NEGATIVE = "Max amount must be a positive number"

# Application
APPLICATION_ID_REQUIRED = "Application ID is a required field"
APPLICATION_ID_INVALID = "Application ID must be a string of hex characters"
APPLICATION_ID_OUT_OF_LENGTH = f"Application ID must be {c.ID_LENGTH} characters long"

APPLICATION_CREATED = "Successful application creation"
APPLICATION_RETRIEVED = "Successful application retrieval"
APPLICATIONS_RETRIEVED = "Successful retrieval of applications"
APPLICATION_NOT_FOUND = "Application was not found"
APPLICATIONS_NOT_FOUND = "Applications were not found"
APPLICATION_ALREADY_EXISTS = "This person has already applied to this listing"
