"""
Shared test constants: status codes, boundary values and payload fragments
"""

# HTTP status codes
STATUS_OK = 200
STATUS_CREATED = 201
STATUS_NO_CONTENT = 204
STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_METHOD_NOT_ALLOWED = 405
STATUS_CONFLICT = 409
STATUS_GONE = 410
STATUS_UNPROCESSABLE = 422

# Accepted status sets
CREATED = (STATUS_OK, STATUS_CREATED)
DELETED = (STATUS_OK, STATUS_NO_CONTENT)
REJECTED = (STATUS_BAD_REQUEST, STATUS_UNPROCESSABLE)
BAD_ID = (STATUS_BAD_REQUEST, STATUS_NOT_FOUND)
DUPLICATE = (STATUS_BAD_REQUEST, STATUS_CONFLICT, STATUS_UNPROCESSABLE)
MISMATCH = (STATUS_BAD_REQUEST, STATUS_CONFLICT)
ALREADY_DELETED = (STATUS_NOT_FOUND, STATUS_GONE)
TOLERATED = (STATUS_OK, STATUS_BAD_REQUEST, STATUS_UNPROCESSABLE)

# Identifiers
NON_EXISTING_BOOK_ID = 999999
NON_EXISTING_AUTHOR_ID = 999999
NEGATIVE_ID = -1
ZERO_ID = 0
INVALID_ID_STRING = "abc"
ENCODED_SPACE_ID = "%20"
INT32_MAX_OVERFLOW = 2**31
INT32_OVERFLOW_MESSAGE = "The JSON value could not be converted to System.Int32"
EXTRA_PATH_SEGMENT = "/extra"

# Largest integer a JSON client in a browser can represent exactly
MAX_SAFE_INTEGER = 2**53 - 1

# String limits
MAX_TITLE_LENGTH = 255
OVERFLOW_TITLE_LENGTH = MAX_TITLE_LENGTH + 1
MAX_NAME_LENGTH = 255
OVERFLOW_NAME_LENGTH = MAX_NAME_LENGTH + 1
EMPTY_STRING = ""

# Page counts
LARGE_PAGE_COUNT = 999999
NEGATIVE_PAGE_COUNT = -10
DEFAULT_PAGE_COUNT = 100

# Author -> Book references
LARGE_BOOK_ID = 999999
VALID_BOOK_ID = 1
DEFAULT_BOOK_ID = 100

# Books update payloads
IDEMPOTENT_TITLE = "Idempotent Title"
MULTI_FIELD_UPDATE_TITLE = "Multi Field Update"
UPDATED_DESCRIPTION = "Updated description"
UPDATED_EXCERPT = "Updated excerpt"
TITLE_SUFFIX_UPDATED = " Updated"
TITLE_SUFFIX_CHANGED = " Changed"
TITLE_NON_EXISTENT = "Non-existent"
TITLE_ID_MISMATCH = "ID Mismatch"

# Authors update payloads
IDEMPOTENT_FIRST_NAME = "Idempotent FirstName"
UPDATED_FIRST_NAME = "Updated FirstName"
UPDATED_LAST_NAME = "Updated LastName"
FIRST_NAME_SUFFIX_UPDATED = " Updated"
FIRST_NAME_SUFFIX_CHANGED = " Changed"
FIRST_NAME_NON_EXISTENT = "Non-existent"
FIRST_NAME_ID_MISMATCH = "ID Mismatch"

# Unknown field
EXTRA_FIELD_KEY = "extraField"
EXTRA_FIELD_VALUE = "extra"

# Wrongly typed values
INVALID_DATE = "not-a-date"
INVALID_PAGE_COUNT_STRING = "NaN"
INVALID_TITLE_NUMBER = 12345
INVALID_FIRST_NAME_NUMBER = 12345
INVALID_LAST_NAME_NUMBER = 67890
INVALID_ID_BOOK_STRING = "invalid"

# Fill characters for boundary strings
TEST_CHAR_T = "T"
TEST_CHAR_X = "X"
TEST_CHAR_F = "F"
TEST_CHAR_L = "L"

MINIMAL_STRING_A = "A"
MINIMAL_STRING_B = "B"
MINIMAL_STRING_C = "C"

# Matches the date part of an ISO-8601 timestamp
ISO_DATE_PREFIX = r"^\d{4}-\d{2}-\d{2}T"
