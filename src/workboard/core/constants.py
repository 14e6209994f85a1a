"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

import string


# Slug generation
MAX_SLUG_LENGTH = 120
SLUG_SUFFIX_BYTES = 3
SLUG_ATTEMPTS = 5
FALLBACK_SLUG = "org"

# String field lengths
MAX_ORGANIZATION_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 256
MAX_NAME_LENGTH = 200
MAX_PROJECT_NAME_LENGTH = 180
MAX_TITLE_LENGTH = 200
MAX_COMMENT_LENGTH = 3000
MAX_DESCRIPTION_LENGTH = 4000

# Password requirements
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Temporary credentials for roster-added members
TEMPORARY_PASSWORD_LENGTH = 12
TEMPORARY_PASSWORD_ALPHABET = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&"
)

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
