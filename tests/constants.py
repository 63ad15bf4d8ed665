"""Identifiers shared by the test suite."""

from datetime import datetime, timezone

USER_ID = "65a1f0c2e4b0a1b2c3d4e5f1"
OTHER_USER_ID = "65a1f0c2e4b0a1b2c3d4e5f2"
MISSING_ID = "65a1f0c2e4b0a1b2c3d4e5ff"
COMMENT_ID = "75b2f0c2e4b0a1b2c3d4e5a1"
OTHER_COMMENT_ID = "75b2f0c2e4b0a1b2c3d4e5a2"
EMAIL = "a@b.com"
OTHER_EMAIL = "bob@example.com"

CREATED_AT = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
