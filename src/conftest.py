import os

# api.security refuses to import without a signing secret
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("EMAIL_USER", "owner@example.com")
os.environ.setdefault("EMAIL_PASS", "app-password")
