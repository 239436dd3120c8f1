import os

# Keep test output readable and independent of a developer's .env
# This must run before src.config is imported by any test
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("STATIC_DIR", "public")
