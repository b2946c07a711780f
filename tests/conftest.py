import os
import tempfile

# Set test environment variables before importing app modules
os.environ["JWT_SECRET"] = "carmarket-test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CARMARKET_HOME"] = tempfile.mkdtemp(prefix="carmarket-cli-")
