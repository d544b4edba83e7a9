import os

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://backend.test/api")
API_TIMEOUT = 5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
