import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "1")))
