import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Register the demo staff (Alice, Bob, Sarah) on startup
AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "1")))
