import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "0")))
