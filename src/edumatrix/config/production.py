import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
SEED_HISTORY_DAYS = int(os.getenv("SEED_HISTORY_DAYS", "7"))
SEED_RANDOM_SEED = int(os.getenv("SEED_RANDOM_SEED", "20240110"))
