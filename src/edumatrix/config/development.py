import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Seed a week of synthetic attendance for the demo roster on start-up
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
SEED_HISTORY_DAYS = int(os.getenv("SEED_HISTORY_DAYS", "7"))
SEED_RANDOM_SEED = int(os.getenv("SEED_RANDOM_SEED", "20240110"))
