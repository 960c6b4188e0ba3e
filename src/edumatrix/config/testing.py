SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SESSION_DAYS = 1

SEED_DEMO_DATA = False
SEED_HISTORY_DAYS = 7
SEED_RANDOM_SEED = 1
