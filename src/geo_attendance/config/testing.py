from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

IMGBB_API_KEY = ""

AUTO_INIT_DB = False
AUTO_SEED_DB = False
