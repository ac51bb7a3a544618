import os

from config import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(database="workforce_db", user="payouts")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
