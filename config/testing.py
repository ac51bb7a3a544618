from config import db_config_from_env

DB_CONFIG = db_config_from_env(database="workforce_test_db")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
