from config import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(database="workforce_db")

DEBUG = True
LOG_LEVEL = "DEBUG"

# Apply database/schema.sql on startup; every statement is CREATE ... IF NOT EXISTS
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", True)
