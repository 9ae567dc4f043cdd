ENV_FILE = ".env"

# Levels accepted for DOGNAV_LOG_LEVEL
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
