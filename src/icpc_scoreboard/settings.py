import environ


env = environ.Env(
    USE_CLOUD_LOGGING=(bool, False),
    LOG_LEVEL=(str, "INFO"),
    SCOREBOARD_LOG_LEVEL=(str, "DEBUG"),
    WRONG_ATTEMPT_PENALTY=(int, 20),
)

USE_CLOUD_LOGGING = env("USE_CLOUD_LOGGING")

LOG_LEVEL = env("LOG_LEVEL").upper()

SCOREBOARD_LOG_LEVEL = env("SCOREBOARD_LOG_LEVEL").upper()

WRONG_ATTEMPT_PENALTY = env("WRONG_ATTEMPT_PENALTY")  # minutes
