import logging
import sys
from typing import Iterable, TextIO

from icpc_scoreboard import settings
from icpc_scoreboard.command_runner import CommandRunner
from icpc_scoreboard.engine import ScoreboardEngine


def start(lines: Iterable[str], output: TextIO) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    logging.getLogger("icpc_scoreboard").setLevel(settings.SCOREBOARD_LOG_LEVEL)
    runner = CommandRunner(ScoreboardEngine(), output)
    runner.run(lines)
    output.flush()


def main() -> None:
    if settings.USE_CLOUD_LOGGING:
        # Delay import so the client is only required when enabled
        import google.cloud.logging
        client = google.cloud.logging.Client()
        client.setup_logging()

    try:
        start(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        pass
