import logging
from typing import Callable, Dict, Iterable, TextIO, cast

from icpc_scoreboard import parser
from icpc_scoreboard.engine import ScoreboardEngine
from icpc_scoreboard.parser_types import ParsedCommand, ParsedAddTeam, ParsedStart, ParsedSubmit, \
    ParsedQueryRanking, ParsedQuerySubmission, NotACommandError
from icpc_scoreboard.scoreboard_printer import format_info, format_warning, format_error, format_board, \
    format_rank_change, format_ranking, format_submission, FROZEN_WARNING, NO_SUBMISSION_FOUND
from icpc_scoreboard.types import ScoreboardError

logger = logging.getLogger(__name__)

_Handler = Callable[[ParsedCommand], None]


class CommandRunner:
    """Feeds commands into the engine one line at a time and writes their results."""
    _engine: ScoreboardEngine
    _output: TextIO
    _handlers: Dict[str, _Handler]
    _error_actions: Dict[str, str]
    _ended: bool

    def __init__(self, engine: ScoreboardEngine, output: TextIO) -> None:
        self._engine = engine
        self._output = output
        self._ended = False
        self._handlers = {
            parser.ADD_TEAM: self._add_team,
            parser.START: self._start,
            parser.SUBMIT: self._submit,
            parser.FLUSH: self._flush,
            parser.FREEZE: self._freeze,
            parser.SCROLL: self._scroll,
            parser.QUERY_RANKING: self._query_ranking,
            parser.QUERY_SUBMISSION: self._query_submission,
            parser.END: self._end,
        }
        self._error_actions = {
            parser.ADD_TEAM: "Add",
            parser.START: "Start",
            parser.FREEZE: "Freeze",
            parser.SCROLL: "Scroll",
            parser.QUERY_RANKING: "Query ranking",
            parser.QUERY_SUBMISSION: "Query submission",
        }

    @property
    def has_ended(self) -> bool:
        return self._ended

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.run_line(line)
            if self._ended:
                break

    def run_line(self, line: str) -> None:
        if self._ended:
            logger.debug(f"Ignoring '{line.strip()}' after the end of the competition")
            return

        try:
            command = parser.parse_command(line)
        except NotACommandError as e:
            logger.warning(f"Skipping malformed command: {e}")
            return
        if command is None:
            return

        logger.debug(f"Running {command}")
        handler = self._handlers[command.keyword]
        try:
            handler(command)
        except ScoreboardError as e:
            self._send(format_error(self._error_actions.get(command.keyword, command.keyword), str(e)))

    def _send(self, text: str) -> None:
        self._output.write(f"{text}\n")

    def _add_team(self, command: ParsedCommand) -> None:
        command = cast(ParsedAddTeam, command)
        self._engine.register_team(command.team_name)
        self._send(format_info("Add successfully."))

    def _start(self, command: ParsedCommand) -> None:
        command = cast(ParsedStart, command)
        self._engine.start_competition(command.duration_minutes, command.problem_count)
        self._send(format_info("Competition starts."))

    def _submit(self, command: ParsedCommand) -> None:
        command = cast(ParsedSubmit, command)
        self._engine.submit(command.team_name, command.problem, command.verdict, command.time)

    def _flush(self, _: ParsedCommand) -> None:
        self._engine.flush()
        self._send(format_info("Flush scoreboard."))

    def _freeze(self, _: ParsedCommand) -> None:
        self._engine.freeze()
        self._send(format_info("Freeze scoreboard."))

    def _scroll(self, _: ParsedCommand) -> None:
        result = self._engine.scroll()
        self._send(format_info("Scroll scoreboard."))
        for line in format_board(result.initial_board):
            self._send(line)
        for change in result.rank_changes:
            self._send(format_rank_change(change))
        for line in format_board(result.final_board):
            self._send(line)

    def _query_ranking(self, command: ParsedCommand) -> None:
        command = cast(ParsedQueryRanking, command)
        report = self._engine.query_ranking(command.team_name)
        self._send(format_info("Complete query ranking."))
        if report.is_frozen:
            self._send(format_warning(FROZEN_WARNING))
        self._send(format_ranking(report))

    def _query_submission(self, command: ParsedCommand) -> None:
        command = cast(ParsedQuerySubmission, command)
        submission = self._engine.query_submission(command.team_name, command.problem_filter, command.status_filter)
        self._send(format_info("Complete query submission."))
        if submission is None:
            self._send(NO_SUBMISSION_FOUND)
        else:
            self._send(format_submission(submission))

    def _end(self, _: ParsedCommand) -> None:
        self._send(format_info("Competition ends."))
        self._ended = True
