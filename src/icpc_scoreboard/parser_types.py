from dataclasses import dataclass


class NotACommandError(Exception):
    pass


@dataclass(frozen=True)
class ParsedCommand:
    keyword: str


@dataclass(frozen=True)
class ParsedAddTeam(ParsedCommand):
    team_name: str


@dataclass(frozen=True)
class ParsedStart(ParsedCommand):
    duration_minutes: int
    problem_count: int


@dataclass(frozen=True)
class ParsedSubmit(ParsedCommand):
    problem: str
    team_name: str
    verdict: str
    time: int


@dataclass(frozen=True)
class ParsedQueryRanking(ParsedCommand):
    team_name: str


@dataclass(frozen=True)
class ParsedQuerySubmission(ParsedCommand):
    team_name: str
    problem_filter: str
    status_filter: str
