from typing import List, Optional

from icpc_scoreboard.parser_types import ParsedCommand, ParsedAddTeam, ParsedStart, ParsedSubmit, \
    ParsedQueryRanking, ParsedQuerySubmission, NotACommandError

ADD_TEAM = "ADDTEAM"
START = "START"
SUBMIT = "SUBMIT"
FLUSH = "FLUSH"
FREEZE = "FREEZE"
SCROLL = "SCROLL"
QUERY_RANKING = "QUERY_RANKING"
QUERY_SUBMISSION = "QUERY_SUBMISSION"
END = "END"

_BARE_COMMANDS = {FLUSH, FREEZE, SCROLL, END}


def _get_token(tokens: List[str], idx: int, line: str) -> str:
    if idx >= len(tokens):
        raise NotACommandError(f"Missing argument #{idx} in '{line}'")
    return tokens[idx]


def _get_int(tokens: List[str], idx: int, line: str) -> int:
    token = _get_token(tokens, idx, line)
    try:
        return int(token)
    except ValueError:
        raise NotACommandError(f"Expected a number but got '{token}' in '{line}'")


def _get_filter(tokens: List[str], idx: int, line: str) -> str:
    # PROBLEM=A or STATUS=Accepted, the value is whatever follows the first '='
    token = _get_token(tokens, idx, line)
    _, separator, value = token.partition("=")
    return value if separator else token


def parse_command(line: str) -> Optional[ParsedCommand]:
    """Parses one input line, returns None for blank lines and unknown commands."""
    tokens = line.split()
    if not tokens:
        return None

    keyword = tokens[0]
    if keyword in _BARE_COMMANDS:
        return ParsedCommand(keyword=keyword)
    if keyword == ADD_TEAM:
        return ParsedAddTeam(keyword=keyword, team_name=_get_token(tokens, 1, line))
    if keyword == START:
        return ParsedStart(
            keyword=keyword, duration_minutes=_get_int(tokens, 2, line), problem_count=_get_int(tokens, 4, line))
    if keyword == SUBMIT:
        return ParsedSubmit(
            keyword=keyword,
            problem=_get_token(tokens, 1, line),
            team_name=_get_token(tokens, 3, line),
            verdict=_get_token(tokens, 5, line),
            time=_get_int(tokens, 7, line),
        )
    if keyword == QUERY_RANKING:
        return ParsedQueryRanking(keyword=keyword, team_name=_get_token(tokens, 1, line))
    if keyword == QUERY_SUBMISSION:
        return ParsedQuerySubmission(
            keyword=keyword,
            team_name=_get_token(tokens, 1, line),
            problem_filter=_get_filter(tokens, 3, line),
            status_filter=_get_filter(tokens, 5, line),
        )
    return None
