from typing import List

from icpc_scoreboard.types import ProblemSummary, ProblemState, BoardRow, RankChange, RankingReport, Submission

FROZEN_WARNING = "Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."
NO_SUBMISSION_FOUND = "Cannot find any submission."


def format_info(message: str) -> str:
    return f"[Info]{message}"


def format_warning(message: str) -> str:
    return f"[Warning]{message}"


def format_error(action: str, reason: str) -> str:
    return f"[Error]{action} failed: {reason}."


def format_problem(problem: ProblemSummary) -> str:
    if problem.state == ProblemState.HIDDEN:
        if problem.wrong_attempts:
            return f"-{problem.wrong_attempts}/{problem.hidden_submission_count}"
        return f"0/{problem.hidden_submission_count}"
    if problem.state == ProblemState.SOLVED:
        if problem.wrong_attempts:
            return f"+{problem.wrong_attempts}"
        return "+"
    if problem.wrong_attempts:
        return f"-{problem.wrong_attempts}"
    return "."


def format_board_row(row: BoardRow) -> str:
    cells = [row.name, str(row.rank), str(row.solved_count), str(row.penalty_time)]
    cells.extend(format_problem(problem) for problem in row.problems)
    return " ".join(cells)


def format_board(board: List[BoardRow]) -> List[str]:
    return [format_board_row(row) for row in board]


def format_rank_change(change: RankChange) -> str:
    return f"{change.team_name} {change.replaced_team_name} {change.solved_count} {change.penalty_time}"


def format_ranking(report: RankingReport) -> str:
    return f"{report.team_name} NOW AT RANKING {report.rank}"


def format_submission(submission: Submission) -> str:
    return f"{submission.team_name} {submission.problem} {submission.verdict} {submission.time}"
