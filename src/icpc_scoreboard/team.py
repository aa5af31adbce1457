from typing import Dict, List, Optional, Tuple

from icpc_scoreboard.types import ProblemStatus, Submission, BoardRow

DEFAULT_WRONG_ATTEMPT_PENALTY = 20


def problem_letters(problem_count: int) -> List[str]:
    return [chr(ord("A") + idx) for idx in range(problem_count)]


class Team:
    name: str
    problems: Dict[str, ProblemStatus]
    submissions: List[Submission]
    solved_count: int
    penalty_time: int
    ordered_solve_times: List[int]
    rank: int

    def __init__(self, name: str) -> None:
        self.name = name
        self.problems = {}
        self.submissions = []
        self.solved_count = 0
        self.penalty_time = 0
        self.ordered_solve_times = []
        self.rank = 0

    def __repr__(self) -> str:
        return f"Team({self.name!r}, rank={self.rank}, solved={self.solved_count}, penalty={self.penalty_time})"

    def open_problems(self, letters: List[str]) -> None:
        self.problems = {letter: ProblemStatus() for letter in letters}

    @property
    def has_hidden_problems(self) -> bool:
        return any(status.hidden for status in self.problems.values())

    def first_hidden_problem(self) -> Optional[Tuple[str, ProblemStatus]]:
        for letter in sorted(self.problems):
            status = self.problems[letter]
            if status.hidden:
                return letter, status
        return None

    def derive_stats(self, wrong_attempt_penalty: int = DEFAULT_WRONG_ATTEMPT_PENALTY) -> None:
        """Recomputes solved count, penalty and tie-break solve times from the problem states."""
        solved_count = 0
        penalty_time = 0
        solve_times = []
        for status in self.problems.values():
            if not status.is_scoring:
                continue
            solved_count += 1
            penalty_time += status.solve_time + wrong_attempt_penalty * status.wrong_attempts
            solve_times.append(status.solve_time)

        self.solved_count = solved_count
        self.penalty_time = penalty_time
        self.ordered_solve_times = sorted(solve_times, reverse=True)

    def to_board_row(self) -> BoardRow:
        return BoardRow(
            name=self.name,
            rank=self.rank,
            solved_count=self.solved_count,
            penalty_time=self.penalty_time,
            problems=tuple(self.problems[letter].summarize(letter) for letter in sorted(self.problems)),
        )


def compare_teams(a: Team, b: Team) -> int:
    """Negative when `a` ranks above `b`, positive when below."""
    if a.solved_count != b.solved_count:
        return b.solved_count - a.solved_count
    if a.penalty_time != b.penalty_time:
        return a.penalty_time - b.penalty_time
    # Only the common prefix counts, longer lists fall through to the name
    for a_time, b_time in zip(a.ordered_solve_times, b.ordered_solve_times):
        if a_time != b_time:
            return a_time - b_time
    if a.name != b.name:
        return -1 if a.name < b.name else 1
    return 0
