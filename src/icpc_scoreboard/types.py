import enum
from dataclasses import dataclass, field
from typing import List, Tuple, Optional

ACCEPTED = "Accepted"


class ScoreboardError(Exception):
    reason = "unexpected error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.reason)


class DuplicateTeamError(ScoreboardError):
    reason = "duplicated team name"


class CompetitionStartedError(ScoreboardError):
    reason = "competition has started"


class AlreadyFrozenError(ScoreboardError):
    reason = "scoreboard has been frozen"


class NotFrozenError(ScoreboardError):
    reason = "scoreboard has not been frozen"


class TeamNotFoundError(ScoreboardError):
    reason = "cannot find the team"


@enum.unique
class ProblemState(enum.Enum):
    OPEN = "open"
    SOLVED = "solved"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class Submission:
    team_name: str
    problem: str
    verdict: str
    time: int

    @property
    def is_accepted(self) -> bool:
        return self.verdict == ACCEPTED


@dataclass
class ProblemStatus:
    """Resolution state of one problem for one team."""
    solved: bool = False
    solve_time: int = 0
    wrong_attempts: int = 0
    hidden: bool = False
    hidden_submissions: List[Tuple[str, int]] = field(default_factory=list)
    solved_before_freeze: bool = False

    @property
    def state(self) -> ProblemState:
        if self.hidden:
            return ProblemState.HIDDEN
        if self.solved:
            return ProblemState.SOLVED
        return ProblemState.OPEN

    @property
    def is_scoring(self) -> bool:
        return self.solved and not self.hidden

    def record(self, verdict: str, time: int) -> None:
        # Once solved, later submissions never change the score
        if self.solved:
            return
        if verdict == ACCEPTED:
            self.solved = True
            self.solve_time = time
        else:
            self.wrong_attempts += 1

    def hide(self, verdict: str, time: int) -> None:
        self.hidden_submissions.append((verdict, time))
        self.hidden = True

    def reveal(self) -> None:
        for verdict, time in self.hidden_submissions:
            self.record(verdict, time)
        self.hidden = False
        self.hidden_submissions.clear()

    def summarize(self, letter: str) -> "ProblemSummary":
        return ProblemSummary(
            letter=letter,
            state=self.state,
            wrong_attempts=self.wrong_attempts,
            hidden_submission_count=len(self.hidden_submissions),
        )


@dataclass(frozen=True)
class ProblemSummary:
    letter: str
    state: ProblemState
    wrong_attempts: int
    hidden_submission_count: int


@dataclass(frozen=True)
class BoardRow:
    name: str
    rank: int
    solved_count: int
    penalty_time: int
    problems: Tuple[ProblemSummary, ...]


@dataclass(frozen=True)
class RankChange:
    team_name: str
    # Empty when no team sits right below the improved team
    replaced_team_name: str
    solved_count: int
    penalty_time: int


@dataclass(frozen=True)
class RankingReport:
    team_name: str
    rank: int
    is_frozen: bool


@dataclass(frozen=True)
class ScrollResult:
    initial_board: List[BoardRow]
    rank_changes: List[RankChange]
    final_board: List[BoardRow]
