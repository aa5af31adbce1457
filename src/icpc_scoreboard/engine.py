import logging
from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence

from icpc_scoreboard import settings
from icpc_scoreboard.team import Team, compare_teams, problem_letters
from icpc_scoreboard.types import Submission, BoardRow, RankChange, RankingReport, ScrollResult, \
    DuplicateTeamError, CompetitionStartedError, AlreadyFrozenError, NotFrozenError, TeamNotFoundError

logger = logging.getLogger(__name__)

ANY_FILTER = "ALL"


class ScoreboardEngine:
    """Owns every team of a single contest and the frozen/unfrozen mode of its scoreboard.

    Teams live in a flat list addressed by registration index; `_team_indices` maps
    names to that index.
    """
    _teams: List[Team]
    _team_indices: Dict[str, int]
    _started: bool
    _frozen: bool
    _problem_count: int
    _duration_minutes: int

    def __init__(self, wrong_attempt_penalty: int = settings.WRONG_ATTEMPT_PENALTY) -> None:
        self._wrong_attempt_penalty = wrong_attempt_penalty
        self._teams = []
        self._team_indices = {}
        self._started = False
        self._frozen = False
        self._problem_count = 0
        self._duration_minutes = 0

    @property
    def teams(self) -> Sequence[Team]:
        return tuple(self._teams)

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def problem_count(self) -> int:
        return self._problem_count

    @property
    def duration_minutes(self) -> int:
        return self._duration_minutes

    def get_team(self, name: str) -> Team:
        idx = self._team_indices.get(name)
        if idx is None:
            raise TeamNotFoundError()
        return self._teams[idx]

    def register_team(self, name: str) -> Team:
        if self._started:
            raise CompetitionStartedError()
        if name in self._team_indices:
            raise DuplicateTeamError()

        team = Team(name)
        self._team_indices[name] = len(self._teams)
        self._teams.append(team)
        logger.debug(f"Registered team {name} as #{len(self._teams)}")
        return team

    def start_competition(self, duration_minutes: int, problem_count: int) -> None:
        if self._started:
            raise CompetitionStartedError()

        self._started = True
        self._duration_minutes = duration_minutes
        self._problem_count = problem_count
        letters = problem_letters(problem_count)
        for team in self._teams:
            team.open_problems(letters)

        # Everybody is tied at zero, so the initial order is alphabetical
        for rank, team in enumerate(sorted(self._teams, key=lambda t: t.name), start=1):
            team.rank = rank
        logger.info(f"Competition started with {problem_count} problems for {duration_minutes} minutes")

    def submit(self, team_name: str, problem: str, verdict: str, time: int) -> Optional[Submission]:
        idx = self._team_indices.get(team_name)
        if idx is None:
            logger.warning(f"Dropping submission of unknown team {team_name}")
            return None

        team = self._teams[idx]
        submission = Submission(team_name=team_name, problem=problem, verdict=verdict, time=time)
        team.submissions.append(submission)

        status = team.problems.get(problem)
        if status is None:
            logger.warning(f"Team {team_name} submitted to problem {problem}, which is not part of the contest")
            return submission

        if status.solved:
            return submission
        if not self._frozen:
            status.record(verdict, time)
        elif not status.solved_before_freeze:
            status.hide(verdict, time)
        return submission

    def flush(self) -> None:
        self._derive_all_stats()
        self._assign_rankings()

    def freeze(self) -> None:
        if self._frozen:
            raise AlreadyFrozenError()

        for team in self._teams:
            for status in team.problems.values():
                status.solved_before_freeze = status.solved
        self._frozen = True
        logger.info("Scoreboard frozen")

    def scroll(self) -> ScrollResult:
        """Reveals every hidden problem, lowest ranked team first and smallest problem letter first.

        A rank change is reported each time a reveal moves the team strictly up.
        """
        if not self._frozen:
            raise NotFrozenError()

        self._derive_all_stats()
        self._assign_rankings()
        initial_board = self.board()

        rank_changes: List[RankChange] = []
        while True:
            target = self._find_lowest_ranked_hidden_team()
            if target is None:
                break

            letter, status = target.first_hidden_problem()
            old_rank = target.rank
            logger.debug(f"Revealing problem {letter} of team {target.name} at rank {old_rank} "
                         f"with {len(status.hidden_submissions)} hidden submissions")
            status.reveal()

            # Only the target's problems changed
            target.derive_stats(self._wrong_attempt_penalty)
            ranked_teams = self._assign_rankings()

            if target.rank < old_rank:
                replaced_team_name = ""
                if target.rank < len(ranked_teams):
                    replaced_team_name = ranked_teams[target.rank].name
                rank_changes.append(RankChange(
                    team_name=target.name,
                    replaced_team_name=replaced_team_name,
                    solved_count=target.solved_count,
                    penalty_time=target.penalty_time,
                ))
                logger.debug(f"Team {target.name} moved from rank {old_rank} to {target.rank}")

        final_board = self.board()
        self._frozen = False
        logger.info(f"Scoreboard scrolled with {len(rank_changes)} rank changes")
        return ScrollResult(initial_board=initial_board, rank_changes=rank_changes, final_board=final_board)

    def query_ranking(self, team_name: str) -> RankingReport:
        team = self.get_team(team_name)
        return RankingReport(team_name=team.name, rank=team.rank, is_frozen=self._frozen)

    def query_submission(self, team_name: str, problem_filter: str = ANY_FILTER,
                         status_filter: str = ANY_FILTER) -> Optional[Submission]:
        team = self.get_team(team_name)
        for submission in reversed(team.submissions):
            if problem_filter != ANY_FILTER and submission.problem != problem_filter:
                continue
            if status_filter != ANY_FILTER and submission.verdict != status_filter:
                continue
            return submission
        return None

    def board(self) -> List[BoardRow]:
        return [team.to_board_row() for team in self._sorted_teams()]

    def _derive_all_stats(self) -> None:
        for team in self._teams:
            team.derive_stats(self._wrong_attempt_penalty)

    def _sorted_teams(self) -> List[Team]:
        return sorted(self._teams, key=cmp_to_key(compare_teams))

    def _assign_rankings(self) -> List[Team]:
        ranked_teams = self._sorted_teams()
        for rank, team in enumerate(ranked_teams, start=1):
            team.rank = rank
        return ranked_teams

    def _find_lowest_ranked_hidden_team(self) -> Optional[Team]:
        target = None
        for team in self._teams:
            if team.has_hidden_problems and (target is None or team.rank > target.rank):
                target = team
        return target
