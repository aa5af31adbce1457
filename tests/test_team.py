import unittest

from icpc_scoreboard.team import Team, compare_teams, problem_letters
from icpc_scoreboard.types import ACCEPTED


def _team_with_solves(name: str, *solves) -> Team:
    """Builds a team whose problems are solved at the given (time, wrong attempts) pairs."""
    team = Team(name)
    team.open_problems(problem_letters(max(len(solves), 1)))
    for letter, (time, wrong_attempts) in zip(problem_letters(len(solves)), solves):
        status = team.problems[letter]
        for _ in range(wrong_attempts):
            status.record("Wrong_Answer", time)
        status.record(ACCEPTED, time)
    team.derive_stats()
    return team


class TestProblemLetters(unittest.TestCase):

    def test_letters(self):
        self.assertEqual(problem_letters(3), ["A", "B", "C"])
        self.assertEqual(problem_letters(0), [])


class TestDeriveStats(unittest.TestCase):

    def test_penalty_counts_wrong_attempts(self):
        team = _team_with_solves("T", (15, 1), (40, 0))
        self.assertEqual(team.solved_count, 2)
        # 15 + 20 for problem A, 40 for problem B
        self.assertEqual(team.penalty_time, 75)
        self.assertEqual(team.ordered_solve_times, [40, 15])

    def test_custom_penalty(self):
        team = _team_with_solves("T", (15, 2))
        team.derive_stats(wrong_attempt_penalty=5)
        self.assertEqual(team.penalty_time, 25)

    def test_unsolved_wrong_attempts_do_not_count(self):
        team = Team("T")
        team.open_problems(problem_letters(2))
        team.problems["A"].record("Wrong_Answer", 10)
        team.derive_stats()
        self.assertEqual(team.solved_count, 0)
        self.assertEqual(team.penalty_time, 0)

    def test_hidden_solved_problem_does_not_count(self):
        team = _team_with_solves("T", (15, 0))
        team.problems["A"].hide(ACCEPTED, 100)
        team.derive_stats()
        self.assertEqual(team.solved_count, 0)
        self.assertEqual(team.ordered_solve_times, [])

    def test_idempotent(self):
        team = _team_with_solves("T", (15, 1), (40, 3))
        first = (team.solved_count, team.penalty_time, list(team.ordered_solve_times))
        team.derive_stats()
        second = (team.solved_count, team.penalty_time, list(team.ordered_solve_times))
        self.assertEqual(first, second)

    def test_first_hidden_problem_uses_letter_order(self):
        team = Team("T")
        team.open_problems(problem_letters(3))
        team.problems["C"].hide(ACCEPTED, 10)
        team.problems["B"].hide("Wrong_Answer", 20)
        letter, status = team.first_hidden_problem()
        self.assertEqual(letter, "B")
        self.assertIs(status, team.problems["B"])
        self.assertTrue(team.has_hidden_problems)


class TestCompareTeams(unittest.TestCase):

    def test_more_solved_wins_regardless_of_penalty(self):
        slow = _team_with_solves("slow", (200, 5), (250, 5))
        fast = _team_with_solves("fast", (1, 0))
        self.assertLess(compare_teams(slow, fast), 0)
        self.assertGreater(compare_teams(fast, slow), 0)

    def test_lower_penalty_wins(self):
        a = _team_with_solves("b", (10, 0))
        b = _team_with_solves("a", (15, 0))
        self.assertLess(compare_teams(a, b), 0)

    def test_solve_times_break_penalty_ties(self):
        # Both have 60 minutes of penalty, the latest solve decides
        x = _team_with_solves("x", (50, 0), (10, 0))
        y = _team_with_solves("y", (40, 0), (20, 0))
        self.assertGreater(compare_teams(x, y), 0)
        self.assertLess(compare_teams(y, x), 0)

    def test_name_breaks_full_ties(self):
        a = _team_with_solves("alpha", (30, 0))
        b = _team_with_solves("beta", (30, 0))
        self.assertLess(compare_teams(a, b), 0)
        self.assertGreater(compare_teams(b, a), 0)
        self.assertEqual(compare_teams(a, a), 0)


if __name__ == "__main__":
    unittest.main()
