import unittest

from icpc_scoreboard.parser import parse_command
from icpc_scoreboard.parser_types import ParsedCommand, ParsedAddTeam, ParsedStart, ParsedSubmit, \
    ParsedQueryRanking, ParsedQuerySubmission, NotACommandError


class TestParseCommand(unittest.TestCase):

    def test_blank_and_unknown_lines(self):
        self.assertIsNone(parse_command(""))
        self.assertIsNone(parse_command("   \n"))
        self.assertIsNone(parse_command("RESTART now"))

    def test_bare_commands(self):
        for keyword in ["FLUSH", "FREEZE", "SCROLL", "END"]:
            self.assertEqual(parse_command(f"{keyword}\n"), ParsedCommand(keyword=keyword))

    def test_add_team(self):
        self.assertEqual(parse_command("ADDTEAM team_1"), ParsedAddTeam(keyword="ADDTEAM", team_name="team_1"))

    def test_start(self):
        self.assertEqual(parse_command("START DURATION 300 PROBLEM 12"),
                         ParsedStart(keyword="START", duration_minutes=300, problem_count=12))

    def test_submit(self):
        self.assertEqual(parse_command("SUBMIT C BY team_1 WITH Wrong_Answer AT 42"),
                         ParsedSubmit(keyword="SUBMIT", problem="C", team_name="team_1", verdict="Wrong_Answer",
                                      time=42))

    def test_query_ranking(self):
        self.assertEqual(parse_command("QUERY_RANKING team_1"),
                         ParsedQueryRanking(keyword="QUERY_RANKING", team_name="team_1"))

    def test_query_submission(self):
        self.assertEqual(parse_command("QUERY_SUBMISSION team_1 WHERE PROBLEM=B AND STATUS=ALL"),
                         ParsedQuerySubmission(keyword="QUERY_SUBMISSION", team_name="team_1", problem_filter="B",
                                               status_filter="ALL"))

    def test_malformed_commands(self):
        with self.assertRaises(NotACommandError):
            parse_command("START DURATION many PROBLEM 3")
        with self.assertRaises(NotACommandError):
            parse_command("SUBMIT A BY team_1 WITH Accepted")
        with self.assertRaises(NotACommandError):
            parse_command("ADDTEAM")


if __name__ == "__main__":
    unittest.main()
