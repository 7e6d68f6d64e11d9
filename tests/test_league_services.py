"""Tests for team, player, match, and statistic services against in-memory SQLite."""

import unittest
from datetime import datetime

from league.core.errors import NotFoundError, ValidationError
from league.schemas.matches import MatchWrite
from league.schemas.players import PlayerWrite
from league.schemas.statistics import StatisticWrite
from league.schemas.teams import TeamWrite
from league.services import matches as match_service
from league.services import players as player_service
from league.services import statistics as statistic_service
from league.services import teams as team_service
from league.services.credentials import SqlCredentialStore
from tests.db_helpers import make_session_factory

NOW = datetime(2026, 1, 1, 12, 0, 0)


class LeagueTestCase(unittest.TestCase):
    """Seeds two teams, three players, a past and a future match."""

    def setUp(self) -> None:
        self.db = make_session_factory()()
        coach = SqlCredentialStore(self.db).create("pep", "secret123", "pep@example.com", "coach")
        self.home = team_service.create_team(
            self.db, TeamWrite(team_name="Zagreb United", city="Zagreb", coach_id=coach.user_id)
        )
        self.away = team_service.create_team(self.db, TeamWrite(team_name="Aarhus FC"))
        self.striker = player_service.create_player(
            self.db,
            PlayerWrite(first_name="Ana", last_name="Zec", position="Forward", team_id=self.home.team_id),
        )
        self.winger = player_service.create_player(
            self.db,
            PlayerWrite(first_name="Ivo", last_name="Bilic", position="Winger", team_id=self.home.team_id),
        )
        self.keeper = player_service.create_player(
            self.db,
            PlayerWrite(first_name="Lars", last_name="Berg", position="Goalkeeper", team_id=self.away.team_id),
        )
        self.played = match_service.create_match(
            self.db,
            MatchWrite(
                home_team_id=self.home.team_id,
                away_team_id=self.away.team_id,
                date_played=datetime(2025, 5, 15, 15, 0),
                score_home=2,
                score_away=1,
            ),
        )
        self.fixture = match_service.create_match(
            self.db,
            MatchWrite(
                home_team_id=self.away.team_id,
                away_team_id=self.home.team_id,
                date_played=datetime(2026, 3, 1, 18, 0),
            ),
        )

    def tearDown(self) -> None:
        self.db.close()

    def _event(self, player, event_type: str, minute) -> None:
        statistic_service.create_statistic(
            self.db,
            StatisticWrite(
                match_id=self.played.match_id,
                player_id=player.player_id,
                event_type=event_type,
                minute=minute,
            ),
        )


class TestTeams(LeagueTestCase):
    def test_list_ordered_by_name_with_coach(self) -> None:
        teams = team_service.list_teams(self.db)
        self.assertEqual([t.team_name for t in teams], ["Aarhus FC", "Zagreb United"])
        self.assertIsNone(teams[0].coach_name)
        self.assertEqual(teams[1].coach_name, "pep")

    def test_team_name_required(self) -> None:
        with self.assertRaises(ValidationError):
            team_service.create_team(self.db, TeamWrite(city="Split"))
        with self.assertRaises(ValidationError):
            team_service.update_team(self.db, self.home.team_id, TeamWrite(team_name=""))

    def test_update(self) -> None:
        team = team_service.update_team(
            self.db, self.away.team_id, TeamWrite(team_name="Aarhus AGF", city="Aarhus")
        )
        self.assertEqual(team.team_name, "Aarhus AGF")
        self.assertEqual(team.city, "Aarhus")

    def test_roster_ordered_by_last_name(self) -> None:
        roster = team_service.get_team_players(self.db, self.home.team_id)
        self.assertEqual([p.last_name for p in roster], ["Bilic", "Zec"])

    def test_unknown_team(self) -> None:
        with self.assertRaises(NotFoundError):
            team_service.get_team_players(self.db, 999)
        with self.assertRaises(NotFoundError):
            team_service.delete_team(self.db, 999)


class TestPlayers(LeagueTestCase):
    def test_required_fields(self) -> None:
        cases = [
            PlayerWrite(last_name="Zec", team_id=self.home.team_id),
            PlayerWrite(first_name="Ana", team_id=self.home.team_id),
            PlayerWrite(first_name="Ana", last_name="Zec"),
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ValidationError):
                    player_service.create_player(self.db, data)

    def test_team_name_joined(self) -> None:
        player = player_service.get_player(self.db, self.keeper.player_id)
        self.assertEqual(player.team_name, "Aarhus FC")

    def test_transfer(self) -> None:
        player = player_service.update_player(
            self.db,
            self.keeper.player_id,
            PlayerWrite(first_name="Lars", last_name="Berg", team_id=self.home.team_id),
        )
        self.assertEqual(player.team_name, "Zagreb United")

    def test_stats_for_unknown_player(self) -> None:
        with self.assertRaises(NotFoundError):
            player_service.get_player_stats(self.db, 999)

    def test_delete(self) -> None:
        player_id = self.winger.player_id
        self.assertEqual(
            player_service.delete_player(self.db, player_id),
            {"message": "Player deleted successfully"},
        )
        with self.assertRaises(NotFoundError):
            player_service.get_player(self.db, player_id)


class TestMatches(LeagueTestCase):
    def test_required_fields(self) -> None:
        with self.assertRaises(ValidationError):
            match_service.create_match(
                self.db, MatchWrite(home_team_id=self.home.team_id, date_played=NOW)
            )
        with self.assertRaises(ValidationError):
            match_service.create_match(
                self.db,
                MatchWrite(home_team_id=self.home.team_id, away_team_id=self.away.team_id),
            )

    def test_list_most_recent_first(self) -> None:
        ids = [m.match_id for m in match_service.list_matches(self.db)]
        self.assertEqual(ids, [self.fixture.match_id, self.played.match_id])

    def test_upcoming(self) -> None:
        upcoming = match_service.list_upcoming_matches(self.db, now=NOW)
        self.assertEqual([m.match_id for m in upcoming], [self.fixture.match_id])
        self.assertEqual(upcoming[0].home_team_name, "Aarhus FC")
        self.assertEqual(upcoming[0].away_team_name, "Zagreb United")

    def test_for_team_includes_home_and_away(self) -> None:
        matches = match_service.list_matches_for_team(self.db, self.home.team_id)
        self.assertEqual(len(matches), 2)
        self.assertEqual(match_service.list_matches_for_team(self.db, 999), [])

    def test_record_result(self) -> None:
        match = match_service.update_match(
            self.db,
            self.fixture.match_id,
            MatchWrite(
                home_team_id=self.away.team_id,
                away_team_id=self.home.team_id,
                date_played=datetime(2026, 3, 1, 18, 0),
                score_home=0,
                score_away=3,
            ),
        )
        self.assertEqual((match.score_home, match.score_away), (0, 3))

    def test_match_stats_ordered_by_minute(self) -> None:
        self._event(self.striker, "goal", 75)
        self._event(self.keeper, "yellow_card", 12)
        stats = match_service.get_match_stats(self.db, self.played.match_id)
        self.assertEqual([s.minute for s in stats], [12, 75])
        self.assertEqual(stats[0].team_name, "Aarhus FC")
        with self.assertRaises(NotFoundError):
            match_service.get_match_stats(self.db, 999)


class TestStatistics(LeagueTestCase):
    def test_minute_must_be_numeric(self) -> None:
        for minute in (None, "late", "", "inf", "-inf", "nan", "1e400", 10**400):
            with self.subTest(minute=minute):
                with self.assertRaises(ValidationError) as ctx:
                    self._event(self.striker, "goal", minute)
                self.assertEqual(ctx.exception.message, "Minute must be a number")

    def test_minute_out_of_range(self) -> None:
        for minute in (10**30, "1e30", 201, -1, "-5"):
            with self.subTest(minute=minute):
                with self.assertRaises(ValidationError) as ctx:
                    self._event(self.striker, "goal", minute)
                self.assertEqual(ctx.exception.message, "Minute must be between 0 and 200")
        self.assertEqual(statistic_service.list_statistics(self.db), [])

    def test_minute_bounds_accepted(self) -> None:
        self._event(self.striker, "goal", 0)
        self._event(self.striker, "goal", 200)
        stats = statistic_service.statistics_for_match(self.db, self.played.match_id)
        self.assertEqual([s.minute for s in stats], [0, 200])

    def test_numeric_string_minute_accepted(self) -> None:
        self._event(self.striker, "goal", "42")
        stats = statistic_service.statistics_for_player(self.db, self.striker.player_id)
        self.assertEqual(stats[0].minute, 42)

    def test_required_fields(self) -> None:
        with self.assertRaises(ValidationError):
            statistic_service.create_statistic(
                self.db, StatisticWrite(player_id=self.striker.player_id, event_type="goal", minute=1)
            )
        with self.assertRaises(ValidationError):
            statistic_service.create_statistic(
                self.db, StatisticWrite(match_id=self.played.match_id, player_id=self.striker.player_id, minute=1)
            )

    def test_read_includes_player_and_match(self) -> None:
        self._event(self.striker, "goal", 10)
        stat = statistic_service.list_statistics(self.db)[0]
        self.assertEqual(stat.first_name, "Ana")
        self.assertEqual(stat.home_team_name, "Zagreb United")
        self.assertEqual(stat.away_team_name, "Aarhus FC")
        fetched = statistic_service.get_statistic(self.db, stat.stat_id)
        self.assertEqual(fetched, stat)

    def test_top_scorers(self) -> None:
        self._event(self.striker, "goal", 10)
        self._event(self.striker, "goal", 55)
        self._event(self.keeper, "goal", 80)
        self._event(self.winger, "assist", 10)
        scorers = statistic_service.top_scorers(self.db)
        self.assertEqual([(s.last_name, s.goals) for s in scorers], [("Zec", 2), ("Berg", 1)])
        self.assertEqual(scorers[0].team_name, "Zagreb United")
        self.assertEqual(len(statistic_service.top_scorers(self.db, limit=1)), 1)

    def test_top_scorers_empty(self) -> None:
        self.assertEqual(statistic_service.top_scorers(self.db), [])

    def test_update_and_delete(self) -> None:
        self._event(self.striker, "goal", 10)
        stat_id = statistic_service.list_statistics(self.db)[0].stat_id
        updated = statistic_service.update_statistic(
            self.db,
            stat_id,
            StatisticWrite(
                match_id=self.played.match_id,
                player_id=self.winger.player_id,
                event_type="goal",
                minute=11,
            ),
        )
        self.assertEqual((updated.last_name, updated.minute), ("Bilic", 11))
        statistic_service.delete_statistic(self.db, stat_id)
        with self.assertRaises(NotFoundError):
            statistic_service.get_statistic(self.db, stat_id)


if __name__ == "__main__":
    unittest.main()
