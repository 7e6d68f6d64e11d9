"""Initial league schema: users, teams, players, matches, statistics.

Revision ID: 20251019000000
Revises:
Create Date: 2025-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "teams",
        sa.Column("team_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("team_name", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("coach_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["coach_id"], ["users.user_id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("team_id"),
    )
    op.create_index(op.f("ix_teams_team_name"), "teams", ["team_name"], unique=False)

    op.create_table(
        "players",
        sa.Column("player_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("position", sa.String(length=64), nullable=True),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["team_id"], ["teams.team_id"]),
        sa.PrimaryKeyConstraint("player_id"),
    )
    op.create_index(op.f("ix_players_last_name"), "players", ["last_name"], unique=False)
    op.create_index(op.f("ix_players_team_id"), "players", ["team_id"], unique=False)

    op.create_table(
        "matches",
        sa.Column("match_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("home_team_id", sa.Integer(), nullable=False),
        sa.Column("away_team_id", sa.Integer(), nullable=False),
        sa.Column("date_played", sa.DateTime(timezone=True), nullable=False),
        sa.Column("score_home", sa.Integer(), nullable=True),
        sa.Column("score_away", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["home_team_id"], ["teams.team_id"]),
        sa.ForeignKeyConstraint(["away_team_id"], ["teams.team_id"]),
        sa.PrimaryKeyConstraint("match_id"),
    )
    op.create_index(op.f("ix_matches_home_team_id"), "matches", ["home_team_id"], unique=False)
    op.create_index(op.f("ix_matches_away_team_id"), "matches", ["away_team_id"], unique=False)
    op.create_index(op.f("ix_matches_date_played"), "matches", ["date_played"], unique=False)

    op.create_table(
        "statistics",
        sa.Column("stat_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("match_id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("event_type", sa.String(length=64), nullable=False),
        sa.Column("minute", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["match_id"], ["matches.match_id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.player_id"]),
        sa.PrimaryKeyConstraint("stat_id"),
    )
    op.create_index(op.f("ix_statistics_match_id"), "statistics", ["match_id"], unique=False)
    op.create_index(op.f("ix_statistics_player_id"), "statistics", ["player_id"], unique=False)
    op.create_index(op.f("ix_statistics_event_type"), "statistics", ["event_type"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_statistics_event_type"), table_name="statistics")
    op.drop_index(op.f("ix_statistics_player_id"), table_name="statistics")
    op.drop_index(op.f("ix_statistics_match_id"), table_name="statistics")
    op.drop_table("statistics")
    op.drop_index(op.f("ix_matches_date_played"), table_name="matches")
    op.drop_index(op.f("ix_matches_away_team_id"), table_name="matches")
    op.drop_index(op.f("ix_matches_home_team_id"), table_name="matches")
    op.drop_table("matches")
    op.drop_index(op.f("ix_players_team_id"), table_name="players")
    op.drop_index(op.f("ix_players_last_name"), table_name="players")
    op.drop_table("players")
    op.drop_index(op.f("ix_teams_team_name"), table_name="teams")
    op.drop_table("teams")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
