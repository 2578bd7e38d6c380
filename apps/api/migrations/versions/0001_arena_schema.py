"""arena schema v0 (Arena/Event/Participant/Beast/BattleResult) + summary views + integrity triggers

Revision ID: 0001_arena_schema
Revises:
Create Date: 2026-10-18
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_arena_schema"
down_revision = None
branch_labels = None
depends_on = None

PARTICIPANT_TYPES = (
    "gladiator",
    "retiarius",
    "barbarian",
    "victim",
    "archer",
    "legionary",
    "phalanx",
    "slinger",
    "charioteer",
    "auriga",
    "chariot-owner",
)
STRENGTH_LEVELS = ("novice", "experienced", "veteran")
BEAST_SPECIES = ("lion", "leopard", "jackal", "baboon")

MSG_SURVIVORS = "survivor count cannot exceed participant count"
MSG_NEGATIVE_COUNT = "participant or beast count cannot be negative"


def _in_list(column: str, values) -> str:
    quoted = ", ".join("'" + v + "'" for v in values)
    return f"{column} IN ({quoted})"


def upgrade() -> None:
    # ---- tables ----
    op.create_table(
        "arenas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.CheckConstraint("capacity > 0", name="ck_arenas_capacity_positive"),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("arena_id", sa.Integer(), sa.ForeignKey("arenas.id", ondelete="CASCADE"), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("event_type", sa.String(100), nullable=False),
    )
    op.create_index("ix_events_arena_id", "events", ["arena_id"], unique=False)

    op.create_table(
        "participants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.Column("strength_level", sa.String(50), nullable=True),
        sa.Column("cost", sa.Numeric(10, 2), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("battles_count", sa.Integer(), nullable=True),
        sa.CheckConstraint(_in_list("type", PARTICIPANT_TYPES), name="ck_participants_type"),
        sa.CheckConstraint(_in_list("strength_level", STRENGTH_LEVELS), name="ck_participants_strength_level"),
        sa.CheckConstraint("count >= 0", name="ck_participants_count"),
        sa.CheckConstraint("cost >= 0", name="ck_participants_cost"),
        sa.CheckConstraint("age >= 0", name="ck_participants_age"),
        sa.CheckConstraint("battles_count >= 0", name="ck_participants_battles_count"),
    )
    # non-unique on purpose: plain inserts may add rows for an existing pair,
    # the upsert procedure collapses them
    op.create_index("ix_participants_event_id_type", "participants", ["event_id", "type"], unique=False)

    op.create_table(
        "beasts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("species", sa.String(50), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.Column("strength", sa.Integer(), nullable=True),
        sa.Column("speed", sa.Integer(), nullable=True),
        sa.Column("entertainment_value", sa.Numeric(5, 2), nullable=True),
        sa.CheckConstraint(_in_list("species", BEAST_SPECIES), name="ck_beasts_species"),
        sa.CheckConstraint("count >= 0", name="ck_beasts_count"),
        sa.CheckConstraint("strength >= 0", name="ck_beasts_strength"),
        sa.CheckConstraint("speed >= 0", name="ck_beasts_speed"),
        sa.CheckConstraint("entertainment_value >= 0", name="ck_beasts_entertainment_value"),
    )
    op.create_index("ix_beasts_event_id_species", "beasts", ["event_id", "species"], unique=False)

    op.create_table(
        "battle_results",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("participant_type", sa.String(50), nullable=False),
        sa.Column("survived", sa.Integer(), nullable=False),
        sa.CheckConstraint("survived >= 0", name="ck_battle_results_survived"),
    )
    op.create_index("ix_battle_results_event_id", "battle_results", ["event_id"], unique=False)

    # ---- views ----
    op.execute("""
    CREATE VIEW IF NOT EXISTS event_details AS
    SELECT e.id AS event_id, e.event_date, e.event_type, a.name AS arena_name, a.city
    FROM events e
    JOIN arenas a ON e.arena_id = a.id;
    """)
    op.execute("""
    CREATE VIEW IF NOT EXISTS participants_summary AS
    SELECT event_id, type, SUM(count) AS total_count
    FROM participants
    GROUP BY event_id, type;
    """)
    op.execute("""
    CREATE VIEW IF NOT EXISTS beast_summary AS
    SELECT event_id, species, SUM(count) AS total_count
    FROM beasts
    GROUP BY event_id, species;
    """)

    # ---- survivor-count invariant (SQLite triggers) ----
    # Label resolves against participants.type first, then beasts.species.
    # Labels matching neither table are accepted (SUM over no rows is NULL).
    survivors_exceed = """
      COALESCE(
        (SELECT SUM(count) FROM participants WHERE event_id = NEW.event_id AND type = NEW.participant_type),
        (SELECT SUM(count) FROM beasts WHERE event_id = NEW.event_id AND species = NEW.participant_type)
      ) < NEW.survived
    """
    for when in ("INSERT", "UPDATE"):
        op.execute(f"""
        CREATE TRIGGER IF NOT EXISTS trg_battle_results_survivors_{when.lower()}
        BEFORE {when} ON battle_results
        WHEN {survivors_exceed}
        BEGIN
          SELECT RAISE(ABORT, '{MSG_SURVIVORS}');
        END;
        """)

    # ---- non-negative count (SQLite triggers, alongside CHECK constraints) ----
    for table in ("participants", "beasts"):
        for when in ("INSERT", "UPDATE"):
            op.execute(f"""
            CREATE TRIGGER IF NOT EXISTS trg_{table}_count_non_negative_{when.lower()}
            BEFORE {when} ON {table}
            WHEN NEW.count < 0
            BEGIN
              SELECT RAISE(ABORT, '{MSG_NEGATIVE_COUNT}');
            END;
            """)


def downgrade() -> None:
    # drop triggers first
    for table in ("beasts", "participants"):
        for when in ("update", "insert"):
            op.execute(f"DROP TRIGGER IF EXISTS trg_{table}_count_non_negative_{when};")
    op.execute("DROP TRIGGER IF EXISTS trg_battle_results_survivors_update;")
    op.execute("DROP TRIGGER IF EXISTS trg_battle_results_survivors_insert;")

    op.execute("DROP VIEW IF EXISTS beast_summary;")
    op.execute("DROP VIEW IF EXISTS participants_summary;")
    op.execute("DROP VIEW IF EXISTS event_details;")

    op.drop_index("ix_battle_results_event_id", table_name="battle_results")
    op.drop_table("battle_results")

    op.drop_index("ix_beasts_event_id_species", table_name="beasts")
    op.drop_table("beasts")

    op.drop_index("ix_participants_event_id_type", table_name="participants")
    op.drop_table("participants")

    op.drop_index("ix_events_arena_id", table_name="events")
    op.drop_table("events")

    op.drop_table("arenas")
