"""Create review analytics tables.

Revision ID: create_review_analytics
Revises:
Create Date: 2026-10-19

This migration adds, in the analytics schema:
1. business_profile and review tables (written by the scraper)
2. review_overview: all-time aggregates per (platform, business_profile_id)
3. review_periodical_metric: rolling-window aggregates per (overview_id, period_key)
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "create_review_analytics"
down_revision = None
branch_labels = None
depends_on = None

SCHEMA = "analytics"


def _metric_columns() -> list:
    """Columns shared by the overview and period tables."""
    return [
        sa.Column("average_rating", sa.Float(), nullable=True),
        sa.Column(
            "rating_distribution",
            postgresql.JSONB(),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("positive_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("neutral_count", sa.Integer(), nullable=True),
        sa.Column("negative_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sentiment_total", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sentiment_score", sa.Float(), nullable=False, server_default="0.0"),
        sa.Column(
            "top_keywords", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column("responded_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("response_rate", sa.Float(), nullable=False, server_default="0.0"),
        sa.Column("avg_response_time_hours", sa.Float(), nullable=True),
        sa.Column("median_response_time_hours", sa.Float(), nullable=True),
        sa.Column(
            "platform_metrics", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
    ]


def upgrade() -> None:
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    # ========================================
    # 1. Source tables
    # ========================================
    op.create_table(
        "business_profile",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("platform", sa.String(20), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("team_id", sa.String(255), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        schema=SCHEMA,
    )
    op.create_index(
        "idx_business_profile_platform", "business_profile", ["platform"], schema=SCHEMA
    )
    op.create_index(
        "idx_business_profile_team", "business_profile", ["team_id"], schema=SCHEMA
    )

    op.create_table(
        "review",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("business_profile_id", sa.String(255), nullable=False),
        sa.Column("platform", sa.String(20), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("response_text", sa.Text(), nullable=True),
        sa.Column("response_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("is_recommended", sa.Boolean(), nullable=True),
        sa.Column(
            "review_metadata", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column(
            "platform_data", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        schema=SCHEMA,
    )
    op.create_index(
        "idx_review_profile_platform",
        "review",
        ["business_profile_id", "platform"],
        schema=SCHEMA,
    )
    op.create_index("idx_review_published", "review", ["published_at"], schema=SCHEMA)

    # ========================================
    # 2. Overview
    # ========================================
    op.create_table(
        "review_overview",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("platform", sa.String(20), nullable=False),
        sa.Column("business_profile_id", sa.String(255), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False, server_default="0"),
        *_metric_columns(),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        sa.UniqueConstraint(
            "platform", "business_profile_id", name="uq_review_overview_profile"
        ),
        schema=SCHEMA,
    )
    op.create_index(
        "idx_review_overview_profile",
        "review_overview",
        ["business_profile_id"],
        schema=SCHEMA,
    )

    # ========================================
    # 3. Periodical metrics
    # ========================================
    op.create_table(
        "review_periodical_metric",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "overview_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(f"{SCHEMA}.review_overview.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("period_key", sa.Integer(), nullable=False),
        sa.Column("period_label", sa.String(50), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        *_metric_columns(),
        sa.Column("computed_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "overview_id", "period_key", name="uq_review_periodical_metric_period"
        ),
        schema=SCHEMA,
    )


def downgrade() -> None:
    op.drop_table("review_periodical_metric", schema=SCHEMA)
    op.drop_index(
        "idx_review_overview_profile", table_name="review_overview", schema=SCHEMA
    )
    op.drop_table("review_overview", schema=SCHEMA)
    op.drop_index("idx_review_published", table_name="review", schema=SCHEMA)
    op.drop_index("idx_review_profile_platform", table_name="review", schema=SCHEMA)
    op.drop_table("review", schema=SCHEMA)
    op.drop_index(
        "idx_business_profile_team", table_name="business_profile", schema=SCHEMA
    )
    op.drop_index(
        "idx_business_profile_platform", table_name="business_profile", schema=SCHEMA
    )
    op.drop_table("business_profile", schema=SCHEMA)
