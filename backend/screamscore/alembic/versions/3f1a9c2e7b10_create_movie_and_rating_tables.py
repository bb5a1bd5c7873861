"""Create movie and rating tables.

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa
import sqlmodel.sql.sqltypes
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2e7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "movie",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "title", sqlmodel.sql.sqltypes.AutoString(length=512), nullable=False
        ),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("tagline", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("runtime", sa.Integer(), nullable=True),
        sa.Column("tmdb_id", sa.Integer(), nullable=True),
        sa.Column(
            "imdb_id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=True
        ),
        sa.Column("poster_path", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("backdrop_path", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("trailer_key", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("genres", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("director", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("cast", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("tmdb_rating", sa.Float(), nullable=True),
        sa.Column("tmdb_votes", sa.Integer(), nullable=True),
        sa.Column("imdb_rating", sa.Float(), nullable=True),
        sa.Column("imdb_votes", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_movie_tmdb_id"), "movie", ["tmdb_id"], unique=True)
    op.create_index(op.f("ix_movie_imdb_id"), "movie", ["imdb_id"], unique=False)
    op.create_index(
        op.f("ix_movie_created_at"), "movie", ["created_at"], unique=False
    )

    op.create_table(
        "rating",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("scream", sa.Integer(), nullable=False),
        sa.Column("psychological", sa.Integer(), nullable=False),
        sa.Column("suspense", sa.Integer(), nullable=False),
        sa.Column("review", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column(
            "author", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "scream BETWEEN 1 AND 100", name="ck_rating_scream_range"
        ),
        sa.CheckConstraint(
            "psychological BETWEEN 1 AND 100", name="ck_rating_psychological_range"
        ),
        sa.CheckConstraint(
            "suspense BETWEEN 1 AND 100", name="ck_rating_suspense_range"
        ),
        sa.ForeignKeyConstraint(["movie_id"], ["movie.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rating_movie_id"), "rating", ["movie_id"], unique=False)
    op.create_index(
        op.f("ix_rating_created_at"), "rating", ["created_at"], unique=False
    )


def downgrade():
    op.drop_index(op.f("ix_rating_created_at"), table_name="rating")
    op.drop_index(op.f("ix_rating_movie_id"), table_name="rating")
    op.drop_table("rating")
    op.drop_index(op.f("ix_movie_created_at"), table_name="movie")
    op.drop_index(op.f("ix_movie_imdb_id"), table_name="movie")
    op.drop_index(op.f("ix_movie_tmdb_id"), table_name="movie")
    op.drop_table("movie")
