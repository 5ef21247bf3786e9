from logging.config import fileConfig
from drinkwithme.core.config import settings
from drinkwithme.core.database import Base
from drinkwithme.models.user_db.user_db import User  # noqa: F401
from drinkwithme.models.profile_db.profile_db import Profile  # noqa: F401
from drinkwithme.models.venue_db.venue_db import Venue  # noqa: F401
from drinkwithme.models.selection_db.selection_db import Selection  # noqa: F401
from drinkwithme.models.swipe_db.swipe_db import Swipe  # noqa: F401
from drinkwithme.models.match_db.match_db import Match  # noqa: F401
from drinkwithme.models.message_db.message_db import Message  # noqa: F401
from drinkwithme.models.review_db.review_db import Review  # noqa: F401
from drinkwithme.models.reservation_db.reservation_db import Reservation  # noqa: F401
from sqlalchemy import engine_from_config, pool
from alembic import context

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
