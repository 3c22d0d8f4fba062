from sqlalchemy import MetaData, Table, Column, Integer, String
from sqlalchemy.sql import select

from homes_api.models import FIELDS

metadata = MetaData()

# ---------- Tables ----------
homes = Table(
    "homes", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    *[Column(name, String, nullable=False) for name in FIELDS],
)

# Largest value the Integer key column can hold (PostgreSQL int4)
MAX_ID = 2**31 - 1

# ---------- Column list reused across queries ----------

HOME_COLS = [homes.c.id, *[homes.c[name] for name in FIELDS]]

# ---------- Public selectors ----------

def base_select():
    """
    All homes, oldest first.
    """
    return select(*HOME_COLS).order_by(homes.c.id)

def detail_select(home_id: int):
    return select(*HOME_COLS).where(homes.c.id == home_id)

# ---------- Provisioning ----------

def prepare(bind) -> None:
    """Create the `homes` table if it does not exist yet."""
    metadata.create_all(bind, tables=[homes], checkfirst=True)

def revert(bind) -> None:
    """Undo `prepare`: drop the `homes` table if it exists."""
    metadata.drop_all(bind, tables=[homes], checkfirst=True)
