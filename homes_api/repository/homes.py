import logging
from typing import Dict, Any, List

from sqlalchemy import delete, insert, update
from sqlalchemy.engine import Connection

from homes_api.sql import (
    base_select,          # SELECT of every home, ordered by id
    detail_select,        # SELECT for a single home
    homes,                # table object for writes
    MAX_ID,
)

LOG = logging.getLogger("homes.repo")

def _storable(home_id: int) -> bool:
    """Ids outside the key column range cannot be stored, so they are never found."""
    return 0 < home_id <= MAX_ID

def list_all(conn: Connection) -> List[Dict[str, Any]]:
    """
    Returns every stored home as a plain dict with keys matching
    homes_api.models.Home.
    """
    rows = conn.execute(base_select()).mappings().all()
    return [dict(r) for r in rows]

def get_by_id(conn: Connection, home_id: int) -> Dict[str, Any]:
    """
    Returns one home by primary key as a dict,
    or {} if not found.
    """
    if not _storable(home_id):
        return {}
    row = conn.execute(detail_select(home_id)).mappings().first()
    LOG.debug("lookup id=%s found=%s", home_id, row is not None)
    return dict(row) if row else {}

def create(conn: Connection, values: Dict[str, str]) -> Dict[str, Any]:
    """Insert a home and return it with its assigned id."""
    result = conn.execute(insert(homes).values(**values))
    home_id = result.inserted_primary_key[0]
    conn.commit()
    LOG.info("created home id=%s", home_id)
    return get_by_id(conn, home_id)

def update_fields(conn: Connection, home_id: int, values: Dict[str, str]) -> Dict[str, Any]:
    """
    Overwrite only the columns in `values` and return the stored home.
    Returns {} if the id does not exist. An empty `values` is a plain lookup.
    """
    if not values:
        return get_by_id(conn, home_id)
    if not _storable(home_id):
        return {}

    result = conn.execute(update(homes).where(homes.c.id == home_id).values(**values))
    if result.rowcount == 0:
        conn.rollback()
        return {}
    conn.commit()
    LOG.info("updated home id=%s fields=%s", home_id, sorted(values))
    return get_by_id(conn, home_id)

def delete_by_id(conn: Connection, home_id: int) -> bool:
    if not _storable(home_id):
        return False
    result = conn.execute(delete(homes).where(homes.c.id == home_id))
    if result.rowcount == 0:
        conn.rollback()
        return False
    conn.commit()
    LOG.info("deleted home id=%s", home_id)
    return True

def delete_all(conn: Connection) -> int:
    """Bulk delete; returns the number of rows removed."""
    result = conn.execute(delete(homes))
    conn.commit()
    LOG.info("cleared homes table (%s rows)", result.rowcount)
    return result.rowcount
