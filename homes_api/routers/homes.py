# homes_api/routers/homes.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.engine import Connection

from homes_api.deps import get_conn
from homes_api.models import Home, HomeIn, HomePatch
from homes_api.repository import homes as repo

LOG = logging.getLogger("homes.api")

router = APIRouter(prefix="/homes", tags=["homes"])

def _not_found(home_id: int) -> HTTPException:
    LOG.info("home id=%s not found", home_id)
    return HTTPException(status_code=404, detail="Home not found")

@router.get("", response_model=List[Home])
def list_homes(conn: Connection = Depends(get_conn)):
    return [Home.from_row(row).to_json() for row in repo.list_all(conn)]

@router.post("", response_model=Home)
def create_home(body: HomeIn, conn: Connection = Depends(get_conn)):
    row = repo.create(conn, body.to_row())
    return Home.from_row(row).to_json()

@router.delete("")
def clear_homes(conn: Connection = Depends(get_conn)):
    repo.delete_all(conn)
    return Response(status_code=200)

@router.get("/{home_id}", response_model=Home)
def show_home(home_id: int = Path(...), conn: Connection = Depends(get_conn)):
    row = repo.get_by_id(conn, home_id)
    if not row:
        raise _not_found(home_id)
    return Home.from_row(row).to_json()

@router.patch("/{home_id}", response_model=Home)
def update_home(body: HomePatch, home_id: int = Path(...), conn: Connection = Depends(get_conn)):
    """
    Sparse update: fields absent from the body are left untouched.
    """
    row = repo.update_fields(conn, home_id, body.changes())
    if not row:
        raise _not_found(home_id)
    return Home.from_row(row).to_json()

@router.put("/{home_id}", response_model=Home)
def replace_home(body: HomeIn, home_id: int = Path(...), conn: Connection = Depends(get_conn)):
    """
    Full replace: every content field is overwritten, the id is kept.
    """
    row = repo.update_fields(conn, home_id, body.to_row())
    if not row:
        raise _not_found(home_id)
    return Home.from_row(row).to_json()

@router.delete("/{home_id}")
def delete_home(home_id: int = Path(...), conn: Connection = Depends(get_conn)):
    if not repo.delete_by_id(conn, home_id):
        raise _not_found(home_id)
    return Response(status_code=200)
