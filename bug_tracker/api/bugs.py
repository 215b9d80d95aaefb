# bug_tracker/api/bugs.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from bug_tracker.db.store import BugStore
from bug_tracker.models.bugs import Bug

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bugs"])


def get_store(request: Request) -> BugStore:
    return request.app.state.bug_store


@router.get(
    "/",
    response_model=List[Bug],
    description="Get all bugs",
    response_description="List of bugs",
)
def list_bugs(store: BugStore = Depends(get_store)) -> List[Bug]:
    return store.list()


@router.post(
    "/",
    response_model=Bug,
    status_code=201,
    description="Create a new bug",
    response_description="Bug created",
)
def create_bug(bug: Bug, store: BugStore = Depends(get_store)) -> Bug:
    """
    Append a bug built from the validated title and description only;
    any other payload fields were already dropped by validation.
    """
    created = store.append(Bug(title=bug.title, description=bug.description))
    logger.info("Bug created: %r", created.title)
    return created
