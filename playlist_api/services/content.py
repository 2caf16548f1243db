"""
Shared CRUD for user-owned content (songs and playlists).

Every write stamps owner with the caller's id; the owner sent by the client
is never trusted. Updates and deletes are limited to the owner or an admin.
"""

import logging
from typing import Any, TypeVar

from sqlalchemy.orm import Session

from playlist_api.core.exceptions import Forbidden, NotFound
from playlist_api.core.security import ROLE_ADMIN
from playlist_api.models import User
from playlist_api.schemas.auth import SecurityProfile

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def stamp_owner(data: dict[str, Any], profile: SecurityProfile) -> dict[str, Any]:
    """Return a copy of data with owner set to the caller's id."""
    stamped = dict(data)
    stamped["owner"] = profile.id
    return stamped


def ensure_can_modify(entity: Any, profile: SecurityProfile) -> None:
    """Raise Forbidden unless the caller owns the entity or is an admin."""
    if profile.role == ROLE_ADMIN or entity.owner == profile.id:
        return
    logger.warning(
        "Denied write on %s id=%s by user_id=%s",
        type(entity).__name__,
        entity.id,
        profile.id,
    )
    raise Forbidden("Only the owner or an admin may modify this resource")


def get_or_404(db: Session, model: type[ModelT], entity_id: int) -> ModelT:
    entity = db.get(model, entity_id)
    if entity is None:
        raise NotFound(f"{model.__name__} not found")
    return entity


def _filtered(db: Session, model: type, filters: dict[str, Any]):
    query = db.query(model)
    for field, value in filters.items():
        if value is not None:
            query = query.filter(getattr(model, field) == value)
    return query


def list_entities(
    db: Session,
    model: type[ModelT],
    filters: dict[str, Any],
    limit: int,
    offset: int,
) -> list[ModelT]:
    """Equality filters on the given columns; None values are ignored."""
    return (
        _filtered(db, model, filters)
        .order_by(model.id)
        .offset(offset)
        .limit(limit)
        .all()
    )


def count_entities(db: Session, model: type, filters: dict[str, Any]) -> int:
    return _filtered(db, model, filters).count()


def create_entity(
    db: Session,
    model: type[ModelT],
    data: dict[str, Any],
    profile: SecurityProfile,
    counter: str,
) -> ModelT:
    """
    Insert a new record owned by the caller and bump the caller's counter
    (e.g. number_of_songs_submitted) in the same commit.
    """
    entity = model(**stamp_owner(data, profile))
    db.add(entity)
    column = getattr(User, counter)
    db.query(User).filter(User.id == profile.id).update(
        {column: column + 1}, synchronize_session=False
    )
    db.commit()
    db.refresh(entity)
    logger.info("Created %s id=%s owner=%s", model.__name__, entity.id, entity.owner)
    return entity


def update_entity(
    db: Session,
    model: type[ModelT],
    entity_id: int,
    changes: dict[str, Any],
    profile: SecurityProfile,
) -> ModelT:
    """Apply changes (partial or full replace) and re-stamp the owner."""
    entity = get_or_404(db, model, entity_id)
    ensure_can_modify(entity, profile)
    for field, value in stamp_owner(changes, profile).items():
        setattr(entity, field, value)
    db.commit()
    db.refresh(entity)
    return entity


def delete_entity(
    db: Session, model: type, entity_id: int, profile: SecurityProfile
) -> None:
    entity = get_or_404(db, model, entity_id)
    ensure_can_modify(entity, profile)
    db.delete(entity)
    db.commit()
    logger.info("Deleted %s id=%s", model.__name__, entity_id)
