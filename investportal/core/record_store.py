"""The record store: persists the records of one model.

Data is loaded through the model's marshmallow schema before it is written,
so malformed values and database constraint violations surface the same way,
as a StoreWriteFailure."""

import logging
from typing import Callable, List, Mapping, Optional, Type

from marshmallow import Schema, ValidationError
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from investportal.extensions import db
from .errors import StoreWriteFailure

log = logging.getLogger(__name__)


class RecordStore:
    """Create, read, update and delete records of a single model."""

    def __init__(self, model: Type[db.Model], schema: Type[Schema]):
        self.model = model
        self.schema = schema

    def _load(self, data, **kwargs):
        try:
            return self.schema().load(data, **kwargs)
        except ValidationError as err:
            raise StoreWriteFailure(err.messages)

    def _commit(self):
        try:
            db.session.commit()
        except IntegrityError as err:
            db.session.rollback()
            log.exception(err)
            raise StoreWriteFailure('Data integrity violated.') from err
        except SQLAlchemyError as err:
            db.session.rollback()
            log.exception(err)
            raise StoreWriteFailure('The record could not be saved.') from err

    def create(self, data: dict):
        """Validate and insert a new record."""
        record = self._load(data)
        db.session.add(record)
        self._commit()
        return record

    def find_by_id(self, record_id) -> Optional[db.Model]:
        """Return the record with the given ID or None."""
        return db.session.get(self.model, record_id)

    def update(self, record_id, data: dict,
               merge: Optional[Callable[[db.Model], Mapping]] = None) -> Optional[db.Model]:
        """Apply a partial update to a record. Return None if there is no such record.

        The row is read afresh and locked for the rest of the transaction.
        If `merge` is given, it is called with that row and the values it
        returns are written along with `data`."""
        record = db.session.get(self.model, record_id,
                                with_for_update=True, populate_existing=True)
        if record is None:
            return None

        if merge is not None:
            try:
                data = dict(data, **merge(record))
            except Exception:
                db.session.rollback()
                raise

        try:
            self._load(data, instance=record, partial=True)
        except StoreWriteFailure:
            db.session.rollback()
            raise
        self._commit()
        return record

    def delete(self, record_id) -> bool:
        """Delete a record. Return whether it existed."""
        record = self.find_by_id(record_id)
        if record is None:
            return False

        db.session.delete(record)
        self._commit()
        return True

    def find(self, search: Optional[str] = None, **equals) -> List[db.Model]:
        """List the records equal to the given values.

        If `search` is given, it is matched case-insensitively as a substring
        of any of the model's searchable columns."""
        query = self.model.query.filter_by(**equals)
        searchable = getattr(self.model, '__searchable__', ())
        if search and searchable:
            like_query = f'%{search}%'
            query = query.filter(or_(*(getattr(self.model, column).ilike(like_query)
                                       for column in searchable)))

        ordering = []
        for column in getattr(self.model, '__ordering__', ('id',)):
            if column.startswith('-'):
                ordering.append(getattr(self.model, column[1:]).desc())
            else:
                ordering.append(getattr(self.model, column).asc())
        return query.order_by(*ordering).all()
