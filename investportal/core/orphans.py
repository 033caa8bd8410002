"""Finds stored files that no record references anymore.

Orphans are the accepted outcome of a crash between a record write and the
removal of the files it released, or of a removal that failed."""

import logging
from typing import List, Set

from investportal.extensions import db, file_manager
from .attachments import CATEGORIES
from .errors import BlobDeleteFailure

log = logging.getLogger(__name__)


def attachment_models() -> list:
    """List the mapped models that declare attachment fields."""
    return [mapper.class_ for mapper in db.Model.registry.mappers
            if list(getattr(mapper.class_, '__attachments__', ()))]


def referenced_files() -> Set[str]:
    """Collect every reference held by a record of any model."""
    referenced = set()
    for model in attachment_models():
        for record in model.query:
            referenced.update(model.__attachments__.references(record))
    return referenced


def find_orphans() -> List[str]:
    """List the stored files of every category that no record references."""
    referenced = referenced_files()
    return [reference
            for category in CATEGORIES
            for reference in file_manager.list(category)
            if reference not in referenced]


def prune_orphans(dry_run: bool = False) -> List[str]:
    """Delete the orphaned files and return their references.

    With `dry_run`, only report what would be deleted."""
    orphans = find_orphans()
    if dry_run:
        return orphans

    pruned = []
    for reference in orphans:
        try:
            file_manager.delete(reference)
        except BlobDeleteFailure as err:
            log.warning(err.message)
        else:
            pruned.append(reference)
    log.info(f'Pruned {len(pruned)} of {len(orphans)} orphaned file(s)')
    return pruned
