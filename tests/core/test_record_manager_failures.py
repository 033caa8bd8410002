'''Failure handling and write ordering of the record manager, against in-memory stores.'''

import logging
import os

import pytest

from investportal.core.attachments import CATEGORIES
from investportal.core.errors import (
    BlobWriteFailure,
    NotFound,
    StoreWriteFailure,
    ValidationFailure,
)
from investportal.core.record_manager import RecordManager
from investportal.models import District, GalleryItem, Policy, Popup
from tests.fakes import FakeRecordStore, RecordingFileManager

pytest_plugins = 'tests.db_fixtures.uploads'


@pytest.fixture
def events():
    return []


@pytest.fixture
def files(tmp_path, events):
    '''A local file manager in a temporary directory that notes what it does.'''
    manager = RecordingFileManager(str(tmp_path), events)
    manager.prepare(CATEGORIES)
    return manager


@pytest.fixture
def store(events):
    return FakeRecordStore(events)


def stored(files, category):
    return sorted(os.listdir(os.path.join(files.base_path, category)))


class TestCreateRollback:
    '''Files saved for a record that could not be written are removed.'''

    def test_store_failure_removes_new_files(self, files, store, make_image):
        store.fail_writes = True
        manager = RecordManager(District, store=store, files=files)

        with pytest.raises(StoreWriteFailure):
            manager.create({'district_name': 'Pune'},
                           {'awards_photos': [make_image(), make_image('jpg')]})

        assert stored(files, 'districts') == []
        assert store.records == {}

    def test_blob_failure_removes_files_saved_before_it(self, files, store, make_image):
        files.fail_store_at = 2
        manager = RecordManager(District, store=store, files=files)

        with pytest.raises(BlobWriteFailure):
            manager.create({'district_name': 'Nagpur'},
                           {'awards_photos': [make_image(), make_image(), make_image()]})

        assert stored(files, 'districts') == []
        assert store.records == {}

    def test_rollback_is_logged_with_the_traceback(self, files, store, make_image, caplog):
        store.fail_writes = True
        manager = RecordManager(GalleryItem, store=store, files=files)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(StoreWriteFailure):
                manager.create({'title': 'Dunes'}, {'image_url': make_image()})

        record, = [record for record in caplog.records if record.levelno == logging.ERROR]
        assert 'removing 1 new file(s)' in record.getMessage()
        assert record.exc_info is not None
        assert record.exc_info[0] is StoreWriteFailure

    def test_cleanup_failure_does_not_hide_the_store_error(self, files, store, make_image,
                                                           caplog):
        store.fail_writes = True
        files.fail_deletes = True
        manager = RecordManager(GalleryItem, store=store, files=files)

        with caplog.at_level(logging.WARNING):
            with pytest.raises(StoreWriteFailure):
                manager.create({'title': 'Expo'}, {'image_url': make_image()})

        assert len(stored(files, 'gallery')) == 1
        assert 'left orphaned' in caplog.text


class TestUpdateOrdering:
    '''Old files are removed only after the record stops referencing them.'''

    def test_policy_document_replaced_after_the_update(self, files, store, make_document,
                                                      events):
        manager = RecordManager(Policy, store=store, files=files)
        policy = manager.create({'title': 'Land use', 'category': 'Government Policy',
                                 'description': 'Zoning rules'},
                                {'file_url': make_document('pdf')})
        old_reference = policy.file_url
        events.clear()

        updated = manager.update(policy.id, {}, {'file_url': make_document('docx', size=2048)})

        assert updated.file_url != old_reference
        assert updated.file_url.endswith('.docx')
        assert updated.file_size == os.path.getsize(
            os.path.join(files.base_path, 'policies', updated.file_url.rsplit('/', 1)[1])
        )
        assert events == [f'save {updated.file_url}',
                          f'update {policy.id}',
                          f'remove {old_reference}']
        assert not files.exists(old_reference)
        assert files.exists(updated.file_url)

    def test_failed_update_keeps_the_old_file(self, files, store, make_document):
        manager = RecordManager(Policy, store=store, files=files)
        policy = manager.create({'title': 'Safety', 'category': 'Standards',
                                 'description': 'Fire safety norms'},
                                {'file_url': make_document()})

        store.fail_writes = True
        with pytest.raises(StoreWriteFailure):
            manager.update(policy.id, {}, {'file_url': make_document()})

        assert stored(files, 'policies') == [policy.file_url.rsplit('/', 1)[1]]
        assert store.find_by_id(policy.id).file_url == policy.file_url

    def test_failed_removal_of_the_old_file_is_only_logged(self, files, store, make_image,
                                                          caplog):
        manager = RecordManager(Popup, store=store, files=files)
        popup = manager.create({'title': 'Summit', 'description': 'Join us',
                                'start_date': '2026-01-01T00:00:00+00:00',
                                'end_date': '2026-12-31T00:00:00+00:00'},
                               {'background_image': make_image()})

        files.fail_deletes = True
        with caplog.at_level(logging.WARNING):
            updated = manager.update(popup.id, {}, {'background_image': make_image('gif')})

        assert updated.background_image != popup.background_image
        assert files.exists(popup.background_image)
        assert 'left orphaned' in caplog.text

    def test_record_vanishing_mid_update(self, files, store, make_image):
        manager = RecordManager(Popup, store=store, files=files)
        popup = manager.create({'title': 'Launch', 'description': 'New park',
                                'start_date': '2026-01-01T00:00:00+00:00',
                                'end_date': '2026-02-01T00:00:00+00:00'})
        store.before_update = lambda: store.records.pop(popup.id)

        with pytest.raises(NotFound):
            manager.update(popup.id, {}, {'background_image': make_image()})

        assert stored(files, 'popups') == []


class TestConcurrentUpdates:
    '''Two updates of the same record racing each other.'''

    def test_last_write_wins_and_the_replaced_file_is_released(self, files, store,
                                                              make_image):
        manager = RecordManager(Popup, store=store, files=files)
        popup = manager.create({'title': 'Fair', 'description': 'Trade fair',
                                'start_date': '2026-03-01T00:00:00+00:00',
                                'end_date': '2026-03-10T00:00:00+00:00'},
                               {'background_image': make_image()})
        racing = {}

        def run_other_update():
            racing['record'] = manager.update(popup.id, {},
                                              {'background_image': make_image('jpg')})

        # The second update completes between the read and the write of the first one.
        store.before_update = run_other_update
        first = manager.update(popup.id, {}, {'background_image': make_image('gif')})
        second = racing['record']

        final = store.find_by_id(popup.id)
        assert final.background_image == first.background_image
        assert files.exists(first.background_image)
        assert not files.exists(second.background_image)
        assert not files.exists(popup.background_image)
        assert len(stored(files, 'popups')) == 1

    def test_append_builds_on_the_latest_record(self, files, store, make_image):
        manager = RecordManager(District, store=store, files=files)
        district = manager.create({'district_name': 'Wardha'},
                                  {'awards_photos': make_image()})
        old_photo, = district.awards_photos

        # The photos are cleared while the append is still uploading.
        store.before_update = lambda: manager.update(district.id, {'awards_photos': []})
        updated = manager.update(district.id, {}, {'awards_photos': make_image('jpg')})

        final = store.find_by_id(district.id)
        assert final.awards_photos == updated.awards_photos
        assert old_photo not in final.awards_photos
        assert len(final.awards_photos) == 1
        assert all(files.exists(photo) for photo in final.awards_photos)
        assert not files.exists(old_photo)

    def test_kept_reference_removed_in_the_meantime(self, files, store, make_image):
        manager = RecordManager(District, store=store, files=files)
        district = manager.create({'district_name': 'Akola'},
                                  {'awards_photos': [make_image(), make_image()]})
        kept, dropped = district.awards_photos

        store.before_update = lambda: manager.update(district.id, {'awards_photos': [dropped]})
        with pytest.raises(ValidationFailure):
            manager.update(district.id, {'awards_photos': [kept]},
                           {'awards_photos': make_image()})

        assert store.find_by_id(district.id).awards_photos == [dropped]
        assert stored(files, 'districts') == [dropped.rsplit('/', 1)[1]]


class TestDelete:
    def test_delete_removes_files_after_the_record(self, files, store, make_image, events):
        manager = RecordManager(GalleryItem, store=store, files=files)
        item = manager.create({'title': 'Harbour'}, {'image_url': make_image()})
        events.clear()

        manager.delete(item.id)

        assert events == [f'delete {item.id}', f'remove {item.image_url}']
        assert store.find_by_id(item.id) is None

    def test_file_already_missing(self, files, store, make_image):
        manager = RecordManager(GalleryItem, store=store, files=files)
        item = manager.create({'title': 'Bridge'}, {'image_url': make_image()})
        files.delete(item.image_url)

        manager.delete(item.id)

        assert store.records == {}
