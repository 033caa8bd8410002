'''Reading multipart form submissions into record manager arguments.'''

import json

import pytest
from werkzeug.datastructures import MultiDict

from investportal.core.errors import ValidationFailure
from investportal.core.forms import read_submission
from investportal.records import industries, popups
from investportal.schemas import IndustrySchema, PolicySchema, PopupSchema

pytest_plugins = 'tests.db_fixtures.uploads'


class TestReadSubmission:
    def test_json_strings_are_decoded(self):
        form = MultiDict({
            'name': 'Textiles',
            'leadership': json.dumps([{'role': 'Chair', 'name': 'A. Rao'}]),
            'gallery': '[]',
        })

        submission = read_submission(IndustrySchema, form)

        assert submission.fields['leadership'] == [{'role': 'Chair', 'name': 'A. Rao'}]
        assert submission.fields['gallery'] == []
        assert submission.uploads == {}
        assert submission.clears == ()

    def test_malformed_json(self):
        with pytest.raises(ValidationFailure):
            read_submission(IndustrySchema, MultiDict({'leadership': '[{"role": '}))

    def test_repeated_keys_become_lists(self):
        form = MultiDict([('title', 'Export'), ('tags', 'trade'), ('tags', 'customs')])
        submission = read_submission(PolicySchema, form)
        assert submission.fields == {'title': 'Export', 'tags': ['trade', 'customs']}

    def test_files_and_clears(self, make_image):
        image = make_image()
        form = MultiDict({'title': 'Fair', 'background_image': ''})
        files = MultiDict({'background_image': image})

        submission = read_submission(PopupSchema, form, files)

        assert submission.fields == {'title': 'Fair'}
        assert submission.uploads == {'background_image': [image]}
        assert submission.clears == ()

    def test_empty_attachment_means_clear(self):
        submission = read_submission(PopupSchema, MultiDict({'background_image': ''}))
        assert submission.clears == ('background_image',)
        assert 'background_image' not in submission.fields

    def test_submission_feeds_a_manager(self, faker, make_image, make_document):
        form = MultiDict({
            'name': faker.company(),
            'description': faker.paragraph(),
            'overview': faker.paragraph(),
            'government_papers': json.dumps([{'title': 'Notification 12'}]),
        })
        files = MultiDict([('government_papers', make_document('pdf')),
                           ('logo', make_image())])

        submission = read_submission(IndustrySchema, form, files)
        industry = industries.create(submission.fields, submission.uploads)

        assert industry.government_papers[0]['title'] == 'Notification 12'
        assert industry.government_papers[0]['pdf_or_document'].endswith('.pdf')
        assert industry.logo.startswith('/uploads/industries/logo-')

    def test_clearing_through_a_form(self, make_image):
        popup = popups.create({'title': 'Expo', 'description': 'Annual expo',
                               'start_date': '2026-05-01T00:00:00+00:00',
                               'end_date': '2026-05-10T00:00:00+00:00'},
                              {'background_image': make_image()})

        submission = read_submission(PopupSchema, MultiDict({'background_image': ''}))
        updated = popups.update(popup.id, submission.fields, submission.uploads,
                                submission.clears)

        assert updated.background_image is None
