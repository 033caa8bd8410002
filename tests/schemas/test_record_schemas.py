'''Store-level validation of the records.'''

import json

import pytest

from investportal.core.errors import StoreWriteFailure
from investportal.models import PolicyStatus, StartupStage
from investportal.records import districts, members, policies, popups, startups
from investportal.schemas import PopupSchema, StartupSchema

pytest_plugins = 'tests.db_fixtures.uploads'


@pytest.fixture
def popup_fields(faker):
    return {
        'title': faker.sentence(nb_words=3),
        'description': faker.sentence(),
        'start_date': '2026-07-01T00:00:00+00:00',
        'end_date': '2026-07-31T00:00:00+00:00',
    }


class TestPopup:
    def test_nested_values_as_json_strings(self, popup_fields):
        popup = popups.create(dict(
            popup_fields,
            ctas=json.dumps([{'text': 'Register', 'url': 'https://portal.example.in/r'}]),
            daily_schedule=json.dumps({'enabled': True,
                                       'start_time': '10:00', 'end_time': '18:00'}),
        ))

        assert popup.ctas == [{'text': 'Register', 'url': 'https://portal.example.in/r',
                               'primary': False}]
        assert popup.daily_schedule['start_time'] == '10:00'

    @pytest.mark.parametrize('overrides', [
        {'background_color': 'white'},
        {'priority': 101},
        {'display_duration': -1},
        {'delay_seconds': 301},
        {'ctas': [{'text': 'Go', 'url': 'ftp://example.com'}]},
        {'daily_schedule': {'enabled': True, 'start_time': '25:00', 'end_time': '10:00'}},
        {'daily_schedule': {'enabled': True, 'start_time': '10:00'}},
        {'end_date': '2026-06-01T00:00:00+00:00'},
        {'ctas': '[{"text": '},
    ])
    def test_rejected(self, popup_fields, overrides):
        with pytest.raises(StoreWriteFailure):
            popups.create(dict(popup_fields, **overrides))

    def test_disabled_schedule_skips_time_checks(self, popup_fields):
        popup = popups.create(dict(popup_fields, daily_schedule={'enabled': False,
                                                                 'start_time': 'later'}))
        assert popup.daily_schedule['enabled'] is False

    def test_dump(self, popup_fields):
        popup = popups.create(dict(popup_fields, background_type='image'))
        dumped = PopupSchema().dump(popup)
        assert dumped['background_type'] == 'image'


class TestEnums:
    def test_values_are_loaded_and_dumped(self, faker, make_image):
        startup = startups.create({
            'startup_name': faker.company(),
            'founder_name': faker.name(),
            'description': faker.paragraph(),
            'industry': 'Defence & Aerospace',
            'stage': 'Series C+',
            'team_size': '11-50',
            'email': faker.email(),
            'phone': faker.numerify('+91-##########'),
        }, {'logo': make_image()})

        assert startup.stage is StartupStage.series_c_plus
        assert StartupSchema().dump(startup)['team_size'] == '11-50'

    def test_unknown_value(self, faker, make_document, stored_files):
        with pytest.raises(StoreWriteFailure):
            policies.create({'title': faker.word(), 'category': 'Folklore',
                             'description': faker.paragraph()},
                            {'file_url': make_document()})
        assert stored_files('policies') == []

    def test_default_status(self, faker, make_document):
        policy = policies.create({'title': faker.word(), 'category': 'Standards',
                                  'description': faker.paragraph(),
                                  'tags': '["iso", "quality"]'},
                                 {'file_url': make_document('txt')})
        assert policy.status is PolicyStatus.draft
        assert policy.tags == ['iso', 'quality']


class TestNestedObjects:
    def test_district_details(self):
        district = districts.create({
            'district_name': 'Aurangabad',
            'rail_connectivity': 'Both',
            'primary_languages': '["Marathi", "Hindi"]',
            'airport_availability': json.dumps({'available': True, 'details': 'IXU'}),
            'website_url': '',
        })

        assert district.primary_languages == ['Marathi', 'Hindi']
        assert district.airport_availability == {'available': True, 'details': 'IXU'}
        assert district.midc_sez_presence == {'presence': False, 'details': ''}
        assert district.website_url is None

    def test_member_social(self, faker):
        member = members.create({'full_name': faker.name(),
                                 'social': {'email': 'Someone@Example.com'}})
        assert member.social == {'email': 'someone@example.com'}

    def test_member_social_url(self, faker):
        with pytest.raises(StoreWriteFailure):
            members.create({'full_name': faker.name(),
                            'social': {'linkedin': 'not a url'}})
