'''Attachment field layouts and upload filters.'''

import pytest

from investportal.core.attachments import (
    DOCUMENT_TYPES,
    MB,
    AttachmentField,
    Attachments,
    get_extension,
    is_external,
)
from investportal.core.errors import FileTooLarge, UnsupportedFileType, ValidationFailure
from tests.db_fixtures.uploads import upload

pytest_plugins = 'tests.db_fixtures.uploads'


class TestHelpers:
    @pytest.mark.parametrize('filename, extension', [
        ('photo.PNG', 'png'),
        ('archive.tar.gz', 'gz'),
        ('README', ''),
        (None, ''),
    ])
    def test_get_extension(self, filename, extension):
        assert get_extension(filename) == extension

    def test_is_external(self):
        assert is_external('https://example.com/a.png')
        assert is_external('HTTP://example.com/a.png')
        assert not is_external('/uploads/gallery/a.png')
        assert not is_external('ftp://example.com/a.png')


class TestDeclaration:
    def test_nested_list_is_not_many(self):
        with pytest.raises(ValueError):
            AttachmentField('leadership', many=True, item_key='photo')

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            AttachmentField('video', accepts=('mp4',))

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            Attachments('videos', AttachmentField('clip'))

    def test_default_counts(self):
        assert AttachmentField('logo').max_count == 1
        assert AttachmentField('gallery', many=True).max_count == 10
        assert AttachmentField('papers', accepts=DOCUMENT_TYPES, item_key='pdf').max_count == 10


class TestValues:
    '''Reading, attaching and clearing the three field shapes.'''

    def test_single(self):
        field = AttachmentField('logo')
        assert field.references(None) == []
        assert field.references('/uploads/companies/a.png') == ['/uploads/companies/a.png']
        assert field.attach('/uploads/companies/a.png', ['/uploads/companies/b.png']) \
            == '/uploads/companies/b.png'
        assert field.cleared('/uploads/companies/a.png') is None

    def test_list(self):
        field = AttachmentField('gallery', many=True)
        value = ['/uploads/industries/a.png']
        assert field.attach(value, ['/uploads/industries/b.png']) \
            == ['/uploads/industries/a.png', '/uploads/industries/b.png']
        assert value == ['/uploads/industries/a.png']
        assert field.cleared(value) == []

    def test_nested(self):
        field = AttachmentField('leadership', item_key='photo')
        value = [{'name': 'A'}, {'name': 'B', 'photo': '/uploads/industries/b.png'}]

        assert field.references(value) == ['/uploads/industries/b.png']
        attached = field.attach(value, ['/uploads/industries/a.png'])
        assert attached == [{'name': 'A', 'photo': '/uploads/industries/a.png'},
                            {'name': 'B', 'photo': '/uploads/industries/b.png'}]
        assert 'photo' not in value[0]
        assert field.cleared(value) == [{'name': 'A', 'photo': None},
                                        {'name': 'B', 'photo': None}]

    def test_record_references(self):
        class Record:
            logo = '/uploads/industries/logo.png'
            gallery = ['/uploads/industries/1.png', 'https://example.com/2.png']

        attachments = Attachments('industries',
                                  AttachmentField('logo'),
                                  AttachmentField('gallery', many=True))
        assert attachments.references(Record()) == [
            '/uploads/industries/logo.png',
            '/uploads/industries/1.png',
            'https://example.com/2.png',
        ]
        assert attachments.references_in({'gallery': []}) == []


class TestFilter:
    def test_accepts_image(self, make_image):
        file = make_image('jpg')
        size = AttachmentField('photo').check(file)
        assert size == len(file.stream.getvalue())
        assert file.stream.tell() == 0

    def test_size_limit(self, make_image):
        with pytest.raises(FileTooLarge):
            AttachmentField('photo', max_size=1 * MB).check(make_image(padding=MB))

    def test_mismatched_mimetype(self, make_image):
        disguised = upload(make_image().stream.read(), 'photo.png', 'application/pdf')
        with pytest.raises(UnsupportedFileType):
            AttachmentField('photo').check(disguised)

    def test_mimetype_guessed_from_name(self, make_image):
        untyped = upload(make_image().stream.read(), 'photo.png', 'application/octet-stream')
        assert AttachmentField('photo').check(untyped) > 0

    def test_documents_are_not_decoded(self, make_document):
        field = AttachmentField('paper', accepts=DOCUMENT_TYPES, max_size=10 * MB)
        assert field.check(make_document('docx', size=10)) == 19

    def test_count(self, make_image):
        field = AttachmentField('leadership', item_key='photo', max_count=2)
        with pytest.raises(ValidationFailure):
            field.check_count([make_image()] * 3, [{}, {}, {}])
        with pytest.raises(ValidationFailure):
            field.check_count([make_image()] * 2, [{}])
        field.check_count([make_image()], [{}])
