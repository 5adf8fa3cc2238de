import io

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage
from PIL import Image

from shelters.placeholders import (
    PALETTE,
    PLACEHOLDER_SIZE,
    attach_placeholder_photo,
    delete_placeholder,
    dog_initials,
    is_placeholder,
    placeholder_color,
    render_placeholder,
)


@pytest.mark.parametrize('name,expected', [
    ('Biscuit', 'B'),
    ('sir barksalot', 'SB'),
    ('Princess Fluffy McPaws', 'PF'),
    ('', '?'),
    (None, '?'),
    ('  ', '?'),
])
def test_dog_initials(name, expected):
    assert dog_initials(name) == expected


def test_placeholder_color_is_stable_per_name():
    assert placeholder_color('Biscuit') == placeholder_color('  biscuit ')
    assert placeholder_color('Biscuit') in PALETTE


def test_render_placeholder_is_square_jpeg():
    data = render_placeholder('Biscuit')
    with Image.open(io.BytesIO(data)) as img:
        assert img.format == 'JPEG'
        assert img.size == (PLACEHOLDER_SIZE, PLACEHOLDER_SIZE)


@pytest.mark.django_db
def test_attach_placeholder_photo_saves_file(dog, media_root):
    name = attach_placeholder_photo(dog)
    dog.refresh_from_db()
    assert dog.photo.name == name
    assert name.startswith('dogs/placeholders/')
    assert (media_root / name).is_file()


@pytest.mark.parametrize('name,expected', [
    ('dogs/placeholders/abc.jpg', True),
    ('dogs/rex.jpg', False),
    ('', False),
    (None, False),
])
def test_is_placeholder(name, expected):
    assert is_placeholder(name) is expected


def test_delete_placeholder_leaves_uploaded_photos(media_root):
    storage = FileSystemStorage(location=media_root)
    uploaded = storage.save('dogs/rex.jpg', ContentFile(render_placeholder('Rex')))
    assert delete_placeholder(storage, uploaded) is False
    assert storage.exists(uploaded)


@pytest.mark.django_db
def test_deleting_dog_removes_its_placeholder(dog, media_root, django_capture_on_commit_callbacks):
    name = attach_placeholder_photo(dog)
    with django_capture_on_commit_callbacks(execute=True):
        dog.delete()
    assert not (media_root / name).exists()


@pytest.mark.django_db
def test_replacing_placeholder_removes_old_file(dog, media_root, django_capture_on_commit_callbacks):
    old_name = attach_placeholder_photo(dog)
    with django_capture_on_commit_callbacks(execute=True):
        dog.photo.save('rex.jpg', ContentFile(render_placeholder('Rex')), save=True)
    assert not (media_root / old_name).exists()
    assert (media_root / dog.photo.name).is_file()


@pytest.mark.django_db
def test_uploaded_photo_is_kept(dog, media_root, django_capture_on_commit_callbacks):
    dog.photo.save('rex.jpg', ContentFile(render_placeholder('Rex')), save=True)
    uploaded = dog.photo.name
    with django_capture_on_commit_callbacks(execute=True):
        attach_placeholder_photo(dog)
        dog.delete()
    assert (media_root / uploaded).is_file()
