import pytest

from shelters.models import AdoptionInquiry, Dog, Shelter


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / 'media'
    return settings.MEDIA_ROOT


@pytest.fixture
def shelter(db):
    return Shelter.objects.create(name='Happy Tails Rescue', location='Seattle, WA')


@pytest.fixture
def other_shelter(db):
    return Shelter.objects.create(name='Paws & Whiskers', location='Portland, OR')


@pytest.fixture
def dog(shelter):
    return Dog.objects.create(
        shelter=shelter,
        name='Biscuit',
        description='A gentle beagle mix who loves long walks.',
    )


@pytest.fixture
def inquiry(dog):
    return AdoptionInquiry.objects.create(
        dog=dog,
        full_name='Alex Doe',
        email='alex@example.com',
        message='We have a big yard and lots of love to give.',
    )


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='volunteer', password='not-a-real-pass-123')


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
