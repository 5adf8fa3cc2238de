"""
Load a small set of sample shelters and dogs.

    python manage.py seed_shelters
    python manage.py seed_shelters --dogs-per-shelter 2 --clear
"""

import logging

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from shelters.models import AdoptionInquiry, Dog, Shelter

logger = logging.getLogger(__name__)

SAMPLE_SHELTERS = [
    ('Happy Tails Rescue', 'Seattle, WA'),
    ('Paws & Whiskers', 'Portland, OR'),
    ('Second Chance Kennels', 'Boise, ID'),
]

SAMPLE_DOGS = [
    ('Biscuit', 'A gentle beagle mix who loves long walks and belly rubs.'),
    ('Luna', 'Shy at first, Luna warms up quickly and adores other dogs.'),
    ('Max', 'Energetic retriever, great with kids, still learning to sit.'),
    ('Pepper', 'Senior terrier looking for a quiet home with a sunny window.'),
    ('Rocket', 'Fast, curious and always ready to play fetch.'),
    ('Daisy', 'Calm and affectionate, Daisy is house-trained and leash-trained.'),
]


class Command(BaseCommand):
    help = "Create sample shelters and dogs for local development."

    def add_arguments(self, parser):
        parser.add_argument(
            '--dogs-per-shelter', type=int, default=2,
            help="Number of sample dogs placed in each shelter (default: 2).",
        )
        parser.add_argument(
            '--clear', action='store_true',
            help="Delete all existing shelters, dogs and inquiries first.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        per_shelter = options['dogs_per_shelter']
        if per_shelter < 0:
            raise CommandError("--dogs-per-shelter must not be negative")

        if options['clear']:
            # Dogs first: shelters are protected while they house dogs
            AdoptionInquiry.objects.all().delete()
            Dog.objects.all().delete()
            Shelter.objects.all().delete()
            self.stdout.write("Cleared existing shelter data.")

        created_shelters = 0
        created_dogs = 0
        dog_index = 0
        for name, location in SAMPLE_SHELTERS:
            shelter, created = Shelter.objects.get_or_create(name=name, defaults={'location': location})
            created_shelters += int(created)
            for _ in range(per_shelter):
                dog_name, description = SAMPLE_DOGS[dog_index % len(SAMPLE_DOGS)]
                dog_index += 1
                _, created = Dog.objects.get_or_create(
                    shelter=shelter, name=dog_name, defaults={'description': description},
                )
                created_dogs += int(created)

        logger.info("Seeded %s shelters and %s dogs", created_shelters, created_dogs)
        self.stdout.write(self.style.SUCCESS(
            f"Created {created_shelters} shelters and {created_dogs} dogs."
        ))
