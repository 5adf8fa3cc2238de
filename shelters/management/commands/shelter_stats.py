import json

from django.core.management.base import BaseCommand
from django.db.models import Count

from shelters.models import AdoptionInquiry, Dog, Shelter


def collect_stats():
    shelters = Shelter.objects.annotate(dog_count=Count('dogs')).order_by('name')
    return {
        'shelters': Shelter.objects.count(),
        'dogs': Dog.objects.count(),
        'inquiries': AdoptionInquiry.objects.count(),
        'dogs_per_shelter': {s.name: s.dog_count for s in shelters},
    }


class Command(BaseCommand):
    help = "Display shelter, dog and adoption inquiry counts."

    def add_arguments(self, parser):
        parser.add_argument('--json', action='store_true', help="Print machine-readable JSON.")

    def handle(self, *args, **options):
        stats = collect_stats()
        if options['json']:
            self.stdout.write(json.dumps(stats, indent=2))
            return

        self.stdout.write(f"Shelters:  {stats['shelters']}")
        self.stdout.write(f"Dogs:      {stats['dogs']}")
        self.stdout.write(f"Inquiries: {stats['inquiries']}")
        for name, count in stats['dogs_per_shelter'].items():
            self.stdout.write(f"  {name}: {count}")
