"""Management command to print today's hospital access codes."""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from django_hospitals.models import Hospital
from django_hospitals.services import describe_access_code


class Command(BaseCommand):
    help = "Print each hospital's access code for its current local day"

    def add_arguments(self, parser):
        parser.add_argument(
            'hospital_ids',
            nargs='*',
            help='Hospital ids to show (default: all hospitals)'
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Also show the local date and timezone each code was derived from'
        )

    def handle(self, *args, **options):
        hospital_ids = options['hospital_ids']
        verbose = options['verbose']

        if hospital_ids:
            hospitals = []
            for hospital_id in hospital_ids:
                try:
                    hospitals.append(Hospital.objects.get(pk=hospital_id))
                except (Hospital.DoesNotExist, ValidationError):
                    raise CommandError(f'Hospital "{hospital_id}" does not exist')
        else:
            hospitals = list(Hospital.objects.all())

        if not hospitals:
            self.stdout.write('No hospitals found')
            return

        for hospital in hospitals:
            info = describe_access_code(hospital)
            line = f"{info['hospital_name']}: {info['code']}"
            if verbose:
                line += f" ({info['local_date']}, {info['timezone']})"
            self.stdout.write(line)
