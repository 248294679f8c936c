"""
Show the enterprise license this installation would load.

Usage:
    python manage.py license_status
    python manage.py license_status --license-filepath /path/to/redpanda.license
    python manage.py license_status --check

Options override the ENTERPRISE_LICENSE / ENTERPRISE_LICENSE_FILEPATH settings.
"""
import logging
from dataclasses import replace

from django.core.management.base import BaseCommand, CommandError

from enterprise.licensing import LicenseConfig, Resources, register_service

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Load the enterprise license and print its status'

    def add_arguments(self, parser):
        parser.add_argument(
            '--license',
            default='',
            help='Inline license text (takes priority over any file path)',
        )
        parser.add_argument(
            '--license-filepath',
            default='',
            help='Path to a license file',
        )
        parser.add_argument(
            '--check',
            action='store_true',
            help='Exit with an error unless enterprise features are allowed',
        )

    def handle(self, *args, **options):
        conf = LicenseConfig.from_settings()
        if options['license'] or options['license_filepath']:
            conf = replace(conf, license=options['license'], license_filepath=options['license_filepath'])

        resources = Resources(logger=logger)
        service = register_service(resources, conf)
        loaded = service.current_license()

        self.stdout.write(f"Organization: {loaded.organization or '-'}")
        self.stdout.write(f"Type:         {loaded.type_name()} ({loaded.type})")
        self.stdout.write(f"Expires at:   {loaded.expiry_display()}")

        if loaded.allows_enterprise_features():
            self.stdout.write(self.style.SUCCESS('Enterprise features enabled'))
        else:
            self.stdout.write(self.style.WARNING('Enterprise features disabled'))
            if options['check']:
                raise CommandError('No valid enterprise license loaded')
