# core/management/commands/seed_portal.py

"""
Seed the portal with its default accounts and site settings.

USAGE EXAMPLES:
===============

# 1. Default super admin, sample users and settings
python manage.py seed_portal

# 2. Only the super admin and settings
python manage.py seed_portal --no-samples
"""

from django.core.management.base import BaseCommand
from django.db import transaction
import logging

from core.management.commands.portal_seed_config import PortalSeedConfig
from utils.context import RequestContext

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create the default super admin, sample users and site settings (idempotent)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-samples',
            action='store_true',
            help='Skip the sample management, staff and student accounts',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING('Seeding portal...'))

        with RequestContext(request_path="manage.py seed_portal"), transaction.atomic():
            created_users, skipped_users = PortalSeedConfig.create_default_users(
                include_samples=not options['no_samples']
            )
            created_settings = PortalSeedConfig.create_default_settings()

        for user in created_users:
            self.stdout.write(f'  ✓ Created {user.role}: {user.unique_id} / {user.surname}')
        for unique_id in skipped_users:
            self.stdout.write(f'  - {unique_id} already exists')
        for key in created_settings:
            self.stdout.write(f'  ✓ Created setting: {key}')

        self.stdout.write(self.style.SUCCESS('Seed completed successfully!'))
