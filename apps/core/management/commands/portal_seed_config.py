# core/management/commands/portal_seed_config.py
"""
Portal Seed Configuration
=========================

Default accounts and site settings created by ``manage.py seed_portal``.
Kept apart from the command so tests and other commands can reuse the
same data.
"""

import logging

logger = logging.getLogger(__name__)


class PortalSeedConfig:
    """Configuration class for portal seed data"""

    DEFAULT_USERS = [
        {
            'unique_id': 'ADM24001',
            'surname': 'Administrator',
            'first_name': 'Super',
            'role': 'super_admin',
            'email': 'admin@alfurqan.edu.ng',
            'phone': '+2348012345678',
        },
        {
            'unique_id': 'MGT24001',
            'surname': 'Manager',
            'first_name': 'Test',
            'role': 'management',
        },
        {
            'unique_id': 'STF24001',
            'surname': 'Teacher',
            'first_name': 'Test',
            'role': 'staff',
            'department': 'Science',
        },
        {
            'unique_id': 'STU24001',
            'surname': 'Student',
            'first_name': 'Test',
            'role': 'student',
            'class_level': 'JSS1',
        },
    ]

    DEFAULT_SETTINGS = [
        ('school_name', 'Al-Furqan Group of Schools', "School name shown on the site and in e-mails"),
        ('school_address', 'Airforce Road, GbaGba, Ilorin, Kwara State, Nigeria', "Postal address"),
        ('school_phone', '+234 803 123 4567', "Main phone line"),
        ('school_email', 'info@alfurqan.edu.ng', "Public contact address"),
        ('school_motto', 'Knowledge, Virtue, Excellence', "Motto"),
        ('results_released', 'false', "Whether students can see their results"),
    ]

    @classmethod
    def create_default_users(cls, include_samples=True):
        """Create the super admin (and sample accounts); returns (created, skipped)."""
        from accounts.models import User
        from accounts.services import UserManagementService

        created, skipped = [], []
        for account in cls.DEFAULT_USERS:
            if not include_samples and account['role'] != 'super_admin':
                continue
            if User.objects.filter(unique_id=account['unique_id']).exists():
                skipped.append(account['unique_id'])
                continue
            data = dict(account)
            user = UserManagementService.create_user(
                surname=data.pop('surname'),
                first_name=data.pop('first_name'),
                role=data.pop('role'),
                unique_id=data.pop('unique_id'),
                **data,
            )
            created.append(user)
            logger.info(f"Seeded user {user.unique_id}")
        return created, skipped

    @classmethod
    def create_default_settings(cls):
        """Create missing default settings without touching existing values."""
        from core.models import SiteSetting

        created = []
        for key, value, description in cls.DEFAULT_SETTINGS:
            _, was_created = SiteSetting.objects.get_or_create(
                key=key,
                defaults={'value': value, 'description': description},
            )
            if was_created:
                created.append(key)
                logger.info(f"Seeded setting {key}")
        return created
