# accounts/services.py

"""
Accounts Services

Complex workflows with database writes:
- Unique ID generation (with DB locking)
- Session authentication (login, current user, logout)
- User creation and profile updates

For pure calculations and formatting, see accounts/utils.py
"""

from django.db import transaction, IntegrityError
from django.utils import timezone
import logging

from accounts.models import User, Role
from accounts.utils import (
    build_unique_id_prefix,
    format_unique_id,
    UNIQUE_ID_MAX_SEQUENCE,
    unique_id_pattern,
    parse_unique_id_sequence,
)
from utils.context import get_client_ip
from utils.exceptions import (
    ValidationError,
    InvalidCredentials,
    AccountInactive,
    Unauthenticated,
    NotFound,
    Conflict,
)

logger = logging.getLogger(__name__)

SESSION_USER_KEY = 'user_id'


# =============================================================================
# UNIQUE ID GENERATION SERVICE (WITH DB OPERATIONS)
# =============================================================================

class UniqueIDGenerationService:
    """
    Generate unique login IDs with database locking.
    Uses utils.py for pure logic, adds DB operations here.
    """

    @staticmethod
    @transaction.atomic
    def generate_unique_id(role, year=None):
        """
        Generate the next unique ID for a role WITH database locking.

        Format: PREFIX + YY + NNNN, e.g. STU250001

        Args:
            role: Role value ('super_admin', 'management', 'staff', 'student')
            year: Issue year (defaults to current year)

        Returns:
            str: Unique ID not yet used by any user

        Raises:
            Conflict: every sequence number for the prefix is taken
        """
        current_year = year or timezone.now().year
        prefix = build_unique_id_prefix(role, current_year)

        # Lock the highest issued ID for this prefix to serialize allocation
        last_user = (
            User.objects
            .select_for_update()
            .filter(unique_id__regex=unique_id_pattern(prefix))
            .order_by('-unique_id')
            .first()
        )

        next_seq = 1
        if last_user:
            last_seq = parse_unique_id_sequence(last_user.unique_id, prefix)
            if last_seq is not None:
                next_seq = last_seq + 1

        for sequence in range(next_seq, UNIQUE_ID_MAX_SEQUENCE + 1):
            unique_id = format_unique_id(prefix, sequence)
            if not User.objects.filter(unique_id=unique_id).exists():
                logger.info(f"Generated unique ID: {unique_id}")
                return unique_id

        logger.error(f"Unique ID sequence exhausted for prefix {prefix}")
        raise Conflict(f"No unique IDs left for prefix {prefix}")


# =============================================================================
# AUTHENTICATION SERVICE
# =============================================================================

class AuthenticationService:
    """Surname-as-password login bound to the Django session."""

    @staticmethod
    def login(request, unique_id, password):
        """
        Authenticate by unique ID and surname, then bind the session.

        Raises:
            InvalidCredentials: unknown ID or wrong surname
            AccountInactive: the account is deactivated (checked first)
        """
        ip_address = get_client_ip(request)

        user = User.objects.filter(unique_id=unique_id).first()
        if user is None:
            logger.warning(f"Login attempt for non-existent user: {unique_id} from IP: {ip_address}")
            raise InvalidCredentials()

        if not user.is_active:
            logger.warning(f"Login attempt for inactive account: {unique_id} from IP: {ip_address}")
            raise AccountInactive()

        if not user.check_password(password):
            logger.warning(f"Failed login attempt for {unique_id} from IP: {ip_address}")
            raise InvalidCredentials()

        # New session id on privilege change
        request.session.cycle_key()
        request.session[SESSION_USER_KEY] = str(user.id)
        request.portal_user = user

        logger.info(f"Successful login: {unique_id} ({user.role}) from IP: {ip_address}")
        return user

    @staticmethod
    def get_session_user(request):
        """Signed-in active user or None, without side effects."""
        user_id = request.session.get(SESSION_USER_KEY)
        if not user_id:
            return None
        return User.objects.filter(pk=user_id, is_active=True).first()

    @staticmethod
    def get_current_user(request):
        """
        Re-read the user bound to the session.

        A session pointing at a row that no longer exists is flushed.
        """
        user_id = request.session.get(SESSION_USER_KEY)
        if not user_id:
            raise Unauthenticated()

        user = User.objects.filter(pk=user_id).first()
        if user is None:
            logger.info(f"Flushing session bound to missing user {user_id}")
            request.session.flush()
            raise Unauthenticated("User not found")

        if not user.is_active:
            logger.info(f"Flushing session of inactive account {user.unique_id}")
            request.session.flush()
            raise AccountInactive()

        return user

    @staticmethod
    def logout(request):
        """Destroy the session. Safe to call without one."""
        user_id = request.session.get(SESSION_USER_KEY)
        request.session.flush()
        request.portal_user = None
        if user_id:
            logger.info(f"User {user_id} logged out")


# =============================================================================
# USER MANAGEMENT SERVICE
# =============================================================================

USER_FIELD_MAP = {
    'surname': 'surname',
    'firstName': 'first_name',
    'middleName': 'middle_name',
    'email': 'email',
    'phone': 'phone',
    'address': 'address',
    'profileImage': 'profile_image',
    'classLevel': 'class_level',
    'department': 'department',
    'bankAccountNumber': 'bank_account_number',
    'bankName': 'bank_name',
    'isActive': 'is_active',
}


class UserManagementService:

    @staticmethod
    @transaction.atomic
    def create_user(*, surname, first_name, role=Role.STUDENT, unique_id=None, **extra):
        """
        Create a portal user, issuing a unique ID when none is given.

        Args:
            surname: Surname (doubles as the password)
            first_name: First name
            role: Role value
            unique_id: Explicit ID (seeding/import); generated otherwise
            **extra: Any other User model fields
        """
        surname = (surname or '').strip()
        first_name = (first_name or '').strip()
        if not surname or not first_name:
            raise ValidationError(
                "First name and surname are required",
                errors={
                    key: "This field is required."
                    for key, value in (('firstName', first_name), ('surname', surname))
                    if not value
                },
            )

        if role not in Role.values:
            raise ValidationError(f"Unknown role: {role}", errors={'role': "Select a valid role."})

        generated = not unique_id
        if not generated and User.objects.filter(unique_id=unique_id).exists():
            raise ValidationError(
                f"Unique ID {unique_id} is already in use",
                errors={'uniqueId': "This ID is already in use."},
            )

        for attempt in range(2):
            if generated:
                unique_id = UniqueIDGenerationService.generate_unique_id(role)

            user = User(
                unique_id=unique_id,
                surname=surname,
                first_name=first_name,
                role=role,
                **extra,
            )
            user.full_clean()
            try:
                with transaction.atomic():
                    user.save()
                break
            except IntegrityError:
                # Another request took the same generated ID first
                if not generated or attempt:
                    raise
                logger.warning(f"Unique ID {unique_id} taken concurrently, issuing another")

        logger.info(f"Created {role} user {unique_id}")
        return user

    @staticmethod
    def create_user_from_payload(data):
        """Create a user from a camelCase JSON payload."""
        extra = {
            model_field: data[key]
            for key, model_field in USER_FIELD_MAP.items()
            if key in data and model_field not in ('surname', 'first_name')
        }
        return UserManagementService.create_user(
            surname=data.get('surname'),
            first_name=data.get('firstName'),
            role=data.get('role') or Role.STUDENT,
            unique_id=data.get('uniqueId') or None,
            **extra,
        )

    @staticmethod
    def update_bank_details(user_id, bank_account_number=None, bank_name=None):
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound("User not found")

        user.bank_account_number = bank_account_number
        user.bank_name = bank_name
        user.save(update_fields=['bank_account_number', 'bank_name'])

        logger.info(f"Updated bank details for {user.unique_id}")
        return user
