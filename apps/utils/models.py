# utils/models.py

"""
Base models for the school portal with an audit trail.

Key Features:
- UUID primary keys (opaque identifiers in the JSON API)
- Creation/update timestamps set on save
- Actor and IP tracking from the thread-local request context
- Field-level change tracking written to AuditLog
"""

from django.db import models
from django.utils import timezone
import uuid
import logging

logger = logging.getLogger(__name__)


AUDIT_FIELDS = (
    'id', 'created_at', 'updated_at', 'created_by_id',
    'updated_by_id', 'created_from_ip', 'updated_from_ip',
)


# =============================================================================
# BASE MODEL
# =============================================================================

class BaseModel(models.Model):
    """
    Abstract base model with audit trail capabilities.

    Every portal entity derives from this model. Saving or deleting an
    instance records who did it and from where (when a request context is
    available) and appends an AuditLog row describing the change.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    created_at = models.DateTimeField("Created At", db_index=True, editable=False)
    updated_at = models.DateTimeField("Updated At", editable=False)

    # CharField so audit data survives the referenced user being removed
    created_by_id = models.CharField("Created By ID", max_length=50, null=True, blank=True)
    updated_by_id = models.CharField("Updated By ID", max_length=50, null=True, blank=True)

    created_from_ip = models.GenericIPAddressField("Created From IP", null=True, blank=True)
    updated_from_ip = models.GenericIPAddressField("Updated From IP", null=True, blank=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        """
        Override save to:
        1. Set timestamps
        2. Populate audit fields from the request context
        3. Track field changes for existing objects
        4. Create an audit log entry
        """
        from utils.context import get_request_context

        is_new = self._state.adding
        now = timezone.now()

        if is_new:
            if not self.created_at:
                self.created_at = now
            if not self.updated_at:
                self.updated_at = now
        else:
            self.updated_at = now

        context = get_request_context()

        if context:
            user = context.get('user')
            ip_address = context.get('ip_address')

            if is_new:
                if user and not self.created_by_id:
                    self.created_by_id = str(user.id)
                if ip_address and not self.created_from_ip:
                    self.created_from_ip = ip_address

            if user:
                self.updated_by_id = str(user.id)
            if ip_address:
                self.updated_from_ip = ip_address

        # update_fields callers must also persist the refreshed timestamp
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and not is_new:
            kwargs['update_fields'] = set(update_fields) | {'updated_at', 'updated_by_id', 'updated_from_ip'}

        changes = {} if is_new else self._collect_changes()

        result = super().save(*args, **kwargs)

        if is_new or changes:
            self._create_audit_log('CREATE' if is_new else 'UPDATE', changes)

        return result

    def delete(self, *args, **kwargs):
        """Record the deletion before the row disappears."""
        self._create_audit_log('DELETE', {})
        return super().delete(*args, **kwargs)

    # -------------------------------------------------------------------------
    # AUDIT TRAIL HELPER METHODS
    # -------------------------------------------------------------------------

    def _collect_changes(self):
        changes = {}
        try:
            old_instance = self.__class__.objects.get(pk=self.pk)
        except self.__class__.DoesNotExist:
            return changes

        for field in self._meta.concrete_fields:
            if field.name in AUDIT_FIELDS:
                continue
            old_value = getattr(old_instance, field.attname)
            new_value = getattr(self, field.attname)
            if old_value != new_value:
                changes[field.name] = {
                    'old': str(old_value) if old_value is not None else None,
                    'new': str(new_value) if new_value is not None else None,
                }
        return changes

    def _create_audit_log(self, action, changes):
        """
        Create an audit log entry for this change.

        Args:
            action: 'CREATE', 'UPDATE', or 'DELETE'
            changes: Dict of field changes
        """
        from utils.context import get_request_context

        context = get_request_context() or {}
        user = context.get('user')

        AuditLog.objects.create(
            content_type=self._meta.label_lower,
            object_id=str(self.pk),
            object_repr=str(self)[:200],
            action=action,
            changes=changes,
            user_id=str(user.id) if user else None,
            ip_address=context.get('ip_address'),
            request_path=(context.get('request_path') or '')[:255],
        )
        logger.debug(f"Created audit log for {action} on {self._meta.label} {self.pk}")


# =============================================================================
# AUDIT LOG
# =============================================================================

class AuditLog(models.Model):
    """
    Audit trail for all model changes.

    Tracks what changed (model, object_id, field changes), who made the
    change, when it happened and which address/path it came from.
    """

    ACTION_CHOICES = (
        ('CREATE', 'Created'),
        ('UPDATE', 'Updated'),
        ('DELETE', 'Deleted'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    content_type = models.CharField("Model Type", max_length=100, db_index=True)
    object_id = models.CharField("Object ID", max_length=100, db_index=True)
    object_repr = models.CharField("Object Representation", max_length=200)
    action = models.CharField("Action", max_length=10, choices=ACTION_CHOICES, db_index=True)

    changes = models.JSONField(
        "Changes",
        help_text="Dictionary of field changes: {'field_name': {'old': 'value', 'new': 'value'}}",
        default=dict,
        blank=True
    )

    user_id = models.CharField("User ID", max_length=50, db_index=True, null=True, blank=True)
    timestamp = models.DateTimeField("Timestamp", db_index=True, default=timezone.now)
    ip_address = models.GenericIPAddressField("IP Address", null=True, blank=True)
    request_path = models.CharField("Request Path", max_length=255, blank=True)

    class Meta:
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['content_type', 'object_id']),
        ]
        verbose_name = "Audit Log"
        verbose_name_plural = "Audit Logs"

    def __str__(self):
        return f"{self.action} {self.content_type} {self.object_id} at {self.timestamp}"
