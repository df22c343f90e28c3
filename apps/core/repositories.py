"""
Storage side of the authorization core.

ScopedRepository applies the predicate returned by apps.authz.authorize to
every query it runs. Updates and deletes filter by primary key and predicate
in the same statement, so a row that left the caller's scope after the check
is reported as not found instead of being written.
"""
import logging
import uuid

from django.apps import apps
from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from apps.authz.exceptions import NotFound
from apps.authz.policy import CUSTOMER_KINDS, OWNED_KINDS
from apps.authz.types import CUSTOMER_FIELD, ResourceKind
from apps.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

KIND_MODELS = {
    ResourceKind.PAYMENT_GATEWAY: 'integrations.PaymentGateway',
    ResourceKind.COLLABORATOR: 'collaborators.Collaborator',
    ResourceKind.WHATSAPP_INSTANCE: 'messaging.WhatsappInstance',
    ResourceKind.ACCOUNTING_ENTRY: 'accounting.AccountingEntry',
    ResourceKind.CUSTOMER_PLAN: 'plans.CustomerPlan',
    ResourceKind.PRICE_TABLE: 'catalog.PriceTable',
    ResourceKind.USER: 'rbac.User',
}


def model_for_kind(kind):
    return apps.get_model(KIND_MODELS[ResourceKind(kind)])


def predicate_to_q(predicate):
    """Translate an authorization predicate into a Q object."""
    if predicate is None or predicate.matches_nothing:
        return Q(pk__in=[])
    if predicate.matches_all:
        return Q()
    return Q(**{predicate.field: predicate.value})


def _as_uuid(value):
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def load_row(kind, row_id):
    """
    Load one live row of kind as a dict of column values.

    Malformed ids load as None, the same as missing rows.
    """
    pk = _as_uuid(row_id)
    if pk is None:
        return None
    return model_for_kind(kind).objects.filter(pk=pk).values().first()


def has_dependents(user_id):
    """
    True if live rows still point at user user_id.

    Counts users and tenant rows owned by an entrepreneur, and plans held by
    a customer.
    """
    if model_for_kind(ResourceKind.USER).objects.filter(entrepreneur_id=user_id).exists():
        return True
    if any(
        model_for_kind(kind).objects.filter(entrepreneur_id=user_id).exists()
        for kind in OWNED_KINDS
    ):
        return True
    return any(
        model_for_kind(kind).objects.filter(**{CUSTOMER_FIELD: user_id}).exists()
        for kind in CUSTOMER_KINDS
    )


class ScopedRepository:
    """
    Predicate-aware persistence for one resource kind.

    Args:
        kind: ResourceKind handled by this repository
    """

    def __init__(self, kind):
        self.kind = ResourceKind(kind)
        self.model = model_for_kind(self.kind)

    def _writable(self, row):
        """Keep only concrete, editable columns of the model."""
        names = {
            field.attname
            for field in self.model._meta.concrete_fields
            if not field.primary_key
        }
        names -= {'created_at', 'updated_at', 'deleted_at'}
        return {key: value for key, value in row.items() if key in names}

    def list(self, predicate):
        return self.model.objects.filter(predicate_to_q(predicate))

    def get(self, predicate, row_id):
        pk = _as_uuid(row_id)
        instance = None
        if pk is not None:
            instance = self.model.objects.filter(predicate_to_q(predicate), pk=pk).first()
        if instance is None:
            raise NotFound()
        return instance

    def create(self, final_row):
        """
        Insert final_row.

        Raises:
            ConflictError: If a unique constraint rejects the row
        """
        try:
            with transaction.atomic():
                instance = self.model.objects.create(**self._writable(final_row))
        except IntegrityError as e:
            logger.warning(
                f"Conflict creating {self.model.__name__}",
                extra={'kind': self.kind.value, 'error': str(e)}
            )
            raise ConflictError(f"{self.model._meta.verbose_name.capitalize()} conflicts with an existing record")
        return instance

    def update(self, predicate, row_id, changes):
        """
        Write changes to the row if it is still inside predicate.

        Raises:
            NotFound: If no row matched id and predicate
            ConflictError: If a unique constraint rejects the change
        """
        pk = _as_uuid(row_id)
        values = self._writable(changes)
        values['updated_at'] = timezone.now()
        try:
            with transaction.atomic():
                updated = self.model.objects.filter(predicate_to_q(predicate), pk=pk).update(**values)
        except IntegrityError as e:
            logger.warning(
                f"Conflict updating {self.model.__name__}",
                extra={'kind': self.kind.value, 'error': str(e)}
            )
            raise ConflictError(f"{self.model._meta.verbose_name.capitalize()} conflicts with an existing record")

        if not updated:
            raise NotFound()
        return self.model.objects.get(pk=pk)

    def delete(self, predicate, row_id):
        """
        Soft delete the row if it is still inside predicate.

        Raises:
            NotFound: If no row matched id and predicate
        """
        pk = _as_uuid(row_id)
        deleted = self.model.objects.filter(predicate_to_q(predicate), pk=pk).delete()
        if not deleted:
            raise NotFound()
        return deleted
