"""
Custom Django model fields for encrypted data.
"""
from django.db import models

from .encryption import get_encryption_service


class EncryptedFieldMixin:
    """
    Encrypt values on the way into the database and decrypt them on the way out.

    The ciphertext is randomized, so only isnull lookups are meaningful on
    these columns. The encryption service is resolved on first use so that
    models import without ENCRYPTION_KEY being set.
    """

    @property
    def encryption_service(self):
        return get_encryption_service()

    def get_prep_value(self, value):
        value = super().get_prep_value(value)
        if value is None or value == '':
            return value
        return self.encryption_service.encrypt(value)

    def from_db_value(self, value, expression, connection):
        if value is None or value == '':
            return value
        try:
            return self.encryption_service.decrypt(value)
        except ValueError:
            # Never expose ciphertext that cannot be decrypted.
            return None

    def to_python(self, value):
        if isinstance(value, str) or value is None:
            return value
        return str(value)


class EncryptedCharField(EncryptedFieldMixin, models.CharField):
    description = "Encrypted character field"


class EncryptedTextField(EncryptedFieldMixin, models.TextField):
    description = "Encrypted text field"
