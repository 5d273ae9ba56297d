import uuid

from django.db import models

from model_utils.models import TimeStampedModel


class Project(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    full_name = models.CharField(max_length=255, blank=True, default='')
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'projects'
        ordering = ('name', )

    def __str__(self):
        return f"{self.pk} - {self.name}"

    def summary(self):
        """Return the transfer representation of the project"""
        return {
            'id': self.id,
            'name': self.name,
            'full_name': self.full_name,
            'description': self.description,
            'created_at': self.created,
            'updated_at': self.modified,
        }
