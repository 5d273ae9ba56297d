import uuid

from django.db import models

from model_utils.models import TimeStampedModel


class Repository(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey('ledger.Project', on_delete=models.CASCADE, related_name='repositories')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    # Number of branches with recent activity, as reported by the fetcher
    active_branches = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'repositories'
        verbose_name_plural = "Repositories"
        constraints = [
            models.UniqueConstraint(fields=['project', 'name'], name='unique_repository_name_project')
        ]

    def __str__(self):
        return f"{self.pk} - {self.name}"

    def summary(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'active_branches': self.active_branches,
            'created_at': self.created,
            'updated_at': self.modified,
        }
