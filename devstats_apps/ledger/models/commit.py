import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import F, Max


class CommitQuerySet(models.QuerySet):
    """Read-only helpers over the commit ledger"""

    def of_repository(self, repository):
        return self.filter(repository=repository)

    def of_developer(self, developer):
        return self.filter(developer=developer)

    def with_changed_lines(self):
        """Annotate each commit with lines added plus lines deleted.

        The annotation is NULL when any of the two counts is missing,
        so those commits never match a size class.
        """
        return self.annotate(changed_lines=F('lines_added') + F('lines_deleted'))

    def last_commit_at(self, developer, repository):
        """Date of the latest commit of a developer in a repository, None if there is none"""
        return self.of_developer(developer)\
            .of_repository(repository)\
            .aggregate(last=Max('created_at'))['last']


class Commit(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    hash = models.CharField(max_length=64, unique=True)
    message = models.TextField()
    created_at = models.DateTimeField()
    branch_name = models.CharField(max_length=255, blank=True, null=True)
    lines_added = models.PositiveIntegerField(null=True, blank=True)
    lines_deleted = models.PositiveIntegerField(null=True, blank=True)

    developer = models.ForeignKey('ledger.Developer', on_delete=models.CASCADE, related_name='commits')
    repository = models.ForeignKey('ledger.Repository', on_delete=models.CASCADE, related_name='commits')
    # Denormalized from the repository to filter by project without a join
    project = models.ForeignKey('ledger.Project', on_delete=models.CASCADE, related_name='commits')

    objects = CommitQuerySet.as_manager()

    class Meta:
        db_table = 'commits'
        indexes = [
            models.Index(fields=['repository', 'developer'], name='commit_repository_developer'),
        ]

    def __str__(self):
        return f"{self.hash[:10]} - {self.created_at}"

    def clean(self):
        if self.repository_id and self.project_id and self.repository.project_id != self.project_id:
            raise ValidationError({'project': "Commit project must be the project of its repository"})
