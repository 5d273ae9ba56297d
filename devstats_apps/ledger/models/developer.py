import uuid

from django.db import models


class Developer(models.Model):
    """Commit author, identified by email across every project"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)

    class Meta:
        db_table = 'developers'

    def __str__(self):
        return f"{self.name} <{self.email}>"
