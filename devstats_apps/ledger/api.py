"""
Identity lookups over the commit ledger.

Every lookup returns None when the entity does not exist, so callers
can chain them and stop at the first miss.
"""
from django.db.models import Max

from .models import Project, Repository, Developer, Commit


def list_projects():
    return Project.objects.order_by('name')


def find_project(name):
    return Project.objects.filter(name=name).first()


def find_repository(project, name):
    """Repository called `name` within `project` (instance or id)"""
    return Repository.objects.filter(project=project, name=name).select_related('project').first()


def project_repositories(project):
    return Repository.objects.filter(project=project).order_by('name')


def find_developer(email):
    return Developer.objects.filter(email=email).first()


def developers_in_repository(repository):
    """Developers with at least one commit in the repository.

    Each developer is annotated with `last_commit_at`, the date of their
    latest commit in that repository.
    """
    return Developer.objects\
        .filter(commits__repository=repository)\
        .annotate(last_commit_at=Max('commits__created_at'))\
        .order_by('name', 'email')


def last_commit_at(developer, repository):
    return Commit.objects.last_commit_at(developer, repository)
