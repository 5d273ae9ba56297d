import datetime
import itertools

from devstats_apps.ledger.models import Project, Repository, Developer, Commit

START = datetime.datetime(2024, 3, 1, 9, 0, tzinfo=datetime.timezone.utc)

_hashes = itertools.count()


def create_project(name='devstats', **kwargs):
    return Project.objects.create(name=name, **kwargs)


def create_repository(project, name='core', **kwargs):
    return Repository.objects.create(project=project, name=name, **kwargs)


def create_developer(email='ana@example.com', name='Ana'):
    return Developer.objects.create(email=email, name=name)


def create_commit(developer, repository, added=1, deleted=1, created_at=START, **kwargs):
    return Commit.objects.create(hash=f"{next(_hashes):040x}",
                                 message='Commit message',
                                 created_at=created_at,
                                 lines_added=added,
                                 lines_deleted=deleted,
                                 developer=developer,
                                 repository=repository,
                                 project=repository.project,
                                 **kwargs)
