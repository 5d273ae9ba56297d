"""
Metrics of a single developer within a single repository.

All the figures come from one aggregate query over the commits of the
(developer, repository) pair.
"""
import logging
from collections import namedtuple

from django.conf import settings
from django.db.models import Count, Max, Min, Q, Sum

from devstats_apps.ledger.models import Commit

logger = logging.getLogger(__name__)

SMALL_COMMIT_LINES = 5
LARGE_COMMIT_LINES = 50

DeveloperRepositoryMetrics = namedtuple('DeveloperRepositoryMetrics', [
    'total_commits',
    'lines_added',
    'lines_deleted',
    'small_commits',
    'large_commits',
    'first_commit_at',
    'last_commit_at',
    'commit_frequency',
])

EMPTY_METRICS = DeveloperRepositoryMetrics(total_commits=0,
                                           lines_added=0,
                                           lines_deleted=0,
                                           small_commits=0,
                                           large_commits=0,
                                           first_commit_at=None,
                                           last_commit_at=None,
                                           commit_frequency=0.0)


def size_thresholds():
    """Return the (small, large) changed lines thresholds from settings"""
    small = getattr(settings, 'DEVSTATS_SMALL_COMMIT_LINES', SMALL_COMMIT_LINES)
    large = getattr(settings, 'DEVSTATS_LARGE_COMMIT_LINES', LARGE_COMMIT_LINES)
    return small, large


def size_aggregates():
    """Aggregates counting small and large commits.

    They must be applied over a queryset annotated with `changed_lines`.
    With the default thresholds no commit can be both, but nothing
    prevents overlapping thresholds from counting a commit twice.
    """
    small, large = size_thresholds()
    return {
        'small_commits': Count('pk', filter=Q(changed_lines__lte=small)),
        'large_commits': Count('pk', filter=Q(changed_lines__gte=large)),
    }


def days_between(start, end):
    """Whole days elapsed from start to end"""
    return (end - start).days


def commit_frequency(total_commits, first_commit_at, last_commit_at):
    """Commits per day, using at least one day as the elapsed time"""
    if first_commit_at is None or last_commit_at is None:
        return 0.0
    return total_commits / max(days_between(first_commit_at, last_commit_at), 1)


def compute_developer_metrics(developer_id, repository_id):
    """Aggregate the commits of a developer in a repository.

    :param developer_id: developer instance or primary key
    :param repository_id: repository instance or primary key
    :returns: DeveloperRepositoryMetrics, all zero if there are no commits
    """
    row = Commit.objects\
        .of_developer(developer_id)\
        .of_repository(repository_id)\
        .with_changed_lines()\
        .aggregate(total_commits=Count('pk'),
                   lines_added=Sum('lines_added', default=0),
                   lines_deleted=Sum('lines_deleted', default=0),
                   first_commit_at=Min('created_at'),
                   last_commit_at=Max('created_at'),
                   **size_aggregates())
    logger.debug(f"Developer {developer_id} in repository {repository_id}: {row}")

    if not row['total_commits']:
        return EMPTY_METRICS

    frequency = commit_frequency(row['total_commits'], row['first_commit_at'], row['last_commit_at'])
    return DeveloperRepositoryMetrics(commit_frequency=frequency, **row)
