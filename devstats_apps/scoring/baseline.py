"""
Repository wide baseline used to normalize developer metrics.

The baseline aggregates every commit of the repository as a single
bucket. Lines use the biggest single commit while developer metrics
use summed lines, so a developer can exceed the baseline and get
clamped to 1 by the scorer.
"""
import logging
from collections import namedtuple

from django.conf import settings
from django.core.cache import cache
from django.db.models import Count, Max, Min

from devstats_apps.ledger.models import Commit
from .metrics import size_aggregates, size_thresholds

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

RepositoryBaseline = namedtuple('RepositoryBaseline', [
    'max_commits',
    'max_lines_added',
    'max_lines_deleted',
    'max_small_commits',
    'max_large_commits',
    'max_commit_frequency',
])


def baseline_cache_key(repository_id):
    small, large = size_thresholds()
    return f"devstats:baseline:{repository_id}:{small}:{large}"


def compute_repository_baseline(repository_id):
    """Return the RepositoryBaseline of a repository.

    The value is cached only if DEVSTATS_BASELINE_CACHE_TIMEOUT is set
    to a positive number of seconds.
    """
    timeout = getattr(settings, 'DEVSTATS_BASELINE_CACHE_TIMEOUT', 0)
    if not timeout:
        return _aggregate_baseline(repository_id)

    key = baseline_cache_key(repository_id)
    baseline = cache.get(key)
    if baseline is None:
        baseline = _aggregate_baseline(repository_id)
        cache.set(key, baseline, timeout)
    else:
        logger.debug(f"Baseline for repository {repository_id} found in cache")
    return baseline


def _aggregate_baseline(repository_id):
    row = Commit.objects\
        .of_repository(repository_id)\
        .with_changed_lines()\
        .aggregate(max_commits=Count('pk'),
                   max_lines_added=Max('lines_added', default=0),
                   max_lines_deleted=Max('lines_deleted', default=0),
                   first_commit_at=Min('created_at'),
                   last_commit_at=Max('created_at'),
                   **size_aggregates())
    logger.debug(f"Repository {repository_id} baseline: {row}")

    first, last = row['first_commit_at'], row['last_commit_at']
    if first is None or last is None:
        frequency = 0.0
    else:
        frequency = (last - first).total_seconds() / SECONDS_PER_DAY

    return RepositoryBaseline(max_commits=row['max_commits'],
                              max_lines_added=row['max_lines_added'],
                              max_lines_deleted=row['max_lines_deleted'],
                              max_small_commits=row['small_commits'],
                              max_large_commits=row['large_commits'],
                              max_commit_frequency=frequency)


def invalidate_repository_baseline(sender, instance, **kwargs):
    """Drop the cached baseline of the repository of a commit saved or deleted"""
    cache.delete(baseline_cache_key(instance.repository_id))


def invalidate_previous_repository_baseline(sender, instance, **kwargs):
    """Drop the cached baseline of the repository a commit is moved away from"""
    if instance._state.adding or not getattr(settings, 'DEVSTATS_BASELINE_CACHE_TIMEOUT', 0):
        return
    previous = sender.objects.filter(pk=instance.pk).values_list('repository_id', flat=True).first()
    if previous is not None and previous != instance.repository_id:
        cache.delete(baseline_cache_key(previous))
