"""
KPI of a developer in a repository.

Each metric is normalized against the repository baseline and clamped
to 1, then combined with fixed weights.
"""

KPI_WEIGHTS = {
    'normal_commits': 0.30,
    'lines_added': 0.25,
    'lines_deleted': 0.25,
    'small_commits': 0.10,
    'large_commits': 0.05,
    'commit_frequency': 0.05,
}


def normalize(value, maximum):
    """Ratio of value to maximum, never above 1.

    The denominator is at least 1. Negative values are kept.
    """
    return min(1.0, value / max(maximum, 1))


def normal_commits(metrics):
    """Commits that are neither small nor large.

    It is negative when the size thresholds overlap and some commits are
    counted as both small and large. The value is not clamped.
    """
    return metrics.total_commits - metrics.small_commits - metrics.large_commits


def normalized_components(metrics, baseline):
    return {
        'normal_commits': normalize(normal_commits(metrics), baseline.max_commits),
        'lines_added': normalize(metrics.lines_added, baseline.max_lines_added),
        'lines_deleted': normalize(metrics.lines_deleted, baseline.max_lines_deleted),
        'small_commits': normalize(metrics.small_commits, baseline.max_small_commits),
        'large_commits': normalize(metrics.large_commits, baseline.max_large_commits),
        'commit_frequency': normalize(metrics.commit_frequency, baseline.max_commit_frequency),
    }


def score(metrics, baseline):
    """Weighted KPI from DeveloperRepositoryMetrics and RepositoryBaseline.

    Small commits penalize the score. The result is nominally in [0, 1]
    but it is not clamped, see normal_commits().
    """
    norm = normalized_components(metrics, baseline)
    return KPI_WEIGHTS['normal_commits'] * norm['normal_commits'] \
        + KPI_WEIGHTS['lines_added'] * norm['lines_added'] \
        + KPI_WEIGHTS['lines_deleted'] * norm['lines_deleted'] \
        + KPI_WEIGHTS['small_commits'] * (1.0 - norm['small_commits']) \
        + KPI_WEIGHTS['large_commits'] * norm['large_commits'] \
        + KPI_WEIGHTS['commit_frequency'] * norm['commit_frequency']
