import logging
from functools import wraps

from django.db import DatabaseError

from devstats_apps.ledger import api as ledger
from .baseline import compute_repository_baseline
from .exceptions import NotFound, LedgerUnavailable
from .kpi import score
from .metrics import compute_developer_metrics

logger = logging.getLogger(__name__)


def read_from_ledger(func):
    """Report database failures as LedgerUnavailable"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as e:
            logger.exception(f"Error reading the commit ledger in {func.__name__}")
            raise LedgerUnavailable(str(e)) from e
    return wrapper


def _resolve(project_name, repo_name=None, developer_email=None):
    """Resolve names to (project, repository, developer), stopping at the first miss.

    Returns the missing entity description as a fourth element,
    None when every requested name was found.
    """
    project = ledger.find_project(project_name)
    if project is None:
        return None, None, None, f"project {project_name}"
    if repo_name is None:
        return project, None, None, None

    repository = ledger.find_repository(project, repo_name)
    if repository is None:
        return project, None, None, f"repository {repo_name} in project {project_name}"
    if developer_email is None:
        return project, repository, None, None

    developer = ledger.find_developer(developer_email)
    if developer is None:
        return project, repository, None, f"developer {developer_email}"
    return project, repository, developer, None


@read_from_ledger
def get_projects():
    return [project.summary() for project in ledger.list_projects()]


@read_from_ledger
def get_project(project_name):
    """Project with its repositories"""
    project, _, _, missing = _resolve(project_name)
    if missing:
        raise NotFound(missing)
    data = project.summary()
    data['repositories'] = [repo.summary() for repo in ledger.project_repositories(project)]
    return data


@read_from_ledger
def get_developers_in_repository(project_name, repo_name):
    """Developers that committed to a repository with their last commit date"""
    _, repository, _, missing = _resolve(project_name, repo_name)
    if missing:
        raise NotFound(missing)
    return [{
        'id': developer.id,
        'name': developer.name,
        'email': developer.email,
        'last_commit_at': developer.last_commit_at,
    } for developer in ledger.developers_in_repository(repository)]


@read_from_ledger
def get_developer_stats_in_repository(project_name, repo_name, developer_email):
    """Statistics and KPI of a developer within a repository of a project.

    :raises NotFound: if the project, the repository or the developer does not exist
    :raises LedgerUnavailable: if the database cannot be queried
    """
    _, repository, developer, missing = _resolve(project_name, repo_name, developer_email)
    if missing:
        raise NotFound(missing)

    metrics = compute_developer_metrics(developer.id, repository.id)
    baseline = compute_repository_baseline(repository.id)
    kpi = score(metrics, baseline)
    logger.info(f"KPI for {developer.email} in {project_name}/{repo_name}: {kpi:.4f}")

    return {
        'id': developer.id,
        'name': developer.name,
        'email': developer.email,
        'total_commits': metrics.total_commits,
        'lines_added': metrics.lines_added,
        'lines_deleted': metrics.lines_deleted,
        'commit_frequency': metrics.commit_frequency,
        'first_commit_at': metrics.first_commit_at,
        'last_commit_at': metrics.last_commit_at,
        'small_commits': metrics.small_commits,
        'large_commits': metrics.large_commits,
        'kpi': kpi,
    }
