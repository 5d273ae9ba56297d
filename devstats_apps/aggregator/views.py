import logging

from django.http import HttpResponse, HttpResponseNotFound, JsonResponse
from django.views.decorators.http import require_GET

from devstats_apps.scoring import api
from devstats_apps.scoring.exceptions import NotFound

logger = logging.getLogger(__name__)


def list_response(items):
    """200 with the list, or 204 without body if it is empty"""
    if not items:
        return HttpResponse(status=204)
    return JsonResponse(items, safe=False)


@require_GET
def projects(request):
    return list_response(api.get_projects())


@require_GET
def project(request, project_name):
    try:
        data = api.get_project(project_name)
    except NotFound as e:
        logger.info(f"Not found: {e}")
        return HttpResponseNotFound()
    return JsonResponse(data)


@require_GET
def project_repositories(request, project_name):
    try:
        data = api.get_project(project_name)
    except NotFound as e:
        logger.info(f"Not found: {e}")
        return HttpResponseNotFound()
    return list_response(data['repositories'])


@require_GET
def repository_developers(request, project_name, repo_name):
    try:
        developers = api.get_developers_in_repository(project_name, repo_name)
    except NotFound as e:
        logger.info(f"Not found: {e}")
        return HttpResponseNotFound()
    return list_response(developers)


@require_GET
def developer_stats(request, project_name, repo_name, developer_email):
    try:
        stats = api.get_developer_stats_in_repository(project_name, repo_name, developer_email)
    except NotFound as e:
        logger.info(f"Not found: {e}")
        return HttpResponseNotFound()
    return JsonResponse(stats)
