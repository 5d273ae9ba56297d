from django.urls import path

from . import views

app_name = 'aggregator'

urlpatterns = [
    path('projects/', views.projects, name='projects'),
    path('projects/<str:project_name>/', views.project, name='project'),
    path('projects/<str:project_name>/repos/', views.project_repositories, name='repositories'),
    path('projects/<str:project_name>/repos/<str:repo_name>/developers/',
         views.repository_developers, name='developers'),
    path('projects/<str:project_name>/repos/<str:repo_name>/developers/<str:developer_email>/',
         views.developer_stats, name='developer'),
]
