from django.contrib import admin
from django.db.models import Count
from django.utils.translation import gettext_lazy as _

from .models import Project, Repository, Developer, Commit


def commit_count(obj):
    return obj.num_commits
commit_count.admin_order_field = 'num_commits'


class CommitSize(admin.SimpleListFilter):
    title = _('commit size')

    parameter_name = 'size'

    def lookups(self, request, model_admin):
        return (
            ('unknown', _('Without line counts')),
            ('known', _('With line counts')),
        )

    def queryset(self, request, queryset):
        if self.value() == 'unknown':
            return queryset.filter(lines_added__isnull=True) | queryset.filter(lines_deleted__isnull=True)
        elif self.value() == 'known':
            return queryset.filter(lines_added__isnull=False, lines_deleted__isnull=False)
        else:
            return queryset


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'full_name', 'created', 'modified', 'num_repositories')
    search_fields = ('id', 'name', 'full_name')
    list_filter = ('created', )
    ordering = ('name', )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_repositories=Count('repositories'))

    def num_repositories(self, obj):
        return obj.num_repositories
    num_repositories.admin_order_field = 'num_repositories'


@admin.register(Repository)
class RepositoryAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'project', 'active_branches', 'created', commit_count)
    search_fields = ('id', 'name', 'project__name')
    list_filter = ('created', )
    ordering = ('project__name', 'name')

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_commits=Count('commits'))


@admin.register(Developer)
class DeveloperAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', commit_count)
    search_fields = ('id', 'name', 'email')
    ordering = ('email', )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_commits=Count('commits'))


@admin.register(Commit)
class CommitAdmin(admin.ModelAdmin):
    list_display = ('hash', 'created_at', 'branch_name', 'lines_added', 'lines_deleted',
                    'developer', 'repository')
    search_fields = ('hash', 'developer__email', 'repository__name', 'project__name')
    list_filter = ('created_at', CommitSize)
    ordering = ('-created_at', )
    raw_id_fields = ('developer', 'repository', 'project')
