import datetime

from django.contrib import admin
from django.core.exceptions import ValidationError
from django.test import RequestFactory, TestCase

from devstats_apps.ledger import api
from devstats_apps.ledger.admin import commit_count
from devstats_apps.ledger.models import Project, Repository, Developer, Commit

from .utils import START, create_project, create_repository, create_developer, create_commit


class LookupTests(TestCase):

    def setUp(self):
        self.project = create_project('alpha')
        self.repo = create_repository(self.project, 'core')
        self.other_project = create_project('beta')
        self.other_repo = create_repository(self.other_project, 'core')
        self.ana = create_developer('ana@example.com', 'Ana')

    def test_find_project(self):
        self.assertEqual(api.find_project('alpha'), self.project)
        self.assertIsNone(api.find_project('gamma'))

    def test_find_repository_is_scoped_to_project(self):
        self.assertEqual(api.find_repository(self.project, 'core'), self.repo)
        self.assertEqual(api.find_repository(self.other_project.id, 'core'), self.other_repo)
        self.assertIsNone(api.find_repository(self.project, 'docs'))

    def test_find_developer(self):
        self.assertEqual(api.find_developer('ana@example.com'), self.ana)
        self.assertIsNone(api.find_developer('nobody@example.com'))

    def test_list_projects_ordered_by_name(self):
        create_project('aardvark')
        self.assertEqual([p.name for p in api.list_projects()], ['aardvark', 'alpha', 'beta'])

    def test_project_repositories(self):
        create_repository(self.project, 'api')
        self.assertEqual([r.name for r in api.project_repositories(self.project)], ['api', 'core'])


class DevelopersInRepositoryTests(TestCase):

    def setUp(self):
        project = create_project()
        self.repo = create_repository(project, 'core')
        self.docs = create_repository(project, 'docs')
        self.ana = create_developer('ana@example.com', 'Ana')
        self.bob = create_developer('bob@example.com', 'Bob')
        self.eve = create_developer('eve@example.com', 'Eve')

    def test_distinct_developers_with_last_commit(self):
        create_commit(self.ana, self.repo, created_at=START)
        create_commit(self.ana, self.repo, created_at=START + datetime.timedelta(days=2))
        create_commit(self.bob, self.repo, created_at=START + datetime.timedelta(days=1))
        # Later commits in another repository are ignored
        create_commit(self.ana, self.docs, created_at=START + datetime.timedelta(days=30))
        create_commit(self.eve, self.docs)

        developers = list(api.developers_in_repository(self.repo))

        self.assertEqual([d.email for d in developers], ['ana@example.com', 'bob@example.com'])
        self.assertEqual(developers[0].last_commit_at, START + datetime.timedelta(days=2))
        self.assertEqual(developers[1].last_commit_at, START + datetime.timedelta(days=1))

    def test_last_commit_at(self):
        create_commit(self.bob, self.repo, created_at=START)
        create_commit(self.bob, self.repo, created_at=START + datetime.timedelta(hours=5))
        self.assertEqual(api.last_commit_at(self.bob, self.repo), START + datetime.timedelta(hours=5))
        self.assertIsNone(api.last_commit_at(self.eve, self.repo))


class CommitTests(TestCase):

    def test_project_must_match_repository(self):
        repo = create_repository(create_project('alpha'))
        other = create_project('beta')
        commit = Commit(hash='a' * 40, message='Fix', created_at=START, lines_added=1, lines_deleted=0,
                        developer=create_developer(), repository=repo, project=other)
        with self.assertRaises(ValidationError):
            commit.full_clean()

    def test_changed_lines_annotation(self):
        repo = create_repository(create_project())
        dev = create_developer()
        create_commit(dev, repo, added=7, deleted=3)
        create_commit(dev, repo, added=None, deleted=3)
        values = sorted(Commit.objects.with_changed_lines().values_list('changed_lines', flat=True),
                        key=lambda v: -1 if v is None else v)
        self.assertEqual(values, [None, 10])


class AdminTests(TestCase):

    def test_models_registered(self):
        for model in (Project, Repository, Developer, Commit):
            self.assertTrue(admin.site.is_registered(model))

    def test_counts_come_from_annotations(self):
        project = create_project()
        repo = create_repository(project, 'core')
        create_repository(project, 'docs')
        ana = create_developer()
        create_commit(ana, repo)
        create_commit(ana, repo)
        request = RequestFactory().get('/')

        project_admin = admin.site._registry[Project]
        listed = project_admin.get_queryset(request).get(pk=project.pk)
        self.assertEqual(project_admin.num_repositories(listed), 2)

        for model, pk in ((Repository, repo.pk), (Developer, ana.pk)):
            obj = admin.site._registry[model].get_queryset(request).get(pk=pk)
            with self.assertNumQueries(0):
                self.assertEqual(commit_count(obj), 2)
