from django.apps import AppConfig
from django.db.models.signals import pre_save, post_save, post_delete


class ScoringConfig(AppConfig):
    name = 'devstats_apps.scoring'
    label = 'scoring'
    verbose_name = 'Developer scoring'

    def ready(self):
        from .baseline import invalidate_repository_baseline, invalidate_previous_repository_baseline

        # New commits change the repository baseline
        Commit = self.apps.get_model('ledger', 'Commit')
        pre_save.connect(invalidate_previous_repository_baseline, sender=Commit,
                         dispatch_uid='devstats_baseline_commit_moved')
        post_save.connect(invalidate_repository_baseline, sender=Commit,
                          dispatch_uid='devstats_baseline_commit_saved')
        post_delete.connect(invalidate_repository_baseline, sender=Commit,
                            dispatch_uid='devstats_baseline_commit_deleted')
