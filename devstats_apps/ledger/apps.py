from django.apps import AppConfig


class LedgerConfig(AppConfig):
    name = 'devstats_apps.ledger'
    label = 'ledger'
    verbose_name = 'Commit ledger'
