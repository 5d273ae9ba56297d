from django.apps import AppConfig


class AggregatorConfig(AppConfig):
    name = 'devstats_apps.aggregator'
    label = 'aggregator'
