from django.apps import AppConfig


class FormCollectionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'formcollections'
    verbose_name = 'Collection form helpers'
