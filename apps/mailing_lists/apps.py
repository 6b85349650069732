from django.apps import AppConfig


class MailingListsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.mailing_lists'
    verbose_name = 'Mailing lists'
