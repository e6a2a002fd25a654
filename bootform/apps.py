from django.apps import AppConfig


class BootformAppConfig(AppConfig):
    name = "bootform"
    verbose_name = "Bootform"

    def ready(self):
        from bootform import checks  # noqa: F401 - registers system checks
