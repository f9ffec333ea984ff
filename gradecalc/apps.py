from django.apps import AppConfig


class GradecalcConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gradecalc"
    verbose_name = "Grade Target Checker"
