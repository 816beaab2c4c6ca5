from django.apps import AppConfig


class VenuesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "venues"

    def ready(self) -> None:
        from venues import signals  # noqa: F401
