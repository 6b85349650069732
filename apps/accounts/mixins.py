from django.db import models

from .choices import ContentVisibility


class VisibilityModelMixin(models.Model):
    """
    Adds an audience level to content models.
    Contains NO logic; apps.accounts.policy decides who sees what.
    """

    visibility = models.CharField(
        max_length=10,
        choices=ContentVisibility.choices,
        default=ContentVisibility.PUBLIC,
        db_index=True,
        verbose_name="Visibility",
    )

    class Meta:
        abstract = True
