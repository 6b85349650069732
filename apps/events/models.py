from datetime import datetime

from django.db import models
from django.contrib.auth.models import User
from django.utils import timezone

from apps.accounts.mixins import VisibilityModelMixin


class CalendarEventQuerySet(models.QuerySet):

    def in_month(self, year, month):
        """Events starting within the given calendar month (current timezone)."""
        tz = timezone.get_current_timezone()
        start = datetime(year, month, 1, tzinfo=tz)
        if month == 12:
            end = datetime(year + 1, 1, 1, tzinfo=tz)
        else:
            end = datetime(year, month + 1, 1, tzinfo=tz)
        return self.filter(start_date__gte=start, start_date__lt=end)


class CalendarEvent(VisibilityModelMixin):
    """Shared church calendar entry."""

    created_by = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='calendar_events'
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    location = models.CharField(max_length=200, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CalendarEventQuerySet.as_manager()

    class Meta:
        ordering = ['start_date']
        indexes = [
            models.Index(fields=['start_date'], name='events_cale_start_d_2e8a4b_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.start_date:%Y-%m-%d})"

    def save(self, *args, **kwargs):
        # Single-point events end when they start
        if self.end_date is None:
            self.end_date = self.start_date
        super().save(*args, **kwargs)

    @property
    def is_multi_day(self):
        return self.end_date.date() != self.start_date.date()
