from datetime import datetime, timedelta

from django.test import TestCase, override_settings
from django.utils import timezone

from apps.accounts.tests.helpers import make_member
from apps.events.models import CalendarEvent


@override_settings(TIME_ZONE='America/New_York')
class CalendarEventTests(TestCase):

    def setUp(self):
        self.leader = make_member('leader@example.com')

    def event(self, title, start, end=None):
        return CalendarEvent.objects.create(
            created_by=self.leader, title=title, start_date=start, end_date=end
        )

    def local(self, *args):
        return timezone.make_aware(datetime(*args))

    def test_end_defaults_to_start(self):
        start = self.local(2025, 3, 2, 10, 0)
        event = self.event('Sunday service', start)
        self.assertEqual(event.end_date, start)
        self.assertFalse(event.is_multi_day)

    def test_multi_day(self):
        start = self.local(2025, 3, 7, 18, 0)
        event = self.event('Retreat', start, start + timedelta(days=2))
        self.assertTrue(event.is_multi_day)

    def test_in_month_uses_local_month_boundaries(self):
        march_first = self.event('First', self.local(2025, 3, 1, 0, 30))
        march_last = self.event('Last', self.local(2025, 3, 31, 23, 30))
        self.event('February', self.local(2025, 2, 28, 23, 59))
        self.event('April', self.local(2025, 4, 1, 0, 0))

        in_march = list(CalendarEvent.objects.in_month(2025, 3))
        self.assertEqual(in_march, [march_first, march_last])

    def test_in_month_december_runs_to_new_year(self):
        last_night = self.event('Watch night', self.local(2025, 12, 31, 23, 59, 59, 999999))
        self.event('New year', self.local(2026, 1, 1, 0, 0))

        self.assertEqual(list(CalendarEvent.objects.in_month(2025, 12)), [last_night])

    def test_ordered_by_start(self):
        later = self.event('Later', self.local(2025, 5, 10, 9, 0))
        sooner = self.event('Sooner', self.local(2025, 5, 3, 9, 0))
        self.assertEqual(list(CalendarEvent.objects.all()), [sooner, later])
