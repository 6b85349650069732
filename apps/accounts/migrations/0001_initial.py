from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('phone', models.CharField(blank=True, max_length=30)),
                ('bio', models.TextField(blank=True)),
                ('role', models.CharField(choices=[('member', 'Member'), ('leader', 'Leader'), ('admin', 'Admin')], default='member', help_text='Member role; leaders and admins can publish restricted content', max_length=10)),
                ('profile_visibility', models.CharField(choices=[('public', 'Public'), ('friends', 'Friends only'), ('private', 'Only me')], default='friends', help_text='Who can see this profile in the directory', max_length=10)),
                ('phone_visibility', models.CharField(choices=[('public', 'Public'), ('friends', 'Friends only'), ('private', 'Only me')], default='friends', help_text='Who can see the phone number', max_length=10)),
                ('email_visibility', models.CharField(choices=[('public', 'Public'), ('friends', 'Friends only'), ('private', 'Only me')], default='friends', help_text='Who can see the email address', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [models.Index(fields=['role'], name='accounts_pr_role_3c1e2f_idx')],
            },
        ),
        migrations.CreateModel(
            name='Friendship',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('declined', 'Declined')], default='pending', max_length=10)),
                ('pair_key', models.CharField(editable=False, max_length=50, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('addressee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='friendships_received', to=settings.AUTH_USER_MODEL)),
                ('requester', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='friendships_requested', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['requester', 'status'], name='accounts_fr_request_8d2b1a_idx'),
                    models.Index(fields=['addressee', 'status'], name='accounts_fr_address_5f7c3e_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('requester', models.F('addressee')), _negated=True), name='friendship_distinct_members'),
                ],
            },
        ),
    ]
