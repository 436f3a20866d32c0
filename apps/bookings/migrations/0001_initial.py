from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("spaces", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                ("start_time", models.CharField(max_length=8)),
                ("end_time", models.CharField(max_length=8)),
                (
                    "duration_hours",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Booked hours after overnight normalization.",
                        max_digits=5,
                    ),
                ),
                ("total_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("currency", models.CharField(default="INR", max_length=3)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                            ("completed", "Completed"),
                        ],
                        default="confirmed",
                        max_length=20,
                    ),
                ),
                ("contact_number", models.CharField(blank=True, max_length=20)),
                ("notes", models.TextField(blank=True, max_length=500)),
                (
                    "expires_at",
                    models.DateTimeField(help_text="Moment the booked slot ends; the record is removed after it."),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "renter",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "space",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="spaces.space",
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["space", "date"], name="booking_space_date_idx"),
                    models.Index(fields=["expires_at"], name="booking_expires_at_idx"),
                    models.Index(fields=["status"], name="booking_status_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status", "cancelled"), _negated=True),
                        fields=("space", "date", "start_time"),
                        name="booking_unique_live_start",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("duration_hours__gte", 1)),
                        name="booking_min_duration",
                    ),
                ],
            },
        ),
    ]
