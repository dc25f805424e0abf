from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("meets", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DQSubmission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("team", models.CharField(max_length=120)),
                ("event_number", models.CharField(max_length=16)),
                ("heat_number", models.CharField(max_length=16)),
                ("lane_number", models.CharField(max_length=16)),
                ("swimmer_name", models.CharField(max_length=160)),
                ("stroke", models.CharField(max_length=32)),
                ("infractions", models.JSONField(blank=True, default=list)),
                ("official_email", models.EmailField(max_length=254)),
                ("notes", models.TextField(blank=True, default="")),
                ("submitted_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                (
                    "status",
                    models.CharField(choices=[("pending", "Pending")], default="pending", max_length=8),
                ),
                (
                    "meet",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="dq_submissions",
                        to="meets.meet",
                    ),
                ),
            ],
            options={
                "ordering": ("-submitted_at",),
            },
        ),
    ]
