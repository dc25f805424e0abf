from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Meet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(blank=True, max_length=255)),
                ("date", models.DateField()),
                ("home_team", models.CharField(max_length=120)),
                ("away_team", models.CharField(max_length=120)),
                ("head_official_name", models.CharField(max_length=120)),
                ("head_official_email", models.EmailField(max_length=254)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("closed", "Closed")],
                        default="active",
                        max_length=8,
                    ),
                ),
                ("created_at", models.DateTimeField(blank=True, default=django.utils.timezone.now, null=True)),
            ],
            options={
                "ordering": ("-date", "-created_at"),
            },
        ),
        migrations.CreateModel(
            name="Official",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120)),
                ("email", models.EmailField(max_length=254)),
                (
                    "position",
                    models.PositiveIntegerField(default=0, help_text="Orden dentro de la lista de invitados."),
                ),
                (
                    "meet",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invited_officials",
                        to="meets.meet",
                    ),
                ),
            ],
            options={
                "ordering": ("meet", "position", "id"),
            },
        ),
    ]
