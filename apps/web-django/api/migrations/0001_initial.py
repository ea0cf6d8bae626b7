import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True
    dependencies = []
    operations = [
        migrations.CreateModel(
            name="NavigatorSession",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("session_id", models.CharField(max_length=64, unique=True)),
                (
                    "current_prediction",
                    models.CharField(blank=True, max_length=8, null=True),
                ),
                ("reset_count", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="HandRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("sequence_number", models.IntegerField()),
                ("player_score", models.IntegerField()),
                ("banker_score", models.IntegerField()),
                ("outcome", models.CharField(max_length=8)),
                (
                    "prior_prediction",
                    models.CharField(blank=True, max_length=8, null=True),
                ),
                ("evaluation_result", models.CharField(max_length=8)),
                ("unit_delta", models.IntegerField()),
                ("running_total", models.IntegerField()),
                ("margin", models.IntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "session",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="hands",
                        to="api.navigatorsession",
                    ),
                ),
            ],
            options={
                "ordering": ["session", "sequence_number"],
            },
        ),
        migrations.AddConstraint(
            model_name="handrecord",
            constraint=models.UniqueConstraint(
                fields=("session", "sequence_number"), name="uniq_hand_sequence"
            ),
        ),
    ]
