from django.db import models


class NavigatorSession(models.Model):
    session_id = models.CharField(max_length=64, unique=True)
    current_prediction = models.CharField(max_length=8, null=True, blank=True)  # Player/Banker
    reset_count = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"NavigatorSession({self.session_id})"


class HandRecord(models.Model):
    session = models.ForeignKey(NavigatorSession, on_delete=models.CASCADE, related_name="hands")
    sequence_number = models.IntegerField()
    player_score = models.IntegerField()
    banker_score = models.IntegerField()
    outcome = models.CharField(max_length=8)
    prior_prediction = models.CharField(max_length=8, null=True, blank=True)
    evaluation_result = models.CharField(max_length=8)
    unit_delta = models.IntegerField()
    running_total = models.IntegerField()
    margin = models.IntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["session", "sequence_number"]
        constraints = [
            models.UniqueConstraint(
                fields=["session", "sequence_number"], name="uniq_hand_sequence"
            )
        ]

    def __str__(self) -> str:
        return f"Hand#{self.sequence_number}({self.player_score}-{self.banker_score})"
