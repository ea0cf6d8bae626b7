from __future__ import annotations

from rest_framework import serializers

DIGITS = "0123456789"


class HandEntrySerializer(serializers.Serializer):
    """Score entry for one hand.

    Either both scores, or `entry` as two digits typed player-first ("82"),
    never both forms in one payload. Equal scores are refused before they reach the engine.
    """

    player_score = serializers.IntegerField(required=False, min_value=0, max_value=9)
    banker_score = serializers.IntegerField(required=False, min_value=0, max_value=9)
    entry = serializers.CharField(required=False, min_length=2, max_length=2, trim_whitespace=True)

    def validate_entry(self, value: str) -> str:
        if any(c not in DIGITS for c in value):
            raise serializers.ValidationError("entry must be two digits 0-9")
        return value

    def validate(self, attrs):
        entry = attrs.get("entry")
        if entry is not None:
            if "player_score" in attrs or "banker_score" in attrs:
                raise serializers.ValidationError(
                    "send either entry or player_score/banker_score, not both", code="mixed"
                )
            p, b = int(entry[0]), int(entry[1])
        else:
            p, b = attrs.get("player_score"), attrs.get("banker_score")
            if p is None or b is None:
                raise serializers.ValidationError(
                    "player_score and banker_score are required", code="required"
                )
        if p == b:
            raise serializers.ValidationError("tie not permitted", code="tie")
        return {"player_score": p, "banker_score": b}


def is_tie_rejection(errors) -> bool:
    return any(getattr(e, "code", None) == "tie" for e in errors.get("non_field_errors", []))
