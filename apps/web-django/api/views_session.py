"""
API 视图：会话 / 手牌录入 / 重置
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import asdict

from baccarat_core.chart import chart_series
from baccarat_core.errors import InvalidInput
from baccarat_core.session_flow import reset_session, start_session, submit_hand
from baccarat_core.session_types import Hand, SessionState
from baccarat_core.session_view import bet_label, fold_session, hand_to_dict, snapshot_session
from baccarat_core.version import ENGINE_COMMIT, SCHEMA_VERSION
from django.db import transaction
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from . import metrics
from .models import HandRecord, NavigatorSession
from .serializers import HandEntrySerializer, is_tie_rejection
from .state import METRICS

log = logging.getLogger(__name__)


def _hand_from_record(r: HandRecord) -> Hand:
    return Hand(
        sequence_number=r.sequence_number,
        player_score=r.player_score,
        banker_score=r.banker_score,
        outcome=r.outcome,
        prior_prediction=r.prior_prediction,
        evaluation_result=r.evaluation_result,
        unit_delta=r.unit_delta,
        running_total=r.running_total,
        margin=r.margin,
    )


def load_session(s: NavigatorSession) -> SessionState:
    """Fold persisted rows back into the immutable engine value."""
    rows = s.hands.order_by("sequence_number")
    return fold_session((_hand_from_record(r) for r in rows), s.current_prediction or None)


def _server_error(route: str, what: str, e: Exception) -> Response:
    METRICS["error_total"] += 1
    metrics.inc_api_error(route, "exception")
    log.exception("%s failed: %s", what, e)
    return Response({"detail": f"{what} failed: {e}"}, status=500)


def _not_found() -> Response:
    return Response({"detail": "session not found"}, status=status.HTTP_404_NOT_FOUND)


def _session_payload(s: NavigatorSession, state: SessionState) -> dict:
    return {
        "session_id": s.session_id,
        **snapshot_session(state),
        "engine_commit": ENGINE_COMMIT,
        "schema_version": SCHEMA_VERSION,
    }


HandPayload = inline_serializer(
    name="HandPayload",
    fields={
        "sequence_number": serializers.IntegerField(),
        "player_score": serializers.IntegerField(),
        "banker_score": serializers.IntegerField(),
        "outcome": serializers.ChoiceField(choices=["Player", "Banker", "Tie"]),
        "prior_prediction": serializers.CharField(allow_null=True),
        "evaluation_result": serializers.ChoiceField(choices=["Win", "Loss", "Push"]),
        "unit_delta": serializers.IntegerField(),
        "running_total": serializers.IntegerField(),
        "margin": serializers.IntegerField(),
    },
)

SessionStateResp = inline_serializer(
    name="SessionStateResp",
    fields={
        "session_id": serializers.CharField(),
        "status": serializers.ChoiceField(choices=["empty", "active"]),
        "current_prediction": serializers.CharField(allow_null=True),
        "next_bet": serializers.CharField(),
        "count": serializers.IntegerField(),
        "running_total": serializers.IntegerField(),
        "hands": serializers.ListField(child=serializers.JSONField()),
        "history": serializers.ListField(child=serializers.JSONField()),
        "summary": serializers.JSONField(),
        "engine_commit": serializers.CharField(),
        "schema_version": serializers.CharField(),
    },
)


# ---------- 1) POST /session/start ----------
@extend_schema(request=None, responses={200: SessionStateResp})
@api_view(["POST"])
def session_start_api(request):
    t0 = time.perf_counter()
    route = "session/start"
    method = "POST"
    status_label = "200"
    try:
        s = NavigatorSession.objects.create(session_id=str(uuid.uuid4()))
        state = start_session()
        METRICS["sessions_total"] += 1
        metrics.inc_session_start("success")
        log.info("session_start", extra={"event": "session_start", "session_id": s.session_id})
        return Response(_session_payload(s, state))
    except Exception as e:
        METRICS["error_total"] += 1
        metrics.inc_session_start("failed")
        metrics.inc_api_error(route, "exception")
        status_label = "500"
        log.exception("Session creation failed: %s", e)
        return Response({"detail": f"Session creation failed: {e}"}, status=500)
    finally:
        dur = time.perf_counter() - t0
        METRICS["last_latency_ms"] = int(dur * 1000)
        metrics.observe_request(route, method, status_label, dur)


# ---------- 2) GET /session/<id>/state ----------
@extend_schema(responses={200: SessionStateResp})
@api_view(["GET"])
def session_state_api(request, session_id: str):
    t0 = time.perf_counter()
    route = "session/state"
    method = "GET"
    status_label = "200"
    try:
        try:
            s = NavigatorSession.objects.get(session_id=session_id)
        except NavigatorSession.DoesNotExist:
            status_label = "404"
            return _not_found()
        return Response(_session_payload(s, load_session(s)))
    except Exception as e:
        status_label = "500"
        return _server_error(route, "Session state", e)
    finally:
        metrics.observe_request(route, method, status_label, time.perf_counter() - t0)


# ---------- 3) POST /session/<id>/hand ----------
SubmitHandResp = inline_serializer(
    name="SubmitHandResp",
    fields={
        "session_id": serializers.CharField(),
        "hand": HandPayload,
        "current_prediction": serializers.CharField(allow_null=True),
        "next_bet": serializers.CharField(),
        "count": serializers.IntegerField(),
        "running_total": serializers.IntegerField(),
    },
)


@extend_schema(request=HandEntrySerializer, responses={200: SubmitHandResp})
@api_view(["POST"])
def session_hand_api(request, session_id: str):
    t0 = time.perf_counter()
    route = "session/hand"
    method = "POST"
    status_label = "200"
    try:
        entry = HandEntrySerializer(data=request.data)
        if not entry.is_valid():
            status_label = "400"
            METRICS["rejected_total"] += 1
            metrics.inc_entry_rejected("tie" if is_tie_rejection(entry.errors) else "invalid")
            return Response(entry.errors, status=status.HTTP_400_BAD_REQUEST)
        p = entry.validated_data["player_score"]
        b = entry.validated_data["banker_score"]

        # 同一会话的读-算-写需要串行：行锁 + 事务
        with transaction.atomic():
            try:
                s = NavigatorSession.objects.select_for_update().get(session_id=session_id)
            except NavigatorSession.DoesNotExist:
                status_label = "404"
                return _not_found()
            state = load_session(s)
            try:
                new_state, hand = submit_hand(state, p, b)
            except InvalidInput as e:
                status_label = "400"
                METRICS["rejected_total"] += 1
                metrics.inc_entry_rejected("engine")
                return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
            HandRecord.objects.create(session=s, **asdict(hand))
            s.current_prediction = new_state.current_prediction
            s.save(update_fields=["current_prediction", "updated_at"])

        METRICS["hands_total"] += 1
        metrics.inc_hand_submitted(hand.outcome, hand.evaluation_result)
        log.info(
            "hand_submitted",
            extra={
                "event": "hand_submitted",
                "session_id": session_id,
                "sequence_number": hand.sequence_number,
                "outcome": hand.outcome,
                "evaluation_result": hand.evaluation_result,
                "running_total": hand.running_total,
                "next_prediction": new_state.current_prediction,
            },
        )
        return Response(
            {
                "session_id": session_id,
                "hand": hand_to_dict(hand),
                "current_prediction": new_state.current_prediction,
                "next_bet": bet_label(new_state.current_prediction),
                "count": new_state.ledger.count(),
                "running_total": new_state.running_total,
            }
        )
    except Exception as e:
        METRICS["error_total"] += 1
        metrics.inc_api_error(route, "exception")
        status_label = "500"
        log.exception("Hand submission failed for %s: %s", session_id, e)
        return Response({"detail": f"Hand submission failed: {e}"}, status=500)
    finally:
        metrics.observe_request(route, method, status_label, time.perf_counter() - t0)


# ---------- 4) POST /session/<id>/reset ----------
@extend_schema(request=None, responses={200: SessionStateResp})
@api_view(["POST"])
def session_reset_api(request, session_id: str):
    t0 = time.perf_counter()
    route = "session/reset"
    method = "POST"
    status_label = "200"
    try:
        with transaction.atomic():
            try:
                s = NavigatorSession.objects.select_for_update().get(session_id=session_id)
            except NavigatorSession.DoesNotExist:
                status_label = "404"
                return _not_found()
            before = load_session(s)
            state = reset_session(before)
            # 空会话重置是 no-op
            if before.status == "active":
                s.hands.all().delete()
                s.current_prediction = None
                s.reset_count += 1
                s.save(update_fields=["current_prediction", "reset_count", "updated_at"])
                METRICS["resets_total"] += 1
            metrics.inc_session_reset(before.status)
        return Response(_session_payload(s, state))
    except Exception as e:
        status_label = "500"
        return _server_error(route, "Session reset", e)
    finally:
        metrics.observe_request(route, method, status_label, time.perf_counter() - t0)


# ---------- 5) GET /session/<id>/chart ----------
ChartResp = inline_serializer(
    name="ChartResp",
    fields={
        "session_id": serializers.CharField(),
        "points": serializers.ListField(child=serializers.JSONField()),
        "x_domain": serializers.ListField(child=serializers.IntegerField()),
        "y_domain": serializers.ListField(child=serializers.IntegerField()),
        "baseline": serializers.IntegerField(),
    },
)


@extend_schema(responses={200: ChartResp})
@api_view(["GET"])
def session_chart_api(request, session_id: str):
    t0 = time.perf_counter()
    route = "session/chart"
    method = "GET"
    status_label = "200"
    try:
        try:
            s = NavigatorSession.objects.get(session_id=session_id)
        except NavigatorSession.DoesNotExist:
            status_label = "404"
            return _not_found()
        state = load_session(s)
        return Response({"session_id": s.session_id, **chart_series(state.ledger)})
    except Exception as e:
        status_label = "500"
        return _server_error(route, "Chart", e)
    finally:
        metrics.observe_request(route, method, status_label, time.perf_counter() - t0)


# ---------- 6) GET /metrics ----------
@extend_schema(
    responses={
        200: inline_serializer(
            name="Metrics",
            fields={
                "sessions_total": serializers.IntegerField(),
                "hands_total": serializers.IntegerField(),
                "resets_total": serializers.IntegerField(),
                "rejected_total": serializers.IntegerField(),
                "error_total": serializers.IntegerField(),
                "last_latency_ms": serializers.IntegerField(allow_null=True),
                "db_sessions_total": serializers.IntegerField(),
                "db_hands_total": serializers.IntegerField(),
            },
        )
    }
)
@api_view(["GET"])
def metrics_api(request):
    t0 = time.perf_counter()
    try:
        payload = dict(METRICS)
        payload["db_sessions_total"] = NavigatorSession.objects.count()
        payload["db_hands_total"] = HandRecord.objects.count()
        return Response(payload)
    finally:
        metrics.observe_request("metrics", "GET", "200", time.perf_counter() - t0)
