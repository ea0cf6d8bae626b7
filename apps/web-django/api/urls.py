from django.urls import path

from . import metrics
from .views_session import metrics_api
from .views_session import session_chart_api
from .views_session import session_hand_api
from .views_session import session_reset_api
from .views_session import session_start_api
from .views_session import session_state_api

urlpatterns = [
    path("session/start", session_start_api, name="session_start"),
    path("session/<str:session_id>/state", session_state_api, name="session_state"),
    path("session/<str:session_id>/hand", session_hand_api, name="session_hand"),
    path("session/<str:session_id>/reset", session_reset_api, name="session_reset"),
    path("session/<str:session_id>/chart", session_chart_api, name="session_chart"),
    path("metrics", metrics_api, name="metrics"),
    path("metrics/prometheus", metrics.prometheus_view, name="metrics_prom"),
]
