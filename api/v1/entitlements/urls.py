"""
URL configuration for entitlement API endpoints.
"""

from django.urls import re_path

from api.v1.entitlements import views

app_name = "entitlements"

urlpatterns = [
    re_path(
        r"^(?P<action>[^/]+)/?$",
        views.EntitlementAPIView.as_view(),
        name="api-action",
    ),
    # Without an action the request still reaches the view and gets
    # the unknown action error
    re_path(
        r"^$",
        views.EntitlementAPIView.as_view(),
        name="api-root",
    ),
]
