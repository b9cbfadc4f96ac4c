"""
URL configuration for flowcore project.
"""
# flowcore/urls.py
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("auth/", include("accounts.urls")),
    path("project/", include("projects.urls.project_urls")),
    path("reviews/", include("projects.urls.review_urls")),
    path("trello-board/", include("boards.urls")),
    path("attendance/", include("hr.urls.attendance_urls")),
    path("leave-request/", include("hr.urls.leave_urls")),
    path("office-expense/", include("finance.urls")),

    # OpenAPI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
