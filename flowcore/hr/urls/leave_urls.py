# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from hr.views.leave_view import LeaveRequestViewSet

app_name = "leave"

# mounted at /leave-request/, so the resource itself sits at the router root
router = SimpleRouter()
router.register(r"", LeaveRequestViewSet, basename="leave-requests")

urlpatterns = [
    path("", include(router.urls)),
]
